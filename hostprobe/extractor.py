"""
Field extraction from line-oriented key/value text sources.

Linux publishes most host facts as text: ``/etc/os-release`` holds
``KEY="value"`` lines and ``/proc/cpuinfo`` holds ``key : value`` lines.
Every fact in hostprobe is read through the single routine in this module
so the parsing rules are defined once.

Public exports:
    FieldQuery: Where and how to find one fact
    extract: Read a file and return the value bound to a key
    extract_query: Run a FieldQuery
    find_field: The parsing step of extract, on already-read content
"""

import logging
from dataclasses import dataclass

from hostprobe.error_messages import format_error
from hostprobe.errors import FieldNotFoundError, MalformedLineError, SourceReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldQuery:
    """
    Location of one fact inside a key/value text source.

    Attributes:
        path: File to read.
        key: Prefix a line must start with (case-sensitive).
        delimiter: Single character separating key from value.
    """
    path: str
    key: str
    delimiter: str


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def find_field(content: str, key: str, delimiter: str, path: str = "<string>") -> str:
    """
    Return the value bound to ``key`` in already-read content.

    Lines end at ``\\n``; a trailing ``\\r`` is dropped. The first line
    starting with ``key`` wins. The line is split on the first
    occurrence of ``delimiter`` and everything after it is the value, with
    one pair of surrounding double quotes removed. Whitespace is preserved.

    Args:
        content: Full text of the source.
        key: Prefix the line must start with.
        delimiter: Single-character separator.
        path: Name of the source, used in error messages only.

    Returns:
        The extracted value.

    Raises:
        FieldNotFoundError: No line starts with ``key``.
        MalformedLineError: The matching line has no ``delimiter``.

    Example:
        >>> find_field('NAME="Example OS"\\nVERSION_ID=1\\n', 'NAME', '=')
        'Example OS'
    """
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(format_error('INVALID_DELIMITER', delimiter=delimiter))

    for line in content.split('\n'):
        if line.endswith('\r'):
            line = line[:-1]
        if not line.startswith(key):
            continue

        _, found, value = line.partition(delimiter)
        if not found:
            raise MalformedLineError(
                format_error('MALFORMED_LINE', path=path, key=key, delimiter=delimiter),
                path=path,
                key=key,
                delimiter=delimiter,
                line=line,
            )
        return _strip_quotes(value)

    raise FieldNotFoundError(
        format_error('FIELD_NOT_FOUND', path=path, key=key),
        path=path,
        key=key,
    )


def extract(source, key: str, delimiter: str) -> str:
    """
    Read ``source`` and return the value bound to ``key``.

    The file is read in full on every call; nothing is cached.

    Args:
        source: Path of the file to read (str or os.PathLike).
        key: Prefix the line must start with.
        delimiter: Single-character separator.

    Returns:
        The extracted value, quotes stripped, whitespace untouched.

    Raises:
        SourceReadError: The file cannot be opened or read.
        FieldNotFoundError: No line starts with ``key``.
        MalformedLineError: The matching line has no ``delimiter``.
    """
    path = str(source)
    logger.debug(f"Extracting {key!r} from {path} (delimiter {delimiter!r})")

    try:
        with open(source, 'r', encoding='utf-8', errors='replace', newline='') as f:
            content = f.read()
    except OSError as e:
        raise SourceReadError(
            format_error('SOURCE_UNREADABLE', path=path, error=e.strerror or str(e)),
            path=path,
            reason=type(e).__name__,
        ) from e

    return find_field(content, key, delimiter, path=path)


def extract_query(query: FieldQuery) -> str:
    """Run ``query`` through :func:`extract`."""
    return extract(query.path, query.key, query.delimiter)
