"""
Host facts assembled from well-known Linux sources.

Each fact is a fixed FieldQuery run through the extractor, followed by the
same post-processing for every fact of its kind:

- text facts: quotes stripped by the extractor, then surrounding
  whitespace trimmed
- count facts: trimmed, then parsed as an unsigned decimal integer

Every helper accepts ``source`` to read an alternate file with the same
layout (a mounted image's os-release, a captured cpuinfo, ...).

Extraction failures propagate unchanged; see ``hostprobe.errors``.
"""

import dataclasses
import logging
import os
import socket
from typing import Optional

from hostprobe.config import (
    CPUINFO_PATH,
    MACHINE_INFO_PATH,
    OS_RELEASE_PATH,
    WINDOWS_DISPLAY_VERSION_VALUE,
    WINDOWS_EDITION_VALUE,
    WINDOWS_RELEASE_ID_VALUE,
    WINDOWS_HIVE,
    WINDOWS_VERSION_SUBKEY,
    WSL_INTEROP_PATH,
)
from hostprobe.error_messages import format_error
from hostprobe.errors import FieldNotFoundError, ParseError, ProviderUnavailable
from hostprobe.extractor import FieldQuery, extract_query
from hostprobe.interfaces.providers import RegistryProvider

logger = logging.getLogger(__name__)


# /etc/os-release. ``ID`` is also a prefix of ``ID_LIKE``, so the delimiter
# is part of that key.
DISTRO_NAME = FieldQuery(OS_RELEASE_PATH, "NAME", "=")
DISTRO_PRETTY_NAME = FieldQuery(OS_RELEASE_PATH, "PRETTY_NAME", "=")
DISTRO_ID = FieldQuery(OS_RELEASE_PATH, "ID=", "=")
DISTRO_VERSION = FieldQuery(OS_RELEASE_PATH, "VERSION_ID", "=")
CPE_NAME = FieldQuery(OS_RELEASE_PATH, "CPE_NAME", "=")
PLATFORM_ID = FieldQuery(OS_RELEASE_PATH, "PLATFORM_ID", "=")

# /etc/machine-info
PRETTY_HOSTNAME = FieldQuery(MACHINE_INFO_PATH, "PRETTY_HOSTNAME", "=")

# /proc/cpuinfo, first processor block
CPU_MODEL = FieldQuery(CPUINFO_PATH, "model name", ":")
CPU_CORES = FieldQuery(CPUINFO_PATH, "cpu cores", ":")
CPU_SIBLINGS = FieldQuery(CPUINFO_PATH, "siblings", ":")


@dataclasses.dataclass
class LinuxRelease:
    """Distribution name and version of a Linux host."""
    distro: str
    version_id: Optional[str] = None

    @property
    def os_variant(self) -> str:
        return self.distro

    @property
    def version(self) -> Optional[str]:
        return self.version_id


@dataclasses.dataclass
class WindowsRelease:
    """Edition and display version of a Windows host."""
    edition: str
    version: Optional[str] = None

    @property
    def os_variant(self) -> str:
        return self.edition


def _query(query: FieldQuery, source) -> FieldQuery:
    if source is None:
        return query
    return dataclasses.replace(query, path=os.fspath(source))


def _text_fact(query: FieldQuery, source=None) -> str:
    return extract_query(_query(query, source)).strip()


def parse_unsigned(value: str, fact: str = "value") -> int:
    """
    Parse an extracted value as an unsigned decimal integer.

    Args:
        value: Extracted text; surrounding whitespace is ignored.
        fact: Name of the fact, used in the error message.

    Returns:
        The parsed integer (>= 0).

    Raises:
        ParseError: ``value`` is not a plain run of decimal digits.
    """
    text = value.strip()
    # isdigit() also accepts superscripts and other non-ASCII digits
    if not (text.isascii() and text.isdigit()):
        raise ParseError(
            format_error('NOT_UNSIGNED_INT', fact=fact, value=value),
            value=value,
            expected="unsigned decimal integer",
        )
    return int(text)


def distro_name(source=None) -> str:
    """Distribution name, e.g. 'Fedora Linux'."""
    return _text_fact(DISTRO_NAME, source)


def distro_pretty_name(source=None) -> str:
    """Human-readable distribution name with version, e.g. 'Fedora Linux 40 (Workstation Edition)'."""
    return _text_fact(DISTRO_PRETTY_NAME, source)


def distro_id(source=None) -> str:
    """Lowercase distribution identifier, e.g. 'fedora'."""
    return _text_fact(DISTRO_ID, source)


def distro_version(source=None) -> str:
    """Distribution version, e.g. '40' or '22.04'."""
    return _text_fact(DISTRO_VERSION, source)


def cpe_name(source=None) -> str:
    return _text_fact(CPE_NAME, source)


def platform_id(source=None) -> str:
    return _text_fact(PLATFORM_ID, source)


def pretty_hostname(source=None) -> str:
    return _text_fact(PRETTY_HOSTNAME, source)


def hostname() -> str:
    """Kernel hostname. ``/etc/hostname`` has no key/value structure to extract from."""
    return socket.gethostname()


def cpu_model(source=None) -> str:
    """CPU model name of the first processor listed in cpuinfo."""
    return _text_fact(CPU_MODEL, source)


def cpu_core_count(source=None) -> int:
    """Physical cores per package ('cpu cores')."""
    return parse_unsigned(_text_fact(CPU_CORES, source), fact="cpu cores")


def cpu_logical_count(source=None) -> int:
    """Logical processors per package ('siblings')."""
    return parse_unsigned(_text_fact(CPU_SIBLINGS, source), fact="siblings")


def is_subsystem(marker=WSL_INTEROP_PATH) -> bool:
    """
    Return True if the host is a Windows Subsystem for Linux guest.

    A presence check on the WSL interop marker; absence is a normal False.
    """
    # os.path.exists reports False for unreadable or invalid paths
    present = os.path.exists(marker)
    logger.debug(f"WSL marker {marker} present: {present}")
    return present


def linux_release(source=None) -> LinuxRelease:
    """Distribution pretty name and version. Rolling releases have no VERSION_ID."""
    return LinuxRelease(
        distro=distro_pretty_name(source),
        version_id=read_optional(distro_version, source),
    )


def _windows_version(registry: RegistryProvider) -> Optional[str]:
    for value_name in (WINDOWS_DISPLAY_VERSION_VALUE, WINDOWS_RELEASE_ID_VALUE):
        try:
            return registry.get_string(WINDOWS_HIVE, WINDOWS_VERSION_SUBKEY, value_name).strip()
        except ProviderUnavailable as e:
            logger.debug(f"Registry value {value_name} unavailable: {e.error.message}")
    return None


def windows_release(registry: RegistryProvider) -> WindowsRelease:
    """
    Read the edition and version through ``registry``.

    The edition is required. The version is ``DisplayVersion``, falling back
    to ``ReleaseId`` on older builds, and None when neither is published.
    """
    return WindowsRelease(
        edition=registry.get_string(WINDOWS_HIVE, WINDOWS_VERSION_SUBKEY, WINDOWS_EDITION_VALUE).strip(),
        version=_windows_version(registry),
    )


def read_optional(fact, *args, **kwargs) -> Optional[str]:
    """
    Call a fact helper, returning None when the host does not publish the field.

    Only FieldNotFoundError is absorbed. Unreadable or malformed sources
    still raise.
    """
    try:
        return fact(*args, **kwargs)
    except FieldNotFoundError as e:
        logger.debug(f"Optional fact not published: {e.error.message}")
        return None
