"""
Tests for the field extractor.

Tests cover:
- Value extraction with '=' and ':' delimiters
- Quote and whitespace handling
- First-match-wins and prefix matching
- FieldNotFoundError, MalformedLineError and SourceReadError
- FieldQuery dataclass
"""

import pytest

from hostprobe.errors import (
    ErrorCode,
    FieldNotFoundError,
    MalformedLineError,
    SourceReadError,
)
from hostprobe.extractor import FieldQuery, extract, extract_query, find_field


class TestFindField:
    """Tests for find_field on already-read content."""

    def test_returns_unquoted_value(self):
        """Should strip one pair of surrounding double quotes."""
        assert find_field('NAME="Example OS"\n', "NAME", "=") == "Example OS"

    def test_unquoted_value(self):
        assert find_field("ID=fedora\n", "ID", "=") == "fedora"

    def test_colon_delimiter_preserves_whitespace(self):
        """Whitespace around the value is left for the caller to trim."""
        value = find_field("model name\t: Test CPU\n", "model name", ":")
        assert value == " Test CPU"

    def test_first_match_wins(self):
        content = "NAME=first\nNAME=second\n"
        assert find_field(content, "NAME", "=") == "first"

    def test_key_is_a_prefix_match(self):
        """A key matches any line starting with it, including longer keys."""
        content = "ID_LIKE=debian\nID=ubuntu\n"
        assert find_field(content, "ID", "=") == "debian"
        assert find_field(content, "ID=", "=") == "ubuntu"

    def test_match_is_case_sensitive(self):
        with pytest.raises(FieldNotFoundError):
            find_field("name=lower\n", "NAME", "=")

    def test_key_must_start_the_line(self):
        with pytest.raises(FieldNotFoundError):
            find_field("  NAME=indented\n", "NAME", "=")

    def test_splits_on_first_delimiter_only(self):
        """Everything after the first delimiter belongs to the value."""
        content = 'ANSI_COLOR="0;38;2;60;110;180"\nURL=a=b=c\n'
        assert find_field(content, "URL", "=") == "a=b=c"

    def test_empty_value(self):
        assert find_field('VERSION_CODENAME=""\n', "VERSION_CODENAME", "=") == ""
        assert find_field("VERSION_CODENAME=\n", "VERSION_CODENAME", "=") == ""

    def test_lone_quote_is_kept(self):
        assert find_field('NAME="unterminated\n', "NAME", "=") == '"unterminated'

    def test_missing_key_raises(self):
        with pytest.raises(FieldNotFoundError) as exc_info:
            find_field("NAME=x\n", "VERSION_ID", "=", path="/etc/os-release")

        assert exc_info.value.key == "VERSION_ID"
        assert exc_info.value.code == ErrorCode.FIELD_NOT_FOUND
        assert "/etc/os-release" in str(exc_info.value)

    def test_empty_content_raises(self):
        with pytest.raises(FieldNotFoundError):
            find_field("", "NAME", "=")

    def test_line_without_delimiter_raises(self):
        with pytest.raises(MalformedLineError) as exc_info:
            find_field("NAME Example\n", "NAME", "=")

        assert exc_info.value.code == ErrorCode.MALFORMED_LINE
        assert exc_info.value.error.context["line"] == "NAME Example"

    def test_malformed_first_match_is_not_skipped(self):
        """A malformed first match fails even if a later line is well-formed."""
        with pytest.raises(MalformedLineError):
            find_field("NAME\nNAME=later\n", "NAME", "=")

    @pytest.mark.parametrize("separator", ["\r", "\x0b", "\x0c", "\x1c", "\x85", "\u2028"])
    def test_only_newline_ends_a_line(self, separator):
        """Other Unicode line boundaries stay inside the value."""
        content = f"NAME=Example{separator}ID=evil\nVERSION_ID=1\n"
        assert find_field(content, "NAME", "=") == f"Example{separator}ID=evil"
        with pytest.raises(FieldNotFoundError):
            find_field(content, "ID", "=")

    def test_trailing_carriage_return_is_dropped(self):
        assert find_field('NAME="Example OS"\r\nID=example\r\n', "NAME", "=") == "Example OS"
        assert find_field("ID=example\r\n", "ID", "=") == "example"

    @pytest.mark.parametrize("delimiter", ["", "==", None, 3])
    def test_invalid_delimiter_raises_value_error(self, delimiter):
        with pytest.raises(ValueError):
            find_field("NAME=x\n", "NAME", delimiter)


class TestExtract:
    """Tests for extract reading from files."""

    def test_extracts_from_file(self, write_source):
        path = write_source("os-release", 'NAME="Example OS"\nVERSION_ID=1\n')
        assert extract(path, "NAME", "=") == "Example OS"

    def test_accepts_str_path(self, write_source):
        path = write_source("os-release", "VERSION_ID=1\n")
        assert extract(str(path), "VERSION_ID", "=") == "1"

    def test_is_idempotent(self, os_release_file):
        first = extract(os_release_file, "PRETTY_NAME", "=")
        second = extract(os_release_file, "PRETTY_NAME", "=")
        assert first == second == "Fedora Linux 40 (Workstation Edition)"

    def test_rereads_file_on_each_call(self, write_source):
        path = write_source("os-release", "VERSION_ID=1\n")
        assert extract(path, "VERSION_ID", "=") == "1"

        path.write_text("VERSION_ID=2\n", encoding="utf-8")
        assert extract(path, "VERSION_ID", "=") == "2"

    def test_missing_file_raises_source_read_error(self, missing_file):
        with pytest.raises(SourceReadError) as exc_info:
            extract(missing_file, "NAME", "=")

        assert exc_info.value.path == str(missing_file)
        assert exc_info.value.code == ErrorCode.SOURCE_UNREADABLE
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory_raises_source_read_error(self, tmp_path):
        with pytest.raises(SourceReadError):
            extract(tmp_path, "NAME", "=")

    def test_invalid_bytes_are_replaced(self, tmp_path):
        path = tmp_path / "os-release"
        path.write_bytes(b'NAME="Caf\xe9 OS"\n')
        assert extract(path, "NAME", "=") == "Caf\ufffd OS"

    def test_crlf_line_endings(self, write_source):
        path = write_source("machine-info", 'PRETTY_HOSTNAME="Box"\r\nCHASSIS=vm\r\n')
        assert extract(path, "PRETTY_HOSTNAME", "=") == "Box"

    def test_lone_carriage_return_does_not_split(self, tmp_path):
        path = tmp_path / "os-release"
        path.write_bytes(b"NAME=Example\rID=evil\n")
        assert extract(path, "NAME", "=") == "Example\rID=evil"
        with pytest.raises(FieldNotFoundError):
            extract(path, "ID", "=")


class TestFieldQuery:
    """Tests for FieldQuery and extract_query."""

    def test_is_frozen(self):
        query = FieldQuery("/etc/os-release", "NAME", "=")
        with pytest.raises(AttributeError):
            query.key = "ID"

    def test_extract_query(self, cpuinfo_file):
        query = FieldQuery(str(cpuinfo_file), "cpu cores", ":")
        assert extract_query(query).strip() == "20"
