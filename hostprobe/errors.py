"""
Custom exceptions for hostprobe.

This module provides custom exception classes with user-friendly messaging
that include:
- Clear error descriptions
- Technical details for debugging
- Actionable suggestions for resolution

Every failure to determine a host fact surfaces as one of these typed
exceptions. Nothing in the package substitutes a default value for a fact
it could not read.
"""

from dataclasses import dataclass, field
from typing import Optional
from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes for hostprobe errors."""
    # Extraction errors (1xx)
    SOURCE_UNREADABLE = "E101"
    FIELD_NOT_FOUND = "E102"
    MALFORMED_LINE = "E103"

    # Value errors (2xx)
    PARSE_FAILED = "E201"

    # Provider errors (3xx)
    PROVIDER_UNAVAILABLE = "E301"

    # Internal errors (9xx)
    INTERNAL_ERROR = "E901"


@dataclass
class ProbeError:
    """
    Structured error information for hostprobe.

    Attributes:
        code: Machine-readable error code.
        message: User-facing error message.
        details: Technical details for debugging.
        suggestion: How to fix the issue.
        context: Additional context information.
    """
    code: ErrorCode
    message: str
    details: str = ""
    suggestion: str = ""
    context: dict = field(default_factory=dict)

    def __str__(self) -> str:
        """Format error for display."""
        lines = [f"[{self.code.value}] {self.message}"]
        if self.details:
            lines.append(f"  Details: {self.details}")
        if self.suggestion:
            lines.append(f"  Suggestion: {self.suggestion}")
        return "\n".join(lines)


class HostProbeException(Exception):
    """
    Base exception class for hostprobe.

    All custom exceptions inherit from this class and provide
    structured error information.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR,
                 details: str = "", suggestion: str = "", **context):
        self.error = ProbeError(
            code=code,
            message=message,
            details=details,
            suggestion=suggestion,
            context=context
        )
        super().__init__(str(self.error))

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @property
    def suggestion(self) -> str:
        return self.error.suggestion


def _join_details(**parts) -> str:
    return "; ".join(f"{label}: {value}" for label, value in parts.items() if value is not None)


class SourceReadError(HostProbeException):
    """
    Raised when a text source cannot be read.

    Examples:
        - /etc/os-release does not exist (non-Linux host, minimal container)
        - Permission denied on the file
        - The path is a directory
    """

    def __init__(self, message: str, path: str = None, reason: str = None,
                 suggestion: str = None):
        super().__init__(
            message=message,
            code=ErrorCode.SOURCE_UNREADABLE,
            details=_join_details(Path=path, Reason=reason),
            suggestion=suggestion or "Verify the file exists and is readable on this host",
            path=path,
            reason=reason
        )

    @property
    def path(self) -> Optional[str]:
        return self.error.context.get("path")


class FieldNotFoundError(HostProbeException):
    """
    Raised when no line of a source starts with the requested key.
    """

    def __init__(self, message: str, path: str = None, key: str = None,
                 suggestion: str = None):
        super().__init__(
            message=message,
            code=ErrorCode.FIELD_NOT_FOUND,
            details=_join_details(Path=path, Key=repr(key) if key is not None else None),
            suggestion=suggestion or "The host does not publish this field; the fact cannot be determined",
            path=path,
            key=key
        )

    @property
    def key(self) -> Optional[str]:
        return self.error.context.get("key")


class MalformedLineError(HostProbeException):
    """
    Raised when the line matching a key has no delimiter to split on.
    """

    def __init__(self, message: str, path: str = None, key: str = None,
                 delimiter: str = None, line: str = None, suggestion: str = None):
        if line is not None and len(line) > 200:
            line = line[:200] + "..."
        super().__init__(
            message=message,
            code=ErrorCode.MALFORMED_LINE,
            details=_join_details(
                Path=path,
                Key=repr(key) if key is not None else None,
                Delimiter=repr(delimiter) if delimiter is not None else None,
                Line=repr(line) if line is not None else None,
            ),
            suggestion=suggestion or "Check the file for a corrupted or non-standard entry",
            path=path,
            key=key,
            delimiter=delimiter,
            line=line
        )


class ParseError(HostProbeException):
    """
    Raised when an extracted value cannot be coerced to the expected type.

    Extraction succeeded; the value itself is not what the fact requires
    (for example a core count that is not an unsigned integer).
    """

    def __init__(self, message: str, value: str = None, expected: str = None,
                 suggestion: str = None):
        super().__init__(
            message=message,
            code=ErrorCode.PARSE_FAILED,
            details=_join_details(
                Value=repr(value) if value is not None else None,
                Expected=expected,
            ),
            suggestion=suggestion or "The source reported a value in an unexpected format",
            value=value,
            expected=expected
        )


class ProviderUnavailable(HostProbeException):
    """
    Raised when an external capability is absent or denies access.

    Examples:
        - Registry access requested on a non-Windows host
        - NVML library not installed or no driver loaded
        - No public-IP echo service reachable
    """

    def __init__(self, message: str, provider: str = None, reason: str = None,
                 suggestion: str = None):
        super().__init__(
            message=message,
            code=ErrorCode.PROVIDER_UNAVAILABLE,
            details=_join_details(Provider=provider, Reason=reason),
            suggestion=suggestion or "This fact is not available on the current platform",
            provider=provider,
            reason=reason
        )

    @property
    def provider(self) -> Optional[str]:
        return self.error.context.get("provider")
