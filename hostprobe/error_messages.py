"""
Centralized error message templates for hostprobe.

Usage:
    from hostprobe.error_messages import format_error, ERROR_MESSAGES

    msg = format_error('FIELD_NOT_FOUND', key='VERSION_ID', path='/etc/os-release')
"""

from typing import Dict, Any


ERROR_MESSAGES: Dict[str, str] = {
    # Extraction Errors
    'SOURCE_UNREADABLE': "Cannot read '{path}': {error}",

    'FIELD_NOT_FOUND': "No line in '{path}' starts with {key!r}",

    'MALFORMED_LINE': "Line for {key!r} in '{path}' has no {delimiter!r} delimiter",

    'INVALID_DELIMITER': "Delimiter must be a single character, got {delimiter!r}",

    # Value Errors
    'NOT_UNSIGNED_INT': "{fact} is not an unsigned integer: {value!r}",

    # Provider Errors
    'PROVIDER_WRONG_PLATFORM': "{provider} is only available on {platform}",

    'PROVIDER_ACCESS_DENIED': "{provider} could not read {target}: {error}",

    'PROVIDER_MISSING_LIBRARY': "{provider} needs the '{library}' package: {error}",

    'PROVIDER_COMMAND_FAILED': "{provider} could not run '{command}': {error}",

    'NO_GRAPHICS_PROVIDER': (
        "No graphics provider could enumerate adapters.\n"
        "Tried: {providers}"
    ),

    'CPU_IDENTIFICATION_FAILED': "CPU identification failed: {error}",

    'CPU_BRAND_MISSING': "CPU identification returned no brand string",

    'CPU_COUNT_UNDETERMINED': "Logical processor count is undetermined on this host",

    'PUBLIC_IP_UNREACHABLE': (
        "No public-IP service answered.\n"
        "Tried: {services}"
    ),

    # General Errors
    'INTERNAL_ERROR': (
        "An internal error occurred: {error}\n"
        "This is likely a bug in hostprobe.\n"
        "Include the full error message and stack trace when reporting it."
    ),
}


def format_error(error_key: str, **kwargs) -> str:
    """
    Format an error message with the given parameters.

    Args:
        error_key: Key for the error message template.
        **kwargs: Parameters to substitute in the template.

    Returns:
        Formatted error message string.

    Example:
        >>> format_error('FIELD_NOT_FOUND', path='/etc/os-release', key='VERSION_ID')
        "No line in '/etc/os-release' starts with 'VERSION_ID'"
    """
    template = ERROR_MESSAGES.get(error_key)
    if template is None:
        return f"Unknown error: {error_key}\nContext: {kwargs}"

    try:
        return template.format(**kwargs)
    except KeyError as e:
        return f"{template}\n(Missing format parameter: {e})"


class ErrorFormatter:
    """
    Helper class for formatting errors with consistent styling.

    Used by the command line entry point to render HostProbeException
    instances on stderr.
    """

    # ANSI color codes
    COLORS = {
        'reset': '\033[0m',
        'bold': '\033[1m',
        'red': '\033[91m',
        'yellow': '\033[93m',
        'cyan': '\033[96m',
    }

    def __init__(self, use_colors: bool = True):
        self.use_colors = use_colors

    def _color(self, text: str, color: str) -> str:
        """Apply color to text if enabled."""
        if self.use_colors and color in self.COLORS:
            return f"{self.COLORS[color]}{text}{self.COLORS['reset']}"
        return text

    def format_error_header(self, code: str, title: str) -> str:
        header = f"[{code}] {title}"
        return self._color(header, 'red')

    def format_suggestion(self, suggestion: str) -> str:
        prefix = self._color("Suggestion:", 'cyan')
        return f"{prefix} {suggestion}"

    def format_details(self, details: Dict[str, Any]) -> str:
        lines = []
        for key, value in details.items():
            if value is None:
                continue
            key_styled = self._color(f"{key}:", 'bold')
            lines.append(f"  {key_styled} {value}")
        return "\n".join(lines)

    def format_exception(self, exc) -> str:
        """
        Format a HostProbeException for display.

        Args:
            exc: Exception carrying a ProbeError in its ``error`` attribute.

        Returns:
            Fully formatted error string.
        """
        error = exc.error
        parts = [self.format_error_header(error.code.value, error.message)]

        if error.context:
            details = self.format_details(error.context)
            if details:
                parts.append(details)

        if error.suggestion:
            parts.append("")
            parts.append(self.format_suggestion(error.suggestion))

        return "\n".join(parts)
