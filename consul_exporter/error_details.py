"""Error message formatting for user-friendly exception handling."""

import pydantic
import yaml

from consul_exporter.exceptions import ValidationError


def _format_pydantic_error(error: pydantic.ValidationError) -> str:
    """Format parameter type errors, one line per offending field."""
    lines = ["Invalid exporter parameters:"]
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "<root>"
        lines.append(f"  {location}: {detail['msg']}")
    return "\n".join(lines)


ERROR_TYPES = {
    ValidationError: lambda e: f"Validation failed: {e!s}",
    pydantic.ValidationError: _format_pydantic_error,
    yaml.YAMLError: lambda e: f"Invalid YAML in parameter file: {e!s}",
    FileNotFoundError: lambda e: str(e),
    PermissionError: lambda e: f"Permission denied: {e!s}\nCheck file permissions.",
    OSError: lambda e: f"System error: {e!s}",
    ValueError: lambda e: str(e),
    RuntimeError: lambda e: str(e),
}


def get_error_human_message(error: Exception) -> str:
    """
    Get user-friendly error message based on exception type.

    Args:
        error: The exception to format

    Returns:
        Formatted error message suitable for end users
    """
    for error_type, handler in ERROR_TYPES.items():
        if isinstance(error, error_type):
            return handler(error)
    return str(error)
