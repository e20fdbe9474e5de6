# formatkit/core/exceptions.py
"""
Exception hierarchy for formatkit.

Formatters are meant to be forgiving: bad display data falls back to a dash
instead of raising. The exceptions below cover the few inputs that have no
sensible display form, plus configuration problems.

Exception Hierarchy:
    FormatKitError (base)
    ├── FormatValueError (also ValueError)
    │   ├── InvalidDurationError
    │   └── TemplateError
    └── ConfigurationError
        └── ValidationError
"""

from typing import Any, Dict, Optional


class FormatKitError(Exception):
    """
    Base exception for all formatkit errors.

    All custom exceptions in formatkit inherit from this class,
    making it easy to catch all formatkit-specific errors:

        try:
            cell = format_duration(row["elapsed"])
        except FormatKitError as e:
            logger.warning(f"Cannot format duration: {e}")
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ============================================================================
# Value Exceptions
# ============================================================================

class FormatValueError(FormatKitError, ValueError):
    """Base exception for values a formatter cannot render."""
    pass


class InvalidDurationError(FormatValueError):
    """Raised when a duration is negative, fractional or not a number."""

    def __init__(self, value: Any, reason: str):
        super().__init__(
            f"Invalid duration {value!r}: {reason}",
            details={"value": value},
        )
        self.value = value


class TemplateError(FormatValueError):
    """Raised when an overflow template cannot take a single count."""

    def __init__(self, template: str, reason: str):
        super().__init__(
            f"Invalid overflow template {template!r}: {reason}",
            details={"template": template},
        )
        self.template = template


# ============================================================================
# Configuration Exceptions
# ============================================================================

class ConfigurationError(FormatKitError):
    """Base exception for configuration errors."""
    pass


class ValidationError(ConfigurationError):
    """Raised when a settings value fails validation."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            details={"field": field, "value": value},
        )
        self.field = field
