# formatkit/config/settings.py
"""
formatkit Settings Module.

Provides application-wide display defaults with environment variable support.
All settings can be overridden via environment variables with FORMATKIT_ prefix.

Environment Variables:
    FORMATKIT_DASH: Fallback for missing/invalid values (default: "&mdash;")
    FORMATKIT_DATE_FORMAT: strftime pattern for dates (default: "%B %d, %Y")
    FORMATKIT_TIMEZONE: IANA zone for localized dates (default: local zone)
    FORMATKIT_THOUSANDS_SEP: Digit grouping character (default: ",")
    FORMATKIT_DECIMAL_POINT: Decimal mark (default: ".")
    FORMATKIT_OVERFLOW_LIMIT: Default list overflow limit for the CLI (default: 3)
    FORMATKIT_EXCERPT_LENGTH: Default excerpt length (default: 150)
    FORMATKIT_NUMBER_DECIMALS: Default decimals for numeric() (default: 0)
    FORMATKIT_DEBUG: Enable debug logging (default: false)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from formatkit.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

MDASH = "&mdash;"

_STR_FIELDS = ("dash", "date_format", "thousands_sep", "decimal_point")
_INT_FIELDS = ("number_decimals", "overflow_limit", "excerpt_length")


def _get_env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    val = os.environ.get(key, "").lower()
    if val in ("1", "true", "yes", "on"):
        return True
    if val in ("0", "false", "no", "off"):
        return False
    return default


def _get_env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    val = os.environ.get(key)
    if val is not None:
        try:
            return int(val)
        except ValueError:
            pass
    return default


def _get_env_str(key: str, default: Optional[str]) -> Optional[str]:
    """Get string from environment variable."""
    val = os.environ.get(key)
    if val is not None:
        return val
    return default


@dataclass
class FormatKitSettings:
    """
    Display defaults for formatkit.

    All settings can be overridden via environment variables with FORMATKIT_
    prefix, by passing values directly to the constructor, or by loading a
    YAML file with `from_yaml`.

    Attributes:
        dash: String shown for missing or invalid values
        date_format: strftime pattern used when format_date() gets no pattern
        timezone: IANA zone name for localized dates; None means the local zone
        thousands_sep: Digit grouping character for numbers
        decimal_point: Decimal mark for numbers
        overflow_limit: Default overflow limit used by the CLI
        excerpt_length: Default maximum length for excerpt()
        number_decimals: Default decimals for numeric()
        debug: Enable debug logging

    Example:
        # Use default settings
        from formatkit.config import settings
        print(settings.dash)

        # Override programmatically
        custom = FormatKitSettings(dash="-", timezone="Europe/Berlin")
    """

    # Fallbacks
    dash: str = field(
        default_factory=lambda: _get_env_str("FORMATKIT_DASH", MDASH)
    )

    # Dates
    date_format: str = field(
        default_factory=lambda: _get_env_str("FORMATKIT_DATE_FORMAT", "%B %d, %Y")
    )
    timezone: Optional[str] = field(
        default_factory=lambda: _get_env_str("FORMATKIT_TIMEZONE", None)
    )

    # Numbers
    thousands_sep: str = field(
        default_factory=lambda: _get_env_str("FORMATKIT_THOUSANDS_SEP", ",")
    )
    decimal_point: str = field(
        default_factory=lambda: _get_env_str("FORMATKIT_DECIMAL_POINT", ".")
    )
    number_decimals: int = field(
        default_factory=lambda: _get_env_int("FORMATKIT_NUMBER_DECIMALS", 0)
    )

    # Lists / text
    overflow_limit: int = field(
        default_factory=lambda: _get_env_int("FORMATKIT_OVERFLOW_LIMIT", 3)
    )
    excerpt_length: int = field(
        default_factory=lambda: _get_env_int("FORMATKIT_EXCERPT_LENGTH", 150)
    )

    # Feature flags
    debug: bool = field(
        default_factory=lambda: _get_env_bool("FORMATKIT_DEBUG", False)
    )

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Check that every value is usable.

        Raises:
            ValidationError: On the first invalid field
        """
        for name in _STR_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValidationError(name, "must be a string", value)
        if self.timezone is not None and not isinstance(self.timezone, str):
            raise ValidationError("timezone", "must be a string", self.timezone)
        for name in _INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(name, "must be an integer", value)
        if not isinstance(self.debug, bool):
            raise ValidationError("debug", "must be true or false", self.debug)

        if self.overflow_limit < 1:
            raise ValidationError(
                "overflow_limit", "must be at least 1", self.overflow_limit
            )
        if self.excerpt_length < 0:
            raise ValidationError(
                "excerpt_length", "must not be negative", self.excerpt_length
            )
        if self.number_decimals < 0:
            raise ValidationError(
                "number_decimals", "must not be negative", self.number_decimals
            )
        if self.timezone:
            try:
                ZoneInfo(self.timezone)
            except (ZoneInfoNotFoundError, ValueError):
                raise ValidationError(
                    "timezone", "unknown time zone", self.timezone
                ) from None

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "FormatKitSettings":
        """
        Load settings from a YAML mapping.

        Keys missing from the file keep their environment/default values.

        Args:
            path: Path to a YAML file such as::

                dash: "-"
                timezone: Europe/Berlin
                excerpt_length: 80

        Returns:
            A new, validated FormatKitSettings

        Raises:
            ValidationError: If the file is not valid YAML, is not a mapping,
                or has unknown keys or wrongly typed values
        """
        with open(path, "r") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValidationError("<root>", f"invalid YAML: {e}", str(path)) from e

        if not isinstance(data, dict):
            raise ValidationError("<root>", "settings file must contain a mapping", data)

        known = {fld.name for fld in fields(cls)}
        unknown = sorted(set(data) - known, key=str)
        if unknown:
            raise ValidationError(unknown[0], "unknown setting", data[unknown[0]])

        logger.debug("Loaded settings from %s: %s", path, sorted(data, key=str))
        return cls(**data)

    def as_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "dash": self.dash,
            "date_format": self.date_format,
            "timezone": self.timezone,
            "thousands_sep": self.thousands_sep,
            "decimal_point": self.decimal_point,
            "number_decimals": self.number_decimals,
            "overflow_limit": self.overflow_limit,
            "excerpt_length": self.excerpt_length,
            "debug": self.debug,
        }


# Global settings instance (singleton pattern)
settings = FormatKitSettings()
