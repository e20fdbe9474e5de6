"""
Configuration management for formatkit.

This module provides centralized configuration handling with:
- Environment variable support (FORMATKIT_* prefix)
- Default values for all settings
- YAML file loading
- Easy override for testing

Usage:
    from formatkit.config import settings

    # Access settings
    dash = settings.dash
    pattern = settings.date_format

    # Override for testing
    from formatkit.config import FormatKitSettings
    test_settings = FormatKitSettings(dash="-", timezone="UTC")
"""

from formatkit.config.settings import MDASH, FormatKitSettings, settings

__all__ = [
    "MDASH",
    "FormatKitSettings",
    "settings",
]
