"""
Core abstractions for formatkit.

This module provides the foundational types shared by every formatter:
- Protocols describing the host services formatters delegate to
- The exception hierarchy

Example usage for integrators supplying their own host:

    from formatkit.core import HostServicesProtocol
    from formatkit.host import PlainHost, set_default_host

    class SiteHost(PlainHost):
        def gettext(self, message: str) -> str:
            return catalog.get(message, message)

    assert isinstance(SiteHost(), HostServicesProtocol)
    set_default_host(SiteHost())
"""

from formatkit.core.protocols import (
    DateFormatterProtocol,
    EmailProtocol,
    HostServicesProtocol,
    NumberFormatterProtocol,
    RelativeTimeProtocol,
    TextTransformProtocol,
    TranslatorProtocol,
)
from formatkit.core.exceptions import (
    FormatKitError,
    FormatValueError,
    InvalidDurationError,
    TemplateError,
    ConfigurationError,
    ValidationError,
)

__all__ = [
    # Protocols (interfaces)
    "DateFormatterProtocol",
    "EmailProtocol",
    "HostServicesProtocol",
    "NumberFormatterProtocol",
    "RelativeTimeProtocol",
    "TextTransformProtocol",
    "TranslatorProtocol",
    # Exceptions
    "FormatKitError",
    "FormatValueError",
    "InvalidDurationError",
    "TemplateError",
    "ConfigurationError",
    "ValidationError",
]
