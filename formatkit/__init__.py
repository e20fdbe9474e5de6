"""
formatkit - Display Formatting for UI Code

formatkit turns raw values (booleans, numbers, dates, durations, text,
lists) into display strings for admin tables, templates and dashboards,
with translation hooks and a dash fallback for missing data.

Quick Start:
    from formatkit import join_with_overflow, format_duration, numeric

    join_with_overflow(["Ann", "Bob", "Cy", "Di", "Ed"])   # 'Ann, Bob and 3 more'
    format_duration(3661, abbreviated=True)              # '1h 1m'
    numeric(None)                                        # '&mdash;'

Plugging in translations / site locale:
    from formatkit.host import PlainHost, set_default_host

    class SiteHost(PlainHost):
        def gettext(self, message):
            return catalog.get(message, message)

    set_default_host(SiteHost())

For Contributors:
    See formatkit/core/protocols.py for the host service interfaces.
    See formatkit/host/plain.py for the default implementation.
"""

import logging
from typing import Optional

__version__ = "0.1.0"

# Core abstractions
from formatkit.core import (
    FormatKitError,
    FormatValueError,
    InvalidDurationError,
    TemplateError,
    ConfigurationError,
    ValidationError,
    HostServicesProtocol,
)

# Configuration
from formatkit.config import MDASH, settings, FormatKitSettings

# Host services
from formatkit.host import (
    PlainHost,
    get_default_host,
    set_default_host,
    reset_default_host,
)

# Formatters
from formatkit.formatters import (
    join_natural,
    join_with_overflow,
    format_duration,
    yes_no,
    on_off,
    true_false,
    numeric,
    percentage,
    format_date,
    time_ago,
    html,
    label,
    excerpt,
    email_link,
    rating,
    maybe_dash,
    is_empty,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


def configure_logging(debug: Optional[bool] = None) -> None:
    """
    Send formatkit log records to stderr.

    Args:
        debug: DEBUG level if true, WARNING otherwise (defaults to settings.debug)
    """
    if debug is None:
        debug = settings.debug

    pkg_logger = logging.getLogger(__name__)
    if not any(isinstance(h, logging.StreamHandler) for h in pkg_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if debug else logging.WARNING)


__all__ = [
    # Version
    "__version__",
    # Core abstractions
    "FormatKitError",
    "FormatValueError",
    "InvalidDurationError",
    "TemplateError",
    "ConfigurationError",
    "ValidationError",
    "HostServicesProtocol",
    # Configuration
    "MDASH",
    "settings",
    "FormatKitSettings",
    "configure_logging",
    # Host services
    "PlainHost",
    "get_default_host",
    "set_default_host",
    "reset_default_host",
    # Core formatters
    "join_natural",
    "join_with_overflow",
    "format_duration",
    # Pass-through formatters
    "yes_no",
    "on_off",
    "true_false",
    "numeric",
    "percentage",
    "format_date",
    "time_ago",
    "html",
    "label",
    "excerpt",
    "email_link",
    "rating",
    "maybe_dash",
    "is_empty",
]
