# formatkit/formatters/dates.py
"""
Date and relative-time formatting.

Accepts Unix timestamps, date strings, and datetime/date/pandas Timestamp
objects. Anything that cannot be resolved to a timestamp renders as a dash.
"""

from __future__ import annotations

import logging
from datetime import date as date_type
from typing import Any, Optional

import pandas as pd

from formatkit.config import settings
from formatkit.core.protocols import DateFormatterProtocol, HostServicesProtocol
from formatkit.formatters.numeric import is_numeric
from formatkit.host import get_default_host

logger = logging.getLogger(__name__)


def to_timestamp(value: Any, host: Optional[DateFormatterProtocol] = None) -> Optional[int]:
    """
    Resolve a date-like value to a Unix timestamp.

    Naive datetimes are taken as UTC. Returns None when the value cannot be
    resolved; 0 is a valid result (the epoch).

    Examples:
        >>> to_timestamp(0)
        0
        >>> to_timestamp("1970-01-02")
        86400
        >>> to_timestamp("not a date") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None

    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None

    if isinstance(value, date_type):
        ts = pd.Timestamp(value)
        if ts.tzinfo is None:
            ts = ts.tz_localize("UTC")
        return int(ts.timestamp())

    if is_numeric(value):
        return int(float(value))

    if host is None:
        host = get_default_host()
    return host.parse_date(str(value))


def format_date(
    date: Any,
    pattern: Optional[str] = None,
    translate: bool = True,
    host: Optional[DateFormatterProtocol] = None,
    dash: Optional[str] = None,
) -> str:
    """
    Format a date with the host's date formatting.

    Args:
        date: Timestamp, date string, or datetime/date object
        pattern: strftime pattern (defaults to settings.date_format)
        translate: Localized output (configured time zone) instead of raw UTC
        host: Date formatter (defaults to the global host)
        dash: Returned when the date cannot be resolved (defaults to settings.dash)

    Returns:
        Formatted date string or dash

    Examples:
        >>> format_date(0, "%Y-%m-%d", translate=False)
        '1970-01-01'
    """
    if host is None:
        host = get_default_host()

    timestamp = to_timestamp(date, host)
    if timestamp is None:
        logger.debug("format_date: unresolvable date %r", date)
        return settings.dash if dash is None else dash

    return host.format_date(timestamp, pattern or settings.date_format, translate)


def time_ago(
    date: Any,
    now: Optional[int] = None,
    host: Optional[HostServicesProtocol] = None,
    dash: Optional[str] = None,
) -> str:
    """
    Format how long ago a date was, e.g. "5 mins ago".

    Args:
        date: Timestamp, date string, or datetime/date object
        now: Reference timestamp (defaults to the host's current time)
        host: Host services (defaults to the global host)
        dash: Returned when the date cannot be resolved (defaults to settings.dash)

    Examples:
        >>> time_ago(0, now=300)
        '5 mins ago'
    """
    if host is None:
        host = get_default_host()

    timestamp = to_timestamp(date, host)
    if timestamp is None:
        logger.debug("time_ago: unresolvable date %r", date)
        return settings.dash if dash is None else dash

    if now is None:
        now = host.current_timestamp()

    return host.human_time_diff(timestamp, now) + " " + host.gettext("ago")
