# formatkit/formatters/duration.py
"""
Duration formatting.

Renders a number of seconds as a cascading duration: the largest unit that
fits plus at most one finer remainder unit ("45 seconds", "2 hours 5 minutes",
"3 days 4 hours"). Unit words are always plural; there is no weeks tier.
"""

from __future__ import annotations

import math
import numbers
from datetime import timedelta
from typing import Any, Tuple

import numpy as np
import pandas as pd

from formatkit.core.exceptions import InvalidDurationError

# unit -> (abbreviated suffix, full suffix)
_UNITS = {
    "seconds": ("s", " seconds"),
    "minutes": ("m", " minutes"),
    "hours": ("h", " hours"),
    "days": ("d", " days"),
}


def _to_seconds(value: Any) -> int:
    """Normalize a duration input to whole non-negative seconds."""
    if isinstance(value, bool):
        raise InvalidDurationError(value, "expected a number of seconds, got a bool")

    if isinstance(value, np.timedelta64):
        if np.isnat(value):
            raise InvalidDurationError(value, "must not be NaT")
        if np.datetime_data(value.dtype)[0] == "generic":
            raise InvalidDurationError(value, "timedelta64 needs an explicit unit")
        value = pd.Timedelta(value)

    if isinstance(value, timedelta):
        # Sub-second precision is dropped.
        seconds = math.floor(value.total_seconds())
    elif isinstance(value, numbers.Integral):
        seconds = int(value)
    elif isinstance(value, numbers.Real):
        as_float = float(value)
        if not math.isfinite(as_float):
            raise InvalidDurationError(value, "must be finite")
        if not as_float.is_integer():
            raise InvalidDurationError(value, "fractional seconds are not supported")
        seconds = int(as_float)
    else:
        raise InvalidDurationError(value, "expected a number of seconds")

    if seconds < 0:
        raise InvalidDurationError(value, "must not be negative")
    return seconds


def _unit(quantity: int, unit: str, abbreviated: bool) -> str:
    short, full = _UNITS[unit]
    return f"{quantity}{short if abbreviated else full}"


def _with_remainder(
    primary: Tuple[int, str],
    remainder: Tuple[int, str],
    abbreviated: bool,
) -> str:
    text = _unit(primary[0], primary[1], abbreviated)
    if remainder[0] > 0:
        text += " " + _unit(remainder[0], remainder[1], abbreviated)
    return text


def format_duration(seconds: Any, abbreviated: bool = False) -> str:
    """
    Format a duration in seconds for humans.

    Args:
        seconds: Non-negative whole seconds (int, integral float, timedelta or np.timedelta64)
        abbreviated: Use s/m/h/d suffixes instead of unit words

    Returns:
        Formatted duration

    Raises:
        InvalidDurationError: For negative, fractional or non-numeric input,
            and for np.timedelta64 values without a unit

    Examples:
        >>> format_duration(45)
        '45 seconds'
        >>> format_duration(90)
        '1 minutes'
        >>> format_duration(3661, abbreviated=True)
        '1h 1m'
        >>> format_duration(90061)
        '1 days 1 hours'
    """
    total = _to_seconds(seconds)

    if total < 60:
        return _unit(total, "seconds", abbreviated)

    minutes = total // 60
    if minutes < 60:
        # Leftover seconds are not shown at this tier.
        return _unit(minutes, "minutes", abbreviated)

    hours, rem_minutes = divmod(minutes, 60)
    if hours < 24:
        return _with_remainder((hours, "hours"), (rem_minutes, "minutes"), abbreviated)

    days, rem_hours = divmod(hours, 24)
    return _with_remainder((days, "days"), (rem_hours, "hours"), abbreviated)
