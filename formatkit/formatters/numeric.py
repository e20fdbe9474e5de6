# formatkit/formatters/numeric.py
"""
Numeric formatting utilities.

Provides locale-aware number display with a dash fallback, and percentages.
"""

from __future__ import annotations

import math
import numbers
import re
from typing import Any, Optional

from formatkit.config import settings
from formatkit.core.protocols import NumberFormatterProtocol
from formatkit.host import get_default_host

_NUMERIC_STRING = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$")


def is_numeric(x: Any) -> bool:
    """
    Check whether a value can be shown as a number.

    Numbers (including numpy scalars) and plain numeric strings qualify;
    bools, NaN and infinities do not.

    Examples:
        >>> is_numeric("12.5")
        True
        >>> is_numeric(float('nan'))
        False
        >>> is_numeric(True)
        False
    """
    if isinstance(x, bool):
        return False
    if isinstance(x, numbers.Real):
        return math.isfinite(float(x))
    if isinstance(x, str):
        return bool(_NUMERIC_STRING.match(x))
    return False


def numeric(
    x: Any,
    decimals: Optional[int] = None,
    host: Optional[NumberFormatterProtocol] = None,
    dash: Optional[str] = None,
) -> str:
    """
    Format a numeric value with the host's number formatting.

    Args:
        x: Value to format (can be None, NaN, a numeric string or any number)
        decimals: Number of decimal places (defaults to settings.number_decimals)
        host: Number formatter (defaults to the global host)
        dash: String to return for non-numeric values (defaults to settings.dash)

    Returns:
        Formatted string

    Examples:
        >>> numeric(1234.5, 1)
        '1,234.5'
        >>> numeric("42")
        '42'
        >>> numeric("abc", dash="—")
        '—'
    """
    if not is_numeric(x):
        return settings.dash if dash is None else dash

    if host is None:
        host = get_default_host()
    if decimals is None:
        decimals = settings.number_decimals

    return host.format_number(float(x), decimals)


def percentage(x: float, decimals: int = 0) -> str:
    """
    Format a ratio as a percentage.

    Uses "," grouping and "." decimals regardless of locale.

    Args:
        x: Ratio to format (0.75 = 75%)
        decimals: Number of decimal places (negative is treated as 0)

    Examples:
        >>> percentage(0.75)
        '75%'
        >>> percentage(0.125, decimals=1)
        '12.5%'
    """
    return f"{float(x) * 100:,.{max(decimals, 0)}f}%"
