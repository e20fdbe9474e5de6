# formatkit/formatters/__init__.py
"""
Formatters for display code.

This module provides formatting utilities for converting raw values
into display-ready strings for tables, templates and dashboards.
"""

from formatkit.formatters.lists import (
    join_natural,
    join_with_overflow,
)
from formatkit.formatters.duration import (
    format_duration,
)
from formatkit.formatters.booleans import (
    yes_no,
    on_off,
    true_false,
)
from formatkit.formatters.numeric import (
    is_numeric,
    numeric,
    percentage,
)
from formatkit.formatters.dates import (
    to_timestamp,
    format_date,
    time_ago,
)
from formatkit.formatters.text import (
    is_empty,
    maybe_dash,
    label,
    html,
    excerpt,
    email_link,
    rating,
)

__all__ = [
    # List formatters
    "join_natural",
    "join_with_overflow",
    # Duration formatters
    "format_duration",
    # Boolean formatters
    "yes_no",
    "on_off",
    "true_false",
    # Numeric formatters
    "is_numeric",
    "numeric",
    "percentage",
    # Date formatters
    "to_timestamp",
    "format_date",
    "time_ago",
    # Text formatters
    "is_empty",
    "maybe_dash",
    "label",
    "html",
    "excerpt",
    "email_link",
    "rating",
]
