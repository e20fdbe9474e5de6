# formatkit/formatters/lists.py
"""
List formatting utilities.

Joins display items into natural-language lists ("A, B and C") and
collapses long lists into an overflow summary ("A, B and 3 more").
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, List, Mapping, Optional

from formatkit.core.exceptions import TemplateError
from formatkit.core.protocols import TranslatorProtocol
from formatkit.host import get_default_host

logger = logging.getLogger(__name__)

DEFAULT_OVERFLOW_TEMPLATE = "%d more"

# printf-style conversions; group(1) is the conversion character ("" at end of string)
_CONVERSION = re.compile(r"%(.?)", re.DOTALL)
_SUPPORTED_CONVERSIONS = ("d", "i", "s")


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _as_items(items: Any) -> List[str]:
    """Copy any iterable of display values into a fresh list of strings."""
    if items is None:
        return []
    if isinstance(items, (str, bytes)):
        seq = [items]
    elif isinstance(items, Mapping):
        seq = list(items.values())
    else:
        seq = list(items)
    return [_to_text(x) for x in seq]


def _render_overflow(template: str, count: int) -> str:
    """
    Substitute `count` into a printf-style template.

    A template without a placeholder is returned as-is.

    Raises:
        TemplateError: On an unsupported conversion or more than one placeholder
    """
    conversions = [m.group(1) for m in _CONVERSION.finditer(template)]

    for conv in conversions:
        if conv != "%" and conv not in _SUPPORTED_CONVERSIONS:
            raise TemplateError(template, f"unsupported conversion '%{conv}'")

    if sum(1 for conv in conversions if conv != "%") > 1:
        raise TemplateError(template, "expected at most one placeholder")

    return _CONVERSION.sub(
        lambda m: "%" if m.group(1) == "%" else str(count),
        template,
    )


def join_natural(
    items: Iterable[Any],
    separator: str = ", ",
    last_separator: str = " and ",
) -> str:
    """
    Format items as a natural-language list.

    Args:
        items: Iterable of display values (converted with str())
        separator: Separator between items
        last_separator: Separator before the last item

    Returns:
        Formatted string, empty for no items

    Examples:
        >>> join_natural(['A'])
        'A'
        >>> join_natural(['A', 'B'])
        'A and B'
        >>> join_natural(['A', 'B', 'C'])
        'A, B and C'
        >>> join_natural(['A', 'B'], last_separator=' or ')
        'A or B'
    """
    seq = _as_items(items)

    if not seq:
        return ""
    if len(seq) == 1:
        return seq[0]
    if len(seq) == 2:
        return last_separator.join(seq)

    return separator.join(seq[:-1]) + last_separator + seq[-1]


def join_with_overflow(
    items: Iterable[Any],
    limit: int = 3,
    separator: str = ", ",
    last_separator: str = " and ",
    overflow_template: str = DEFAULT_OVERFLOW_TEMPLATE,
    host: Optional[TranslatorProtocol] = None,
) -> str:
    """
    Format items as a natural-language list, summarizing the overflow.

    When there are more than `limit` items, the first `limit - 1` are shown
    and the last slot is taken by the overflow text. A `limit` below 1 is
    treated as 1.

    The default template is passed through the host translator before use;
    a custom template is used verbatim.

    Args:
        items: Iterable of display values
        limit: Maximum entries to show, overflow text included
        separator: Separator between items
        last_separator: Separator before the last item or the overflow text
        overflow_template: Template for the overflow text, with one %d
        host: Translator for the default template (defaults to the global host)

    Returns:
        Formatted string, empty for no items

    Raises:
        TemplateError: If the template has more than one placeholder

    Examples:
        >>> join_with_overflow(['A', 'B', 'C'], limit=5)
        'A, B and C'
        >>> join_with_overflow(['A', 'B', 'C', 'D', 'E'], limit=3)
        'A, B and 3 more'
        >>> join_with_overflow(['A', 'B', 'C', 'D', 'E'], limit=2, overflow_template='%d others')
        'A and 4 others'
    """
    seq = _as_items(items)
    if not seq:
        return ""

    if limit < 1:
        logger.debug("Overflow limit %d clamped to 1", limit)
        limit = 1

    total = len(seq)
    if total <= limit:
        return join_natural(seq, separator, last_separator)

    visible = seq[: limit - 1]
    remaining = total - (limit - 1)

    if overflow_template == DEFAULT_OVERFLOW_TEMPLATE:
        if host is None:
            host = get_default_host()
        template = host.gettext(DEFAULT_OVERFLOW_TEMPLATE)
    else:
        template = overflow_template

    visible.append(_render_overflow(template, remaining))

    return join_natural(visible, separator, last_separator)
