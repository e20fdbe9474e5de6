# formatkit/formatters/text.py
"""
Text formatting utilities.

Labels, excerpts, HTML paragraphs, mailto links, star ratings and the
dash fallback for empty values.
"""

from __future__ import annotations

import numbers
import re
from collections.abc import Sized
from typing import Any, Optional

import pandas as pd

from formatkit.config import settings
from formatkit.core.protocols import (
    EmailProtocol,
    TextTransformProtocol,
    TranslatorProtocol,
)
from formatkit.host import get_default_host

_WORD_START = re.compile(r"(^|\s)(\S)")


def is_empty(value: Any) -> bool:
    """
    Decide whether a value counts as "nothing to show".

    Empty: None, False, 0, 0.0, "", "0", empty containers, NaN/NA/NaT.

    Examples:
        >>> is_empty("0")
        True
        >>> is_empty([])
        True
        >>> is_empty(float('nan'))
        True
        >>> is_empty("no")
        False
    """
    if value is None:
        return True
    if isinstance(value, (str, bytes)):
        return value in ("", "0", b"", b"0")
    if isinstance(value, Sized):
        return len(value) == 0
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return True
    if isinstance(value, numbers.Number):
        return value == 0
    return not value


def maybe_dash(value: Any, dash: Optional[str] = None) -> str:
    """
    Return the value as a string, or a dash if it is empty.

    Useful for admin tables and data displays.

    Args:
        value: Value to display
        dash: Fallback string (defaults to settings.dash)

    Examples:
        >>> maybe_dash("Paris")
        'Paris'
        >>> maybe_dash("", dash="-")
        '-'
    """
    if is_empty(value):
        return settings.dash if dash is None else dash
    return str(value)


def label(key: str) -> str:
    """
    Turn a field key into a human-readable label.

    Underscores and hyphens become spaces and every word gets an upper-case
    first letter; the rest of each word is left alone.

    Examples:
        >>> label("my_field_name")
        'My Field Name'
        >>> label("api-URL")
        'Api URL'
    """
    spaced = key.replace("_", " ").replace("-", " ")
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), spaced)


def html(text: str, host: Optional[TextTransformProtocol] = None) -> str:
    """Apply typography, then wrap paragraphs in <p> tags."""
    if host is None:
        host = get_default_host()
    return host.autop(host.texturize(text))


def excerpt(
    text: str,
    length: Optional[int] = None,
    suffix: str = "...",
    host: Optional[TextTransformProtocol] = None,
) -> str:
    """
    Strip tags and shorten text to at most `length` characters.

    The suffix counts towards `length`. If `length` is shorter than the
    suffix, only the suffix is returned.

    Args:
        text: Text or HTML
        length: Maximum length including suffix (defaults to settings.excerpt_length)
        suffix: Appended when the text is cut
        host: Supplies strip_tags (defaults to the global host)

    Examples:
        >>> excerpt("<b>Hello</b> world", 8)
        'Hello...'
        >>> excerpt("Short", 10)
        'Short'
    """
    if host is None:
        host = get_default_host()
    if length is None:
        length = settings.excerpt_length

    plain = host.strip_tags(text)
    if len(plain) <= length:
        return plain

    keep = max(length - len(suffix), 0)
    return plain[:keep] + suffix


def email_link(
    email: str,
    text: str = "",
    host: Optional[EmailProtocol] = None,
) -> str:
    """
    Build a mailto link, or return the input unchanged if it is not an email.

    Examples:
        >>> email_link("ann@example.com")
        '<a href="mailto:ann@example.com">ann@example.com</a>'
        >>> email_link("not-an-email")
        'not-an-email'
    """
    if host is None:
        host = get_default_host()
    if not host.is_email(email):
        return email

    text = text or email
    return '<a href="mailto:%s">%s</a>' % (host.escape_attr(email), host.escape_html(text))


def rating(value: Any, host: Optional[TranslatorProtocol] = None) -> str:
    """
    Format a star rating with proper pluralization.

    Examples:
        >>> rating(1)
        '1 Star'
        >>> rating(4)
        '4 Stars'
        >>> rating(0)
        'No Rating'
    """
    if host is None:
        host = get_default_host()
    if is_empty(value):
        return host.gettext("No Rating")

    count = int(value)
    return host.ngettext("%s Star", "%s Stars", count) % count
