# formatkit/formatters/booleans.py
"""Yes/no, on/off and true/false display words."""

from __future__ import annotations

from typing import Any, Optional, Tuple

from formatkit.core.protocols import TranslatorProtocol
from formatkit.formatters.text import is_empty
from formatkit.host import get_default_host


def _pick(
    value: Any,
    positive: Tuple[str, str],
    negative: Tuple[str, str],
    title_case: bool,
    host: Optional[TranslatorProtocol],
) -> str:
    if host is None:
        host = get_default_host()
    lower, title = negative if is_empty(value) else positive
    return host.gettext(title if title_case else lower)


def yes_no(value: Any, title_case: bool = False, host: Optional[TranslatorProtocol] = None) -> str:
    """
    Examples:
        >>> yes_no(1)
        'yes'
        >>> yes_no("0", title_case=True)
        'No'
    """
    return _pick(value, ("yes", "Yes"), ("no", "No"), title_case, host)


def on_off(value: Any, title_case: bool = False, host: Optional[TranslatorProtocol] = None) -> str:
    return _pick(value, ("on", "On"), ("off", "Off"), title_case, host)


def true_false(value: Any, title_case: bool = False, host: Optional[TranslatorProtocol] = None) -> str:
    return _pick(value, ("true", "True"), ("false", "False"), title_case, host)
