# formatkit/host/plain.py
"""
PlainHost: the default host services.

English, catalog-free implementations of every host protocol. Good enough
for logs, CLIs and internal dashboards; applications with real translations
subclass it and override `gettext`/`ngettext`.
"""

from __future__ import annotations

import html as html_lib
import logging
import math
import re
import warnings
from datetime import datetime, timezone, tzinfo
from typing import Callable, List, Optional
from zoneinfo import ZoneInfo

import pandas as pd
import tzlocal

from formatkit.config.settings import FormatKitSettings
from formatkit.config.settings import settings as global_settings

logger = logging.getLogger(__name__)

MINUTE_IN_SECONDS = 60
HOUR_IN_SECONDS = 60 * MINUTE_IN_SECONDS
DAY_IN_SECONDS = 24 * HOUR_IN_SECONDS
WEEK_IN_SECONDS = 7 * DAY_IN_SECONDS
MONTH_IN_SECONDS = 30 * DAY_IN_SECONDS
YEAR_IN_SECONDS = 365 * DAY_IN_SECONDS

# (upper bound, unit seconds, singular, plural)
_RELATIVE_STEPS = [
    (HOUR_IN_SECONDS, MINUTE_IN_SECONDS, "%s min", "%s mins"),
    (DAY_IN_SECONDS, HOUR_IN_SECONDS, "%s hour", "%s hours"),
    (WEEK_IN_SECONDS, DAY_IN_SECONDS, "%s day", "%s days"),
    (MONTH_IN_SECONDS, WEEK_IN_SECONDS, "%s week", "%s weeks"),
    (YEAR_IN_SECONDS, MONTH_IN_SECONDS, "%s month", "%s months"),
    (None, YEAR_IN_SECONDS, "%s year", "%s years"),
]

_TAG_SPLIT = re.compile(r"(<[^>]*>)")
_SCRIPT_STYLE = re.compile(r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL)
_ANY_TAG = re.compile(r"<[^>]*?>")
_BLOCK_START = re.compile(
    r"^<(?:address|article|aside|blockquote|div|dl|fieldset|figure|footer|form|"
    r"h[1-6]|header|hr|li|nav|ol|p|pre|section|table|ul)\b",
    re.IGNORECASE,
)
_EMAIL = re.compile(
    r"^[A-Za-z0-9!#$%&'*+/=?^_`{|}~.-]+"
    r"@(?:[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?\.)+[A-Za-z0-9-]{2,}$"
)

# Applied in order to text outside of tags.
_TYPOGRAPHY = [
    (re.compile(r"---"), "&#8212;"),
    (re.compile(r"--"), "&#8211;"),
    (re.compile(r"\.\.\."), "&#8230;"),
    (re.compile(r"(^|[\s(\[])\""), r"\1&#8220;"),
    (re.compile(r"\""), "&#8221;"),
    (re.compile(r"(^|[\s(\[])'"), r"\1&#8216;"),
    (re.compile(r"'"), "&#8217;"),
]


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


class PlainHost:
    """
    Default host services.

    Attributes:
        settings: Settings used for separators, time zone and dates

    Example:
        host = PlainHost(FormatKitSettings(timezone="UTC"))
        host.format_number(1234.5, 1)   # '1,234.5'
        host.human_time_diff(0, 7200)   # '2 hours'
    """

    def __init__(
        self,
        settings: Optional[FormatKitSettings] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Args:
            settings: Settings to read; defaults to the global settings
            clock: Returns "now" as an aware datetime; used by time_ago()
        """
        self.settings = settings if settings is not None else global_settings
        self._clock = clock

    @property
    def tz(self) -> tzinfo:
        """Time zone for localized dates."""
        if self.settings.timezone:
            return ZoneInfo(self.settings.timezone)
        return tzlocal.get_localzone()

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    def gettext(self, message: str) -> str:
        return message

    def ngettext(self, singular: str, plural: str, count: int) -> str:
        return singular if count == 1 else plural

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def format_number(self, value: float, decimals: int) -> str:
        text = f"{value:,.{max(decimals, 0)}f}"
        return text.translate(
            str.maketrans({",": self.settings.thousands_sep, ".": self.settings.decimal_point})
        )

    # ------------------------------------------------------------------
    # Dates
    # ------------------------------------------------------------------

    def format_date(self, timestamp: int, pattern: str, translate: bool) -> str:
        """
        Render a Unix timestamp with a strftime pattern.

        Localized output (`translate=True`) uses the configured time zone;
        raw output uses UTC.
        """
        tz = self.tz if translate else timezone.utc
        return datetime.fromtimestamp(timestamp, tz=tz).strftime(pattern)

    def parse_date(self, text: str) -> Optional[int]:
        text = text.strip()
        if not text:
            return None

        with warnings.catch_warnings():
            # pandas warns when it cannot infer a format
            warnings.simplefilter("ignore", UserWarning)
            parsed = pd.to_datetime(text, errors="coerce", utc=True)
        if pd.isna(parsed):
            logger.debug("Could not parse date string %r", text)
            return None
        return int(parsed.timestamp())

    # ------------------------------------------------------------------
    # Relative time
    # ------------------------------------------------------------------

    def human_time_diff(self, timestamp: int, now: int) -> str:
        diff = abs(now - timestamp)

        for upper, unit, singular, plural in _RELATIVE_STEPS:
            if upper is None or diff < upper:
                break

        count = max(_round_half_up(diff / unit), 1)
        return self.ngettext(singular, plural, count) % count

    def current_timestamp(self) -> int:
        if self._clock is not None:
            return int(self._clock().timestamp())
        return int(datetime.now(tzlocal.get_localzone()).timestamp())

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def texturize(self, text: str) -> str:
        """Curly quotes, dashes and ellipses; markup is left untouched."""
        parts: List[str] = []
        for chunk in _TAG_SPLIT.split(text):
            if chunk.startswith("<") and chunk.endswith(">"):
                parts.append(chunk)
                continue
            for pattern, replacement in _TYPOGRAPHY:
                chunk = pattern.sub(replacement, chunk)
            parts.append(chunk)
        return "".join(parts)

    def autop(self, text: str) -> str:
        """Wrap blank-line separated blocks in <p>, single newlines become <br />."""
        text = text.replace("\r\n", "\n").replace("\r", "\n").strip()
        if not text:
            return ""

        paragraphs = []
        for block in re.split(r"\n\s*\n", text):
            block = block.strip()
            if not block:
                continue
            if _BLOCK_START.match(block):
                paragraphs.append(block)
            else:
                paragraphs.append("<p>" + block.replace("\n", "<br />\n") + "</p>")
        return "\n".join(paragraphs) + "\n"

    def strip_tags(self, text: str) -> str:
        text = _SCRIPT_STYLE.sub("", text)
        text = _ANY_TAG.sub("", text)
        return text.strip()

    # ------------------------------------------------------------------
    # Email
    # ------------------------------------------------------------------

    def is_email(self, text: str) -> bool:
        if len(text) < 6:
            return False
        return bool(_EMAIL.match(text))

    def escape_attr(self, text: str) -> str:
        return html_lib.escape(text, quote=True)

    def escape_html(self, text: str) -> str:
        return html_lib.escape(text, quote=True)
