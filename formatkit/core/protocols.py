# formatkit/core/protocols.py
"""
Protocol definitions for host services.

Formatters never talk to a locale database, a translation catalog or an HTML
sanitizer directly. They call a *host* object through the protocols below.
A host can be anything that implements the methods; no inheritance needed.

Example:
    # A host that translates into German and otherwise reuses PlainHost
    class GermanHost(PlainHost):
        def gettext(self, message: str) -> str:
            return {"yes": "ja", "no": "nein"}.get(message, message)

    yes_no(True, host=GermanHost())  # 'ja'

The default implementation lives in formatkit/host/plain.py.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class TranslatorProtocol(Protocol):
    """
    Message lookup with plural support.

    Methods:
        gettext: Translate a single message
        ngettext: Pick and translate the singular or plural form for a count
    """

    def gettext(self, message: str) -> str:
        ...

    def ngettext(self, singular: str, plural: str, count: int) -> str:
        ...


@runtime_checkable
class NumberFormatterProtocol(Protocol):
    """Locale-aware number rendering."""

    def format_number(self, value: float, decimals: int) -> str:
        """
        Format a number with grouping and a fixed number of decimals.

        Args:
            value: Number to format
            decimals: Digits after the decimal point

        Returns:
            Formatted string, e.g. "1,234.50"
        """
        ...


@runtime_checkable
class DateFormatterProtocol(Protocol):
    """
    Locale-aware date rendering and parsing.

    `parse_date` must return None on failure, never 0, so that a real
    epoch timestamp stays distinguishable from a parse error.
    """

    def format_date(self, timestamp: int, pattern: str, translate: bool) -> str:
        ...

    def parse_date(self, text: str) -> Optional[int]:
        ...


@runtime_checkable
class RelativeTimeProtocol(Protocol):
    """Human phrases for the distance between two timestamps."""

    def human_time_diff(self, timestamp: int, now: int) -> str:
        """
        Describe the distance between two Unix timestamps.

        Args:
            timestamp: Earlier (or later) point in time
            now: Reference point in time

        Returns:
            Phrase such as "5 mins" or "2 days", without "ago"
        """
        ...

    def current_timestamp(self) -> int:
        ...


@runtime_checkable
class TextTransformProtocol(Protocol):
    """HTML typography, paragraph wrapping and tag stripping."""

    def texturize(self, text: str) -> str:
        ...

    def autop(self, text: str) -> str:
        ...

    def strip_tags(self, text: str) -> str:
        ...


@runtime_checkable
class EmailProtocol(Protocol):
    """Email validation and HTML escaping for mailto links."""

    def is_email(self, text: str) -> bool:
        ...

    def escape_attr(self, text: str) -> str:
        ...

    def escape_html(self, text: str) -> str:
        ...


@runtime_checkable
class HostServicesProtocol(
    TranslatorProtocol,
    NumberFormatterProtocol,
    DateFormatterProtocol,
    RelativeTimeProtocol,
    TextTransformProtocol,
    EmailProtocol,
    Protocol,
):
    """
    Everything the pass-through formatters may ask of a host.

    The list and duration formatters only need `gettext`, and only for the
    default overflow phrase.
    """
