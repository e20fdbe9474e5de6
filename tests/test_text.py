import numpy as np
import pandas as pd
import pytest

from formatkit.config import settings
from formatkit.formatters.text import (
    email_link,
    excerpt,
    html,
    is_empty,
    label,
    maybe_dash,
    rating,
)
from formatkit.host import PlainHost


# --- is_empty / maybe_dash ---
@pytest.mark.parametrize(
    "value",
    [None, False, 0, 0.0, "", "0", [], {}, (), float("nan"), np.nan, pd.NaT, pd.Series([], dtype=float)],
)
def test_is_empty_true(value):
    assert is_empty(value)


@pytest.mark.parametrize("value", [True, 1, -1, "x", "00", " ", [0], {"a": 1}, np.int64(3)])
def test_is_empty_false(value):
    assert not is_empty(value)


def test_maybe_dash():
    assert maybe_dash("Paris") == "Paris"
    assert maybe_dash(42) == "42"
    assert maybe_dash("0") == settings.dash
    assert maybe_dash(None, dash="-") == "-"


def test_maybe_dash_follows_settings(monkeypatch):
    monkeypatch.setattr(settings, "dash", "n/a")
    assert maybe_dash("") == "n/a"


# --- label ---
def test_label():
    assert label("my_field_name") == "My Field Name"
    assert label("my_field-name") == "My Field Name"
    assert label("api-URL") == "Api URL"
    assert label("") == ""


# --- html ---
def test_html_wraps_paragraphs(host):
    assert html("Hello", host=host) == "<p>Hello</p>\n"
    assert html("a\nb\n\nc", host=host) == "<p>a<br />\nb</p>\n<p>c</p>\n"


def test_html_typography(host):
    assert html('It\'s "quoted"', host=host) == "<p>It&#8217;s &#8220;quoted&#8221;</p>\n"
    assert html("Wait... now -- go", host=host) == "<p>Wait&#8230; now &#8211; go</p>\n"


def test_html_leaves_markup_alone(host):
    assert html('<div class="x">hi</div>', host=host) == '<div class="x">hi</div>\n'


def test_html_empty(host):
    assert html("   ", host=host) == ""


# --- excerpt ---
def test_excerpt_strips_tags_and_truncates(host):
    assert excerpt("<b>Hello</b> world", 8, host=host) == "Hello..."


def test_excerpt_short_text_untouched(host):
    assert excerpt("Short", 10, host=host) == "Short"
    assert excerpt("Exactly10!", 10, host=host) == "Exactly10!"


def test_excerpt_removes_script_bodies(host):
    assert excerpt("<script>alert(1)</script>Hi", host=host) == "Hi"


def test_excerpt_length_shorter_than_suffix(host):
    assert excerpt("abcdef", 2, host=host) == "..."


def test_excerpt_counts_characters_not_bytes(host):
    assert excerpt("héllo wörld", 7, suffix="…", host=host) == "héllo …"


def test_excerpt_default_length_from_settings(host, monkeypatch):
    monkeypatch.setattr(settings, "excerpt_length", 5)
    assert excerpt("abcdefgh", host=host) == "ab..."


# --- email_link ---
def test_email_link(host):
    assert email_link("ann@example.com", host=host) == (
        '<a href="mailto:ann@example.com">ann@example.com</a>'
    )
    assert email_link("ann@example.com", "Ann & Co", host=host) == (
        '<a href="mailto:ann@example.com">Ann &amp; Co</a>'
    )


@pytest.mark.parametrize("value", ["not-an-email", "a@b.c", "@example.com", "ann@", "ann@localhost"])
def test_email_link_invalid_returned_unchanged(value, host):
    assert email_link(value, host=host) == value


# --- rating ---
def test_rating():
    assert rating(1) == "1 Star"
    assert rating(4) == "4 Stars"
    assert rating(0) == "No Rating"
    assert rating(None) == "No Rating"


def test_rating_translated():
    class FrenchHost(PlainHost):
        def gettext(self, message):
            return {"No Rating": "Pas de note"}.get(message, message)

        def ngettext(self, singular, plural, count):
            return "%s étoile" if count <= 1 else "%s étoiles"

    assert rating(0, host=FrenchHost()) == "Pas de note"
    assert rating(3, host=FrenchHost()) == "3 étoiles"
