import pytest

from formatkit.core.exceptions import TemplateError
from formatkit.formatters.lists import join_natural, join_with_overflow
from formatkit.host import PlainHost, set_default_host


class RecordingTranslator:
    def __init__(self, translations=None):
        self.translations = translations or {}
        self.calls = []

    def gettext(self, message):
        self.calls.append(message)
        return self.translations.get(message, message)

    def ngettext(self, singular, plural, count):
        return singular if count == 1 else plural


# --- join_natural ---
def test_join_natural_empty():
    assert join_natural([]) == ""
    assert join_natural(None) == ""


def test_join_natural_single_item():
    assert join_natural(["A"]) == "A"


def test_join_natural_two_items_uses_only_last_separator():
    assert join_natural(["A", "B"]) == "A and B"
    assert join_natural(["A", "B"], separator="; ") == "A and B"
    assert join_natural(["A", "B"], last_separator=" or ") == "A or B"


def test_join_natural_three_and_more():
    assert join_natural(["A", "B", "C"]) == "A, B and C"
    assert join_natural(["A", "B", "C", "D"]) == "A, B, C and D"


def test_join_natural_custom_separators():
    assert join_natural(["x", "y", "z"], " / ", " & ") == "x / y & z"


def test_join_natural_converts_items_to_strings():
    assert join_natural([1, 2.5, None]) == "1, 2.5 and "
    assert join_natural([b"raw", "text"]) == "raw and text"


def test_join_natural_accepts_any_iterable():
    assert join_natural(("A", "B", "C")) == "A, B and C"
    assert join_natural(x for x in ["A", "B"]) == "A and B"
    assert join_natural({"first": "A", "second": "B"}) == "A and B"


def test_join_natural_bare_string_is_one_item():
    assert join_natural("ABC") == "ABC"


def test_join_natural_keeps_duplicates_and_order():
    assert join_natural(["B", "A", "B"]) == "B, A and B"


# --- join_with_overflow ---
def test_overflow_empty():
    assert join_with_overflow([]) == ""


def test_overflow_not_needed_matches_join_natural():
    for n in range(0, 6):
        items = [chr(ord("A") + i) for i in range(n)]
        for limit in range(max(n, 1), 7):
            assert join_with_overflow(items, limit) == join_natural(items)


def test_overflow_spec_examples():
    items = ["A", "B", "C", "D", "E"]
    assert join_with_overflow(items, 3) == "A, B and 3 more"
    assert join_with_overflow(items, 2) == "A and 4 more"


def test_overflow_default_limit_is_three():
    assert join_with_overflow(["A", "B", "C", "D"]) == "A, B and 2 more"


def test_overflow_limit_one_shows_only_count():
    assert join_with_overflow(["A", "B", "C"], 1) == "3 more"
    assert join_with_overflow(["A"], 1) == "A"


def test_overflow_limit_below_one_is_clamped():
    assert join_with_overflow(["A", "B", "C"], 0) == "3 more"
    assert join_with_overflow(["A", "B", "C"], -5) == "3 more"


def test_overflow_custom_separators():
    items = ["A", "B", "C", "D", "E"]
    assert join_with_overflow(items, 4, "; ", " or ") == "A; B; C or 2 more"


def test_overflow_custom_template_verbatim():
    items = ["A", "B", "C", "D", "E"]
    assert join_with_overflow(items, 3, overflow_template="%d others") == "A, B and 3 others"
    assert join_with_overflow(items, 2, overflow_template="(+%s)") == "A and (+4)"
    assert join_with_overflow(items, 2, overflow_template="%d%% rest") == "A and 4% rest"


def test_overflow_template_without_placeholder_is_used_as_is():
    items = ["A", "B", "C", "D", "E"]
    assert join_with_overflow(items, 2, overflow_template="plus others") == "A and plus others"


def test_overflow_template_with_two_placeholders_raises():
    with pytest.raises(TemplateError):
        join_with_overflow(["A", "B", "C"], 2, overflow_template="%d of %d")


def test_overflow_template_with_unsupported_conversion_raises():
    with pytest.raises(TemplateError):
        join_with_overflow(["A", "B", "C"], 2, overflow_template="%x more")
    with pytest.raises(TemplateError):
        join_with_overflow(["A", "B", "C"], 2, overflow_template="100%")


def test_overflow_template_error_is_a_value_error():
    with pytest.raises(ValueError):
        join_with_overflow(["A", "B", "C"], 2, overflow_template="%d/%d")


def test_overflow_does_not_touch_template_when_not_overflowing():
    assert join_with_overflow(["A", "B"], 3, overflow_template="%d of %d") == "A and B"


def test_overflow_does_not_mutate_input():
    items = ["A", "B", "C", "D", "E"]
    join_with_overflow(items, 2)
    assert items == ["A", "B", "C", "D", "E"]


def test_overflow_consumes_generators_once():
    gen = (name for name in ["A", "B", "C", "D"])
    assert join_with_overflow(gen, 3) == "A, B and 2 more"


# --- translation of the default phrase ---
def test_default_template_goes_through_translator():
    translator = RecordingTranslator({"%d more": "%d de plus"})
    out = join_with_overflow(["A", "B", "C", "D", "E"], 2, last_separator=" et ", host=translator)
    assert out == "A et 4 de plus"
    assert translator.calls == ["%d more"]


def test_custom_template_skips_translator():
    translator = RecordingTranslator({"%d others": "nope"})
    out = join_with_overflow(["A", "B", "C"], 2, overflow_template="%d others", host=translator)
    assert out == "A and 2 others"
    assert translator.calls == []


def test_default_template_uses_global_host():
    class GermanHost(PlainHost):
        def gettext(self, message):
            return {"%d more": "%d weitere"}.get(message, message)

    set_default_host(GermanHost())
    assert join_with_overflow(["A", "B", "C", "D"], 2, last_separator=" und ") == "A und 3 weitere"
