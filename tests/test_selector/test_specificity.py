"""Tests for the selector specificity calculator."""

import pytest

from cascadelens.model.specificity import Specificity
from cascadelens.selector import inline_specificity, specificity_of


def _s(ids: int = 0, classes: int = 0, types: int = 0) -> Specificity:
    return Specificity(ids=ids, classes=classes, types=types)


# ---------------------------------------------------------------------------
# Simple selectors
# ---------------------------------------------------------------------------


class TestSimpleSelectors:
    def test_id(self):
        assert specificity_of("#id") == _s(1, 0, 0)

    def test_two_classes(self):
        assert specificity_of(".a.b") == _s(0, 2, 0)

    def test_type(self):
        assert specificity_of("div") == _s(0, 0, 1)

    def test_compound(self):
        assert specificity_of("a#home.active") == _s(1, 1, 1)

    def test_universal_is_free(self):
        assert specificity_of("*") == _s()
        assert specificity_of("* > *") == _s()

    def test_universal_with_class(self):
        assert specificity_of("*.note") == _s(0, 1, 0)


# ---------------------------------------------------------------------------
# Pseudo-elements
# ---------------------------------------------------------------------------


class TestPseudoElements:
    def test_before_counts_as_type(self):
        assert specificity_of("div::before") == _s(0, 0, 2)

    def test_first_line(self):
        assert specificity_of("p::first-line") == _s(0, 0, 2)

    def test_legacy_single_colon(self):
        assert specificity_of("a:after") == _s(0, 0, 2)

    def test_case_insensitive(self):
        assert specificity_of("DIV::BEFORE") == _s(0, 0, 2)

    def test_vendor_prefixed(self):
        assert specificity_of("::-webkit-scrollbar") == _s(0, 0, 1)

    def test_functional_pseudo_element(self):
        assert specificity_of("my-widget::part(label)") == _s(0, 0, 2)


# ---------------------------------------------------------------------------
# Pseudo-classes and attributes
# ---------------------------------------------------------------------------


class TestPseudoClasses:
    def test_hover(self):
        assert specificity_of("a:hover") == _s(0, 1, 1)

    def test_nth_of_type_argument_not_counted(self):
        assert specificity_of("li:nth-of-type(2n+1)") == _s(0, 1, 1)

    def test_focus_visible(self):
        assert specificity_of("input:focus-visible") == _s(0, 1, 1)

    def test_attribute(self):
        assert specificity_of("a[href]") == _s(0, 1, 1)

    def test_attribute_value_is_opaque(self):
        assert specificity_of('[data-x="#a.b div"]') == _s(0, 1, 0)


class TestFunctionalPseudoClasses:
    def test_not_counts_argument_only(self):
        assert specificity_of(":not(.a)") == _s(0, 1, 0)

    def test_where_is_always_zero(self):
        assert specificity_of(":where(.a#b)") == _s()

    def test_where_keeps_outer_weight(self):
        assert specificity_of("a:where(.x, #y)") == _s(0, 0, 1)

    def test_is_takes_most_specific_member(self):
        assert specificity_of(":is(#a, .b)") == _s(1, 0, 0)

    def test_has_with_relative_selector(self):
        assert specificity_of("figure:has(> img)") == _s(0, 0, 2)

    def test_nested(self):
        assert specificity_of(":not(:is(.a .b))") == _s(0, 2, 0)

    def test_mixed_with_pseudo_element(self):
        assert specificity_of("li:not(.done)::marker") == _s(0, 1, 2)


# ---------------------------------------------------------------------------
# Combinators and lists
# ---------------------------------------------------------------------------


class TestCombinators:
    def test_all_combinators(self):
        assert specificity_of("ul > li + li ~ p") == _s(0, 0, 4)

    def test_descendant(self):
        assert specificity_of("#nav .item a") == _s(1, 1, 1)


class TestSelectorLists:
    def test_list_takes_maximum(self):
        assert specificity_of("h1, .title") == _s(0, 1, 0)

    def test_id_member_wins(self):
        assert specificity_of(".a.b.c, #x") == _s(1, 0, 0)


# ---------------------------------------------------------------------------
# Escapes and quoted attribute values
# ---------------------------------------------------------------------------


class TestEscapedAndQuoted:
    @pytest.mark.parametrize(
        "selector, expected",
        [
            (r".md\:flex", (0, 1, 0)),
            (r".hover\:bg-red:hover", (0, 2, 0)),
            (r".w-1\/2", (0, 1, 0)),
            (r"div .sm\:p-4", (0, 1, 1)),
            (r"#a\.b", (1, 0, 0)),
            (r".\31 23", (0, 1, 0)),
            (r"a\:b", (0, 0, 1)),
        ],
    )
    def test_escaped_identifiers(self, selector, expected):
        assert specificity_of(selector) == _s(*expected)

    @pytest.mark.parametrize(
        "selector, expected",
        [
            ('[title="a]b"]', (0, 1, 0)),
            ("a[href='#top']", (0, 1, 1)),
            ('[data-x=".b"]', (0, 1, 0)),
            ('input[value="x:hover"]:focus', (0, 2, 1)),
            (r".a\[b", (0, 1, 0)),
        ],
    )
    def test_attribute_values_are_opaque(self, selector, expected):
        assert specificity_of(selector) == _s(*expected)

    def test_escaped_class_inside_not(self):
        assert specificity_of(r"li:not(.md\:hidden)") == _s(0, 1, 1)


# ---------------------------------------------------------------------------
# Malformed input
# ---------------------------------------------------------------------------


class TestMalformed:
    @pytest.mark.parametrize("selector", ["", "   ", "::", ")))", ",,,"])
    def test_empty_or_garbage_is_zero(self, selector):
        assert specificity_of(selector) == _s()

    def test_unclosed_not_counted_at_face_value(self):
        assert specificity_of(":not(.a") == _s(0, 2, 0)

    def test_unclosed_where_contributes_nothing(self):
        assert specificity_of(":where(.a") == _s(0, 1, 0)

    def test_unterminated_attribute(self):
        assert specificity_of("[data-x") == _s(0, 1, 0)

    @pytest.mark.parametrize(
        "selector",
        ['a[href="x', "div:not(", ":is(:is(:is(", "#", ".", "\\", "a > > b"],
    )
    def test_never_raises(self, selector):
        result = specificity_of(selector)
        assert min(result.as_tuple()) >= 0


class TestInlineSpecificity:
    def test_inline_outranks_any_selector(self):
        assert inline_specificity() > specificity_of("#a #b #c .d .e div")

    def test_inline_flag(self):
        assert inline_specificity().inline is True
