"""Tests for the tinycss2-backed stylesheet parser and sheet types."""

import pytest

from cascadelens.errors import SheetAccessError
from cascadelens.model.rules import Declaration, RuleKind
from cascadelens.stylesheet import (
    ParsedStyleSheet,
    UnreadableStyleSheet,
    parse_declarations,
    parse_rules,
)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


class TestStyleRules:
    def test_single_rule(self):
        rules = parse_rules(".btn { color: red; }")
        assert len(rules) == 1
        assert rules[0].kind is RuleKind.STYLE
        assert rules[0].selector == ".btn"
        assert rules[0].declarations == (Declaration(name="color", value="red"),)

    def test_source_order(self):
        rules = parse_rules("a { color: red } #x { margin: 0 } p, li { padding: 1px }")
        assert [r.selector for r in rules] == ["a", "#x", "p, li"]

    def test_comments_skipped(self):
        rules = parse_rules("/* header */ div { /* inner */ color: red; }")
        assert [r.selector for r in rules] == ["div"]
        assert [d.name for d in rules[0].declarations] == ["color"]

    def test_property_names_lowercased(self):
        rules = parse_rules("p { COLOR: Red; }")
        assert rules[0].declarations[0] == Declaration(name="color", value="Red")

    def test_custom_property_keeps_case(self):
        rules = parse_rules(":root { --Brand-Color: #f00; }")
        assert rules[0].declarations[0].name == "--Brand-Color"

    def test_important_flag(self):
        rules = parse_rules("p { color: red !important; margin: 0 }")
        color, margin = rules[0].declarations
        assert color == Declaration(name="color", value="red", important=True)
        assert margin.important is False

    def test_empty_stylesheet(self):
        assert parse_rules("") == ()
        assert parse_rules("   \n\t ") == ()


class TestAtRules:
    @pytest.mark.parametrize(
        "source, kind",
        [
            ("@media (min-width: 40em) { p { color: red } }", RuleKind.MEDIA),
            ("@supports (display: grid) { p { color: red } }", RuleKind.SUPPORTS),
            ("@container card (min-width: 10em) { p { color: red } }", RuleKind.CONTAINER),
            ('@import url("a.css");', RuleKind.IMPORT),
            ("@font-face { font-family: X; }", RuleKind.FONT_FACE),
            ("@keyframes spin { to { rotate: 1turn } }", RuleKind.KEYFRAMES),
            ("@page { margin: 1in }", RuleKind.OTHER),
        ],
    )
    def test_kind(self, source, kind):
        rules = parse_rules(source)
        assert len(rules) == 1
        assert rules[0].kind is kind
        assert not rules[0].is_style_rule

    def test_at_rule_body_not_flattened(self):
        rules = parse_rules("@media print { .a { color: red } } .b { color: blue }")
        assert [r.kind for r in rules] == [RuleKind.MEDIA, RuleKind.STYLE]


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


class TestDeclarations:
    def test_inline_style(self):
        decls = parse_declarations("color: red; margin-top: 4px")
        assert [(d.name, d.value) for d in decls] == [("color", "red"), ("margin-top", "4px")]

    def test_garbage_skipped(self):
        decls = parse_declarations("color red; ; width: 10px")
        assert [d.name for d in decls] == ["width"]

    def test_empty(self):
        assert parse_declarations("") == ()


# ---------------------------------------------------------------------------
# Sheet types
# ---------------------------------------------------------------------------


class TestSheets:
    def test_parsed_sheet_from_css(self):
        sheet = ParsedStyleSheet.from_css(".a { color: red }", label="a.css")
        assert sheet.label == "a.css"
        assert [r.selector for r in sheet.css_rules()] == [".a"]

    def test_unreadable_sheet_raises(self):
        sheet = UnreadableStyleSheet(label="cdn.css")
        with pytest.raises(SheetAccessError) as excinfo:
            sheet.css_rules()
        assert excinfo.value.label == "cdn.css"
        assert "cross-origin" in str(excinfo.value)
