"""Stylesheet parser built on tinycss2.

Turns CSS source into tagged :class:`SourceRule` objects in source order::

    .btn { color: red; }          -> SourceRule(STYLE, ".btn", (color: red,))
    @media (min-width: 40em) {..} -> SourceRule(MEDIA, "(min-width: 40em)")

At-rule bodies are not descended into.
"""

from __future__ import annotations

import tinycss2

from cascadelens.model.rules import Declaration, RuleKind, SourceRule

__all__ = ["parse_rules", "parse_declarations"]

_AT_RULE_KINDS: dict[str, RuleKind] = {
    "media": RuleKind.MEDIA,
    "supports": RuleKind.SUPPORTS,
    "container": RuleKind.CONTAINER,
    "import": RuleKind.IMPORT,
    "font-face": RuleKind.FONT_FACE,
    "keyframes": RuleKind.KEYFRAMES,
    "-webkit-keyframes": RuleKind.KEYFRAMES,
}


def _declarations_from(content: object) -> tuple[Declaration, ...]:
    declarations: list[Declaration] = []
    for node in tinycss2.parse_declaration_list(
        content, skip_comments=True, skip_whitespace=True
    ):
        if node.type != "declaration":
            continue
        # Custom properties are case-sensitive.
        name = node.name if node.name.startswith("--") else node.lower_name
        value = tinycss2.serialize(node.value).strip()
        declarations.append(Declaration(name=name, value=value, important=node.important))
    return tuple(declarations)


def parse_declarations(source: str) -> tuple[Declaration, ...]:
    """Parse a declaration list such as an element's ``style`` attribute."""
    return _declarations_from(source or "")


def parse_rules(source: str) -> tuple[SourceRule, ...]:
    """Parse a stylesheet into rules, preserving source order."""
    rules: list[SourceRule] = []
    for node in tinycss2.parse_stylesheet(
        source or "", skip_comments=True, skip_whitespace=True
    ):
        if node.type == "qualified-rule":
            rules.append(
                SourceRule(
                    kind=RuleKind.STYLE,
                    selector=tinycss2.serialize(node.prelude).strip(),
                    declarations=_declarations_from(node.content),
                )
            )
        elif node.type == "at-rule":
            kind = _AT_RULE_KINDS.get(node.lower_at_keyword, RuleKind.OTHER)
            rules.append(SourceRule(kind=kind, selector=tinycss2.serialize(node.prelude).strip()))
        else:
            rules.append(SourceRule(kind=RuleKind.INVALID))
    return tuple(rules)
