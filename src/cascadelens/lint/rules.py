"""Lint checks over a resolved cascade.

Each check takes the ranked match set, its conflicts and the scan config, and
returns a list of Diagnostic objects. None of them can fail a scan; they only
annotate it for display.
"""

from __future__ import annotations

from cascadelens.config import ScanConfig
from cascadelens.model.diagnostic import Diagnostic, Severity
from cascadelens.model.records import MatchSet, PropertyConflict


def check_no_matches(
    match_set: MatchSet, conflicts: list[PropertyConflict], config: ScanConfig
) -> list[Diagnostic]:
    """An element with no matching rules is reported, not treated as an error."""
    if len(match_set):
        return []
    return [
        Diagnostic(
            rule="check_no_matches",
            severity=Severity.INFO,
            message="0 rules found for the selected element.",
        )
    ]


def check_inline_styles(
    match_set: MatchSet, conflicts: list[PropertyConflict], config: ScanConfig
) -> list[Diagnostic]:
    """Inline styles outrank every stylesheet rule."""
    inline = match_set.inline
    if inline is None:
        return []
    props = ", ".join(inline.properties)
    return [
        Diagnostic(
            rule="check_inline_styles",
            severity=Severity.WARNING,
            message=f"Element has inline styles (highest priority): {props}.",
            selector=inline.selector,
            fix="Move the declarations into a stylesheet rule.",
        )
    ]


def check_id_selectors(
    match_set: MatchSet, conflicts: list[PropertyConflict], config: ScanConfig
) -> list[Diagnostic]:
    """Rules using ID selectors are hard to override."""
    return [
        Diagnostic(
            rule="check_id_selectors",
            severity=Severity.INFO,
            message=f"Rule '{r.selector}' uses an ID selector {r.specificity}.",
            selector=r.selector,
        )
        for r in match_set
        if not r.is_inline and r.specificity.ids > 0
    ]


def check_heavy_selectors(
    match_set: MatchSet, conflicts: list[PropertyConflict], config: ScanConfig
) -> list[Diagnostic]:
    """Long class chains inflate specificity."""
    limit = config.heavy_class_threshold
    return [
        Diagnostic(
            rule="check_heavy_selectors",
            severity=Severity.WARNING,
            message=(
                f"Rule '{r.selector}' has {r.specificity.classes} class-level "
                f"components (more than {limit})."
            ),
            selector=r.selector,
            fix="Prefer a single, more descriptive class.",
        )
        for r in match_set
        if r.specificity.level(limit) == "heavy"
    ]


def check_property_conflicts(
    match_set: MatchSet, conflicts: list[PropertyConflict], config: ScanConfig
) -> list[Diagnostic]:
    """Competing declarations: a warning when values differ, info when redundant."""
    diagnostics: list[Diagnostic] = []
    for conflict in conflicts:
        winner = conflict.winner
        losers = ", ".join(f"'{c.record.selector}'" for c in conflict.contributors[1:])
        if conflict.is_redundant:
            diagnostics.append(
                Diagnostic(
                    rule="check_property_conflicts",
                    severity=Severity.INFO,
                    message=(
                        f"'{conflict.css_property}: {winner.value}' is declared by "
                        f"{len(conflict.contributors)} rules with the same value."
                    ),
                    css_property=conflict.css_property,
                    selector=winner.record.selector,
                    fix=f"Remove the redundant declaration from {losers}.",
                )
            )
        else:
            diagnostics.append(
                Diagnostic(
                    rule="check_property_conflicts",
                    severity=Severity.WARNING,
                    message=(
                        f"'{conflict.css_property}' is declared by {len(conflict.contributors)} "
                        f"rules; '{winner.record.selector}' wins with '{winner.value}' "
                        f"over {losers}."
                    ),
                    css_property=conflict.css_property,
                    selector=winner.record.selector,
                )
            )
    return diagnostics


ALL_RULES = [
    check_no_matches,
    check_inline_styles,
    check_id_selectors,
    check_heavy_selectors,
    check_property_conflicts,
]
