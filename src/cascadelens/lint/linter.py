"""Cascade linter: runs all lint checks and collects diagnostics."""

from __future__ import annotations

from typing import Callable

from cascadelens.config import ScanConfig
from cascadelens.lint.rules import ALL_RULES
from cascadelens.model.diagnostic import Diagnostic
from cascadelens.model.records import MatchSet, PropertyConflict

RuleFunc = Callable[[MatchSet, list[PropertyConflict], ScanConfig], list[Diagnostic]]


def lint(
    match_set: MatchSet,
    conflicts: list[PropertyConflict],
    config: ScanConfig | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run all lint checks against a resolved cascade.

    Returns the full list of diagnostics (errors, warnings, info).
    """
    config = config or ScanConfig()
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(match_set, conflicts, config))
    return diagnostics
