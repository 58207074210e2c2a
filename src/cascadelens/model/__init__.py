"""cascadelens model layer -- public type re-exports."""

from cascadelens.model.diagnostic import Diagnostic, Severity
from cascadelens.model.records import (
    Contributor,
    CSSRuleRecord,
    MatchSet,
    MatchStats,
    PropertyConflict,
)
from cascadelens.model.rules import Declaration, RuleKind, SourceRule
from cascadelens.model.specificity import INLINE, ZERO, Specificity

__all__ = [
    # specificity
    "Specificity",
    "ZERO",
    "INLINE",
    # rules
    "RuleKind",
    "Declaration",
    "SourceRule",
    # records
    "CSSRuleRecord",
    "MatchSet",
    "MatchStats",
    "Contributor",
    "PropertyConflict",
    # diagnostic
    "Severity",
    "Diagnostic",
]
