"""Cascade resolution: rank matched rules and find competing declarations.

Ranking, highest first:

1. Inline origin - the element's style attribute beats every stylesheet rule
2. Specificity - ids, then classes, then types
3. Source order - among equal specificity the later rule wins

``!important`` is not modelled. Callers that want it can pass their own
``rank_key``; records carry the set of important properties for that purpose.
"""

from __future__ import annotations

from typing import Callable, Iterable

from cascadelens.model.records import (
    Contributor,
    CSSRuleRecord,
    MatchSet,
    PropertyConflict,
)

__all__ = ["RankKey", "cascade_key", "rank", "detect_conflicts", "resolve"]

RankKey = Callable[[CSSRuleRecord], tuple]


def cascade_key(record: CSSRuleRecord) -> tuple[int, int, int, int, int]:
    """Sort key for a record; larger keys win."""
    return (*record.specificity.key, record.rule_order)


def rank(records: Iterable[CSSRuleRecord], rank_key: RankKey = cascade_key) -> MatchSet:
    """Order *records* winner first."""
    return MatchSet(records=tuple(sorted(records, key=rank_key, reverse=True)))


def detect_conflicts(match_set: MatchSet) -> list[PropertyConflict]:
    """Return every property declared by two or more records of *match_set*.

    Properties appear in the order they are first met walking the ranked set;
    contributors are listed winner first with the value their rule declares.
    """
    by_property: dict[str, list[Contributor]] = {}
    for record in match_set:
        for prop, value in record.declarations.items():
            by_property.setdefault(prop, []).append(Contributor(record=record, value=value))
    return [
        PropertyConflict(css_property=prop, contributors=tuple(contributors))
        for prop, contributors in by_property.items()
        if len(contributors) > 1
    ]


def resolve(
    records: Iterable[CSSRuleRecord], rank_key: RankKey = cascade_key
) -> tuple[MatchSet, list[PropertyConflict]]:
    """Rank *records* and detect their property conflicts in one pass."""
    match_set = rank(records, rank_key=rank_key)
    return match_set, detect_conflicts(match_set)
