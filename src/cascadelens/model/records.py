"""Scan result model: matched rule records, ranked match sets, conflicts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from cascadelens.model.specificity import Specificity


@dataclass(frozen=True)
class CSSRuleRecord:
    """A rule that matched the scanned element.

    Attributes:
        selector: The rule's selector text, as written in the stylesheet.
        specificity: Specificity of the most specific matching alternative.
        source_label: Where the rule came from (file name, ``<style>``, ``inline``).
        declarations: Declared properties mapped to their values, in first
            declaration order.
        rule_order: Global encounter index across all scanned stylesheets.
        important: Properties declared ``!important``. Recorded, not ranked.
    """

    selector: str
    specificity: Specificity
    source_label: str
    declarations: dict[str, str] = field(default_factory=dict)
    rule_order: int = 0
    important: frozenset[str] = frozenset()

    @property
    def properties(self) -> list[str]:
        return list(self.declarations)

    @property
    def is_inline(self) -> bool:
        return self.specificity.inline

    def to_dict(self) -> dict[str, Any]:
        return {
            "selector": self.selector,
            "specificity": list(self.specificity.as_tuple()),
            "inline": self.is_inline,
            "source": self.source_label,
            "rule_order": self.rule_order,
            "declarations": dict(self.declarations),
            "important": sorted(self.important),
        }


@dataclass(frozen=True)
class MatchStats:
    """Summary figures for a match set."""

    count: int
    highest: int
    lowest: int
    has_inline: bool
    has_ids: bool


@dataclass(frozen=True)
class MatchSet:
    """Rules matching one element, in cascade-winning order."""

    records: tuple[CSSRuleRecord, ...] = ()

    def __iter__(self) -> Iterator[CSSRuleRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index: int) -> CSSRuleRecord:
        return self.records[index]

    @property
    def winner(self) -> CSSRuleRecord | None:
        return self.records[0] if self.records else None

    @property
    def inline(self) -> CSSRuleRecord | None:
        for record in self.records:
            if record.is_inline:
                return record
        return None

    @property
    def selectors(self) -> list[str]:
        return [r.selector for r in self.records]

    def stats(self) -> MatchStats | None:
        """Return summary figures, or None for an empty set."""
        if not self.records:
            return None
        scores = [r.specificity.score for r in self.records]
        return MatchStats(
            count=len(self.records),
            highest=max(scores),
            lowest=min(scores),
            has_inline=any(r.is_inline for r in self.records),
            has_ids=any(r.specificity.ids > 0 for r in self.records),
        )


@dataclass(frozen=True)
class Contributor:
    """One rule's declaration of a conflicting property."""

    record: CSSRuleRecord
    value: str


@dataclass(frozen=True)
class PropertyConflict:
    """A property declared by two or more matching rules, winner first."""

    css_property: str
    contributors: tuple[Contributor, ...]

    @property
    def winner(self) -> Contributor:
        return self.contributors[0]

    @property
    def distinct_values(self) -> list[str]:
        seen: list[str] = []
        for c in self.contributors:
            if c.value not in seen:
                seen.append(c.value)
        return seen

    @property
    def is_redundant(self) -> bool:
        """True if every contributor declares the same value."""
        return len(self.distinct_values) == 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "property": self.css_property,
            "contributors": [
                {
                    "selector": c.record.selector,
                    "specificity": list(c.record.specificity.as_tuple()),
                    "inline": c.record.is_inline,
                    "value": c.value,
                }
                for c in self.contributors
            ],
        }
