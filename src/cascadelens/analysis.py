"""One scan of one element: match, rank, detect conflicts, lint.

:func:`analyze` is the entry point the display surfaces call. It builds every
piece of its result from its inputs and returns them together in a frozen
:class:`Analysis`, so a caller that triggers a second scan simply replaces the
first result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from cascadelens.cascade import RankKey, cascade_key, resolve
from cascadelens.config import ScanConfig
from cascadelens.events import EventBus, ScanCompleted
from cascadelens.lint import lint
from cascadelens.model.diagnostic import Diagnostic
from cascadelens.model.records import MatchSet, PropertyConflict
from cascadelens.scanner import scan
from cascadelens.stylesheet.model import Element, StyleSheet

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Analysis:
    """Everything one scan produced for one element."""

    element: str
    match_set: MatchSet
    conflicts: tuple[PropertyConflict, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()
    skipped_sheets: tuple[str, ...] = ()
    skipped_rules: int = 0
    truncated: bool = False

    @property
    def conflicting_selectors(self) -> set[str]:
        """Selectors of every rule involved in at least one conflict."""
        return {c.record.selector for conflict in self.conflicts for c in conflict.contributors}

    def to_dict(self) -> dict[str, Any]:
        stats = self.match_set.stats()
        return {
            "element": self.element,
            "rules": [r.to_dict() for r in self.match_set],
            "conflicts": [c.to_dict() for c in self.conflicts],
            "diagnostics": [
                {"rule": d.rule, "severity": d.severity.value, "message": d.message}
                for d in self.diagnostics
            ],
            "stats": None if stats is None else {
                "count": stats.count,
                "highest": stats.highest,
                "lowest": stats.lowest,
                "has_inline": stats.has_inline,
                "has_ids": stats.has_ids,
            },
            "skipped_sheets": list(self.skipped_sheets),
            "skipped_rules": self.skipped_rules,
            "truncated": self.truncated,
        }


def analyze(
    element: Element,
    stylesheets: Iterable[StyleSheet],
    config: ScanConfig | None = None,
    *,
    event_bus: EventBus | None = None,
    rank_key: RankKey = cascade_key,
) -> Analysis:
    """Scan *element* against *stylesheets* and resolve the cascade."""
    config = config or ScanConfig()
    bus = event_bus or EventBus()

    result = scan(element, stylesheets, config, event_bus=bus)
    match_set, conflicts = resolve(result.records, rank_key=rank_key)
    diagnostics = lint(match_set, conflicts, config)

    log.debug(
        "Analyzed %s: %d rules, %d conflicts, %d sheets skipped",
        element.label,
        len(match_set),
        len(conflicts),
        len(result.skipped_sheets),
    )
    bus.emit(
        ScanCompleted(
            element=element.label,
            match_count=len(match_set),
            conflict_count=len(conflicts),
        )
    )
    return Analysis(
        element=element.label,
        match_set=match_set,
        conflicts=tuple(conflicts),
        diagnostics=tuple(diagnostics),
        skipped_sheets=result.skipped_sheets,
        skipped_rules=result.skipped_rules,
        truncated=result.truncated,
    )
