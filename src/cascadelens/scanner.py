"""Stylesheet rule scanner: collects the rules that match one element.

Sheets are walked in document order and their style rules in rule order, with a
single ``rule_order`` counter shared across sheets. An unreadable sheet or a
selector the host cannot evaluate is skipped and the scan carries on; neither
:class:`SheetAccessError` nor :class:`SelectorError` escapes :func:`scan`. Hosts
must translate their own selector failures into SelectorError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from cascadelens.config import ScanConfig
from cascadelens.errors import SelectorError, SheetAccessError
from cascadelens.events import (
    EventBus,
    RuleSkipped,
    ScanStarted,
    ScanTruncated,
    StylesheetSkipped,
)
from cascadelens.model.records import CSSRuleRecord
from cascadelens.model.rules import Declaration, SourceRule
from cascadelens.model.specificity import Specificity
from cascadelens.selector import inline_specificity, specificity_of, split_selector_list
from cascadelens.stylesheet.model import Element, StyleSheet

__all__ = ["INLINE_SELECTOR", "ScanResult", "scan"]

log = logging.getLogger(__name__)

INLINE_SELECTOR = "inline styles"


@dataclass(frozen=True)
class ScanResult:
    """Matched records in encounter order, plus what the scan had to skip."""

    records: tuple[CSSRuleRecord, ...] = ()
    skipped_sheets: tuple[str, ...] = ()
    skipped_rules: int = 0
    truncated: bool = False


def _match_specificity(element: Element, selector: str) -> Specificity | None:
    """Return the specificity of the most specific alternative matching *element*.

    Returns None when nothing matches. A SelectorError from any alternative
    propagates, invalidating the whole rule as a browser would.
    """
    best: Specificity | None = None
    for alternative in split_selector_list(selector):
        if element.matches(alternative):
            specificity = specificity_of(alternative)
            if best is None or specificity > best:
                best = specificity
    return best


def _collect(
    declarations: Sequence[Declaration], limit: int
) -> tuple[dict[str, str], frozenset[str]]:
    """Deduplicate declarations by name, keeping first position and last value."""
    values: dict[str, str] = {}
    important: set[str] = set()
    for decl in declarations:
        if not decl.value:
            continue
        if decl.name not in values and len(values) >= limit:
            continue
        values[decl.name] = decl.value
        if decl.important:
            important.add(decl.name)
    return values, frozenset(important)


def _rule_record(
    rule: SourceRule,
    specificity: Specificity,
    source_label: str,
    rule_order: int,
    config: ScanConfig,
) -> CSSRuleRecord:
    values, important = _collect(rule.declarations, config.max_properties_per_rule)
    return CSSRuleRecord(
        selector=rule.selector,
        specificity=specificity,
        source_label=source_label,
        declarations=values,
        rule_order=rule_order,
        important=important,
    )


def _inline_record(element: Element, rule_order: int, config: ScanConfig) -> CSSRuleRecord | None:
    values, important = _collect(element.inline_style(), config.max_properties_per_rule)
    if not values:
        return None
    return CSSRuleRecord(
        selector=INLINE_SELECTOR,
        specificity=inline_specificity(),
        source_label=config.inline_label,
        declarations=values,
        rule_order=rule_order,
        important=important,
    )


def scan(
    element: Element,
    stylesheets: Iterable[StyleSheet],
    config: ScanConfig | None = None,
    *,
    event_bus: EventBus | None = None,
) -> ScanResult:
    """Collect a record for every style rule matching *element*.

    Records come back in encounter order; ranking is left to the resolver.
    The element's inline style, if any, is appended last with a rule order
    above every stylesheet rule.
    """
    config = config or ScanConfig()
    bus = event_bus or EventBus()

    records: list[CSSRuleRecord] = []
    skipped_sheets: list[str] = []
    skipped_rules = 0
    truncated = False
    rule_order = 0

    bus.emit(ScanStarted(element=element.label))

    for sheet in stylesheets:
        try:
            rules = list(sheet.css_rules())
        except SheetAccessError as exc:
            log.info("Skipping stylesheet %s: %s", sheet.label, exc.reason or exc)
            skipped_sheets.append(sheet.label)
            bus.emit(StylesheetSkipped(label=sheet.label, reason=str(exc)))
            continue

        for rule in rules:
            if not rule.is_style_rule:
                continue
            rule_order += 1
            try:
                specificity = _match_specificity(element, rule.selector)
            except SelectorError as exc:
                skipped_rules += 1
                log.debug("Skipping rule %r in %s: %s", rule.selector, sheet.label, exc)
                bus.emit(
                    RuleSkipped(selector=rule.selector, source_label=sheet.label, reason=str(exc))
                )
                continue
            if specificity is None:
                continue
            if len(records) >= config.max_matches:
                truncated = True
                break
            records.append(_rule_record(rule, specificity, sheet.label, rule_order, config))

        if truncated:
            log.warning(
                "Scan of %s stopped after %d matching rules", element.label, config.max_matches
            )
            bus.emit(ScanTruncated(element=element.label, limit=config.max_matches))
            break

    inline = _inline_record(element, rule_order + 1, config)
    if inline is not None:
        records.append(inline)

    return ScanResult(
        records=tuple(records),
        skipped_sheets=tuple(skipped_sheets),
        skipped_rules=skipped_rules,
        truncated=truncated,
    )
