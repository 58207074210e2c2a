"""Event types emitted while scanning an element."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScanStarted:
    element: str


@dataclass(frozen=True)
class StylesheetSkipped:
    label: str
    reason: str


@dataclass(frozen=True)
class RuleSkipped:
    selector: str
    source_label: str
    reason: str


@dataclass(frozen=True)
class ScanTruncated:
    element: str
    limit: int


@dataclass(frozen=True)
class ScanCompleted:
    element: str
    match_count: int
    conflict_count: int
