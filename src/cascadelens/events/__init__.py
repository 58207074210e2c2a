"""Event system: bus and event types for the scan lifecycle."""

from cascadelens.events.bus import EventBus
from cascadelens.events.types import (
    RuleSkipped,
    ScanCompleted,
    ScanStarted,
    ScanTruncated,
    StylesheetSkipped,
)

__all__ = [
    "EventBus",
    "RuleSkipped",
    "ScanCompleted",
    "ScanStarted",
    "ScanTruncated",
    "StylesheetSkipped",
]
