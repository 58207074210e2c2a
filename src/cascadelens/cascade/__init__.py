"""Cascade resolver and conflict detector."""

from cascadelens.cascade.resolver import (
    RankKey,
    cascade_key,
    detect_conflicts,
    rank,
    resolve,
)

__all__ = ["RankKey", "cascade_key", "detect_conflicts", "rank", "resolve"]
