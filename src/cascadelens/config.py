from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScanConfig:
    max_matches: int = 500
    max_properties_per_rule: int = 100
    inline_label: str = "inline"
    heavy_class_threshold: int = 3  # classes above this flag a selector as heavy
