from __future__ import annotations

import pytest

from cascadelens.config import ScanConfig


class TestScanConfig:
    def test_default_values(self) -> None:
        cfg = ScanConfig()
        assert cfg.max_matches == 500
        assert cfg.max_properties_per_rule == 100
        assert cfg.inline_label == "inline"
        assert cfg.heavy_class_threshold == 3

    def test_custom_values(self) -> None:
        cfg = ScanConfig(
            max_matches=10,
            max_properties_per_rule=5,
            inline_label="style attr",
            heavy_class_threshold=2,
        )
        assert cfg.max_matches == 10
        assert cfg.max_properties_per_rule == 5
        assert cfg.inline_label == "style attr"
        assert cfg.heavy_class_threshold == 2

    def test_frozen_immutability(self) -> None:
        cfg = ScanConfig()
        with pytest.raises(AttributeError):
            cfg.max_matches = 1  # type: ignore[misc]

    def test_equality(self) -> None:
        assert ScanConfig() == ScanConfig()
        assert ScanConfig(max_matches=1) != ScanConfig()
