"""Tests for the Specificity value type."""

import pytest

from cascadelens.model.specificity import INLINE, ZERO, Specificity


class TestConstruction:
    def test_defaults_are_zero(self):
        assert Specificity() == ZERO
        assert ZERO.as_tuple() == (0, 0, 0)

    @pytest.mark.parametrize("field", ["ids", "classes", "types"])
    def test_negative_component_rejected(self, field):
        with pytest.raises(ValueError, match="non-negative"):
            Specificity(**{field: -1})

    def test_frozen(self):
        s = Specificity(ids=1)
        with pytest.raises(AttributeError):
            s.ids = 2  # type: ignore[misc]


class TestOrdering:
    def test_ids_beat_any_number_of_classes(self):
        assert Specificity(ids=1) > Specificity(classes=99, types=99)

    def test_classes_beat_types(self):
        assert Specificity(classes=1) > Specificity(types=50)

    def test_inline_beats_everything(self):
        assert INLINE > Specificity(ids=10, classes=10, types=10)

    def test_equal_values(self):
        assert Specificity(0, 1, 0) == Specificity(0, 1, 0)
        assert not Specificity(0, 1, 0) < Specificity(0, 1, 0)

    def test_sorting(self):
        values = [Specificity(0, 1, 0), Specificity(1, 0, 0), Specificity(0, 0, 3)]
        assert sorted(values, reverse=True) == [
            Specificity(1, 0, 0),
            Specificity(0, 1, 0),
            Specificity(0, 0, 3),
        ]


class TestArithmetic:
    def test_addition_is_componentwise(self):
        assert Specificity(1, 2, 3) + Specificity(0, 1, 1) == Specificity(1, 3, 4)

    def test_addition_keeps_inline(self):
        assert (INLINE + Specificity(0, 1, 0)).inline is True


class TestDisplay:
    def test_str(self):
        assert str(Specificity(1, 0, 2)) == "(1,0,2)"

    def test_inline_str(self):
        assert str(INLINE) == "(1,0,0,0)"

    def test_dashed(self):
        assert Specificity(0, 3, 1).dashed == "0-3-1"

    def test_score(self):
        assert Specificity(1, 2, 3).score == 10_203
        assert INLINE.score == 1_000_000

    @pytest.mark.parametrize(
        "value, level",
        [
            (INLINE, "inline"),
            (Specificity(ids=1), "id"),
            (Specificity(classes=4), "heavy"),
            (Specificity(classes=3, types=5), "normal"),
        ],
    )
    def test_level(self, value, level):
        assert value.level() == level

    def test_level_threshold(self):
        assert Specificity(classes=2).level(heavy_threshold=1) == "heavy"
