"""Specificity model: the (ids, classes, types) weight of a selector."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True)
class Specificity:
    """Specificity triple plus the inline-style origin flag.

    Values compare lexicographically on ``(inline, ids, classes, types)`` so an
    inline-origin value outranks every stylesheet-derived one.
    """

    ids: int = 0
    classes: int = 0
    types: int = 0
    inline: bool = False

    def __post_init__(self) -> None:
        if self.ids < 0 or self.classes < 0 or self.types < 0:
            raise ValueError(
                f"Specificity components must be non-negative, got {self.as_tuple()}"
            )

    @property
    def key(self) -> tuple[int, int, int, int]:
        return (int(self.inline), self.ids, self.classes, self.types)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.ids, self.classes, self.types)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Specificity):
            return NotImplemented
        return self.key < other.key

    def __add__(self, other: object) -> Specificity:
        if not isinstance(other, Specificity):
            return NotImplemented
        return Specificity(
            ids=self.ids + other.ids,
            classes=self.classes + other.classes,
            types=self.types + other.types,
            inline=self.inline or other.inline,
        )

    @property
    def score(self) -> int:
        """Single sortable number, as shown in the specificity badges."""
        return (
            int(self.inline) * 1_000_000
            + self.ids * 10_000
            + self.classes * 100
            + self.types
        )

    @property
    def dashed(self) -> str:
        return f"{self.ids}-{self.classes}-{self.types}"

    def level(self, heavy_threshold: int = 3) -> str:
        """Badge level: ``inline``, ``id``, ``heavy`` or ``normal``."""
        if self.inline:
            return "inline"
        if self.ids > 0:
            return "id"
        if self.classes > heavy_threshold:
            return "heavy"
        return "normal"

    def __str__(self) -> str:
        if self.inline:
            return f"(1,{self.ids},{self.classes},{self.types})"
        return f"({self.ids},{self.classes},{self.types})"


ZERO = Specificity()
INLINE = Specificity(inline=True)
