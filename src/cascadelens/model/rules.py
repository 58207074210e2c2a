"""Stylesheet rule model: tagged rule kinds and their declarations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class RuleKind(Enum):
    """Kind of a stylesheet rule. Only STYLE rules take part in a scan."""

    STYLE = "style"
    MEDIA = "media"
    SUPPORTS = "supports"
    CONTAINER = "container"
    IMPORT = "import"
    FONT_FACE = "font-face"
    KEYFRAMES = "keyframes"
    OTHER = "other"
    INVALID = "invalid"


@dataclass(frozen=True)
class Declaration:
    """A single ``name: value`` declaration inside a rule block."""

    name: str
    value: str
    important: bool = False


@dataclass(frozen=True)
class SourceRule:
    """One rule as read from a stylesheet, in source order."""

    kind: RuleKind
    selector: str = ""
    declarations: tuple[Declaration, ...] = field(default_factory=tuple)

    @property
    def is_style_rule(self) -> bool:
        return self.kind is RuleKind.STYLE
