"""Stylesheet model: the host-facing stylesheet and element interfaces.

The scanner never reaches for a global document. Callers hand it an element and
an ordered collection of stylesheets satisfying these protocols, which keeps
the cascade logic testable with synthetic rule sets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from cascadelens.errors import SheetAccessError
from cascadelens.model.rules import Declaration, SourceRule


class StyleSheet(Protocol):
    """An ordered list of rules with a display label."""

    label: str

    def css_rules(self) -> Sequence[SourceRule]:
        """Return the sheet's rules; raise SheetAccessError if unreadable."""
        ...


class Element(Protocol):
    """The selected element, as seen by the scanner.

    Hosts report a selector they cannot evaluate by raising SelectorError from
    :meth:`matches`; the scanner skips that rule and carries on. Any other
    exception is a host bug and propagates out of the scan.
    """

    @property
    def label(self) -> str: ...

    def matches(self, selector: str) -> bool:
        """Test *selector*; raise SelectorError if it cannot be evaluated."""
        ...

    def inline_style(self) -> Sequence[Declaration]: ...


@dataclass(frozen=True)
class ParsedStyleSheet:
    """A stylesheet whose rules have already been read."""

    label: str
    rules: tuple[SourceRule, ...] = ()

    def css_rules(self) -> Sequence[SourceRule]:
        return self.rules

    @classmethod
    def from_css(cls, source: str, label: str) -> ParsedStyleSheet:
        from cascadelens.stylesheet.parser import parse_rules

        return cls(label=label, rules=parse_rules(source))


@dataclass(frozen=True)
class UnreadableStyleSheet:
    """A stylesheet present in the document whose rules cannot be read."""

    label: str
    reason: str = "cross-origin stylesheet"

    def css_rules(self) -> Sequence[SourceRule]:
        raise SheetAccessError(self.label, self.reason)
