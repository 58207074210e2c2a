"""Selector tokenizer: separates pseudo-elements and functional pseudo-classes.

The tokenizer never raises. Constructs it cannot close (an unbalanced
parenthesis, an unterminated string or attribute bracket) are passed through as
literal text and counted at face value by the calculator.

Example: ``li:not(.done)::marker`` normalizes to stripped ``li:not(.done)``,
structural ``li``, pseudo-elements ``("marker",)`` and one ``not`` span whose
argument is ``.done``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = [
    "FUNCTIONAL_PSEUDO_CLASSES",
    "FunctionalSpan",
    "NormalizedSelector",
    "normalize",
    "split_selector_list",
    "strip_attributes",
]

# Pseudo-classes whose argument is itself a selector.
FUNCTIONAL_PSEUDO_CLASSES = frozenset({"not", "is", "has", "where"})

# CSS2 pseudo-elements that may still be written with a single colon.
LEGACY_PSEUDO_ELEMENTS = frozenset({"before", "after", "first-line", "first-letter"})

_NAME_RE = re.compile(r"-?[^\W\d][\w-]*")


@dataclass(frozen=True)
class FunctionalSpan:
    """A ``:not()``, ``:is()``, ``:has()`` or ``:where()`` occurrence."""

    name: str  # lowercased, without the colon
    argument: str  # inner selector text


@dataclass(frozen=True)
class NormalizedSelector:
    """A selector split into the parts the calculator counts separately.

    Attributes:
        raw: The selector as given.
        stripped: The selector without pseudo-element tokens.
        structural: ``stripped`` without the functional pseudo-class spans, and
            with the arguments of other functional pseudo-classes emptied.
        pseudo_elements: Lowercased names of the stripped pseudo-elements.
        functional: Functional pseudo-class spans, in order of appearance.
    """

    raw: str
    stripped: str
    structural: str
    pseudo_elements: tuple[str, ...] = ()
    functional: tuple[FunctionalSpan, ...] = ()


# ---------------------------------------------------------------------------
# Scanning helpers
# ---------------------------------------------------------------------------


def _skip_string(text: str, start: int) -> int:
    """Return the index just past the quoted string opening at *start*."""
    quote = text[start]
    i = start + 1
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == quote:
            return i + 1
        i += 1
    return len(text)


def _skip_bracket(text: str, start: int) -> int:
    """Return the index just past the attribute selector opening at *start*."""
    i = start + 1
    while i < len(text):
        c = text[i]
        if c in "\"'":
            i = _skip_string(text, i)
            continue
        if c == "]":
            return i + 1
        i += 1
    return len(text)


def _find_close(text: str, open_index: int) -> int:
    """Return the index of the parenthesis closing *open_index*, or -1."""
    depth = 0
    i = open_index
    while i < len(text):
        c = text[i]
        if c in "\"'":
            i = _skip_string(text, i)
            continue
        if c == "[":
            i = _skip_bracket(text, i)
            continue
        if c == "\\":
            i += 2
            continue
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return -1


def _next_chunk(text: str, i: int) -> int:
    """Return the end of the literal chunk starting at *i*."""
    c = text[i]
    if c in "\"'":
        return _skip_string(text, i)
    if c == "[":
        return _skip_bracket(text, i)
    if c == "\\":
        return min(i + 2, len(text))
    return i + 1


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def split_selector_list(text: str) -> list[str]:
    """Split a selector list on its top-level commas.

    Commas inside parentheses, attribute brackets and strings are kept.
    Empty members are dropped.
    """
    text = text or ""
    parts: list[str] = []
    depth = 0
    start = 0
    i = 0
    while i < len(text):
        c = text[i]
        if c in "\"'[\\":
            i = _next_chunk(text, i)
            continue
        if c == "(":
            depth += 1
        elif c == ")" and depth:
            depth -= 1
        elif c == "," and depth == 0:
            parts.append(text[start:i])
            start = i + 1
        i += 1
    parts.append(text[start:])
    return [p.strip() for p in parts if p.strip()]


def normalize(selector: str) -> NormalizedSelector:
    """Tokenize *selector* into its stripped and structural forms."""
    text = selector or ""
    stripped: list[str] = []
    structural: list[str] = []
    pseudo_elements: list[str] = []
    functional: list[FunctionalSpan] = []

    i = 0
    while i < len(text):
        if text[i] != ":":
            end = _next_chunk(text, i)
            stripped.append(text[i:end])
            structural.append(text[i:end])
            i = end
            continue

        double = text.startswith("::", i)
        match = _NAME_RE.match(text, i + 2 if double else i + 1)
        if match is None:
            # A colon with no name after it is literal text.
            stripped.append(":")
            structural.append(":")
            i += 1
            continue

        name = match.group(0).lower()
        end = match.end()
        has_args = text.startswith("(", end)
        close = _find_close(text, end) if has_args else -1

        if double or name in LEGACY_PSEUDO_ELEMENTS:
            pseudo_elements.append(name)
            i = close + 1 if close != -1 else end
            continue

        if name in FUNCTIONAL_PSEUDO_CLASSES and close != -1:
            functional.append(FunctionalSpan(name=name, argument=text[end + 1:close].strip()))
            stripped.append(text[i:close + 1])
            i = close + 1
            continue

        if close != -1:
            # :nth-child(2n+1) and friends: the argument is not selector text.
            stripped.append(text[i:close + 1])
            structural.append(text[i:end] + "()")
            i = close + 1
            continue

        stripped.append(text[i:end])
        structural.append(text[i:end])
        i = end

    return NormalizedSelector(
        raw=text,
        stripped="".join(stripped).strip(),
        structural="".join(structural).strip(),
        pseudo_elements=tuple(pseudo_elements),
        functional=tuple(functional),
    )


def strip_attributes(text: str) -> tuple[str, int]:
    """Remove attribute selectors from *text* and count them.

    Quoted values may contain ``]``; an escaped ``\\[`` opens nothing.
    """
    kept: list[str] = []
    count = 0
    i = 0
    while i < len(text):
        if text[i] == "[":
            count += 1
            i = _skip_bracket(text, i)
            continue
        end = _next_chunk(text, i) if text[i] == "\\" else i + 1
        kept.append(text[i:end])
        i = end
    return "".join(kept), count
