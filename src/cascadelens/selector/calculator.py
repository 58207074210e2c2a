"""Specificity calculator: selector string -> (ids, classes, types).

Counting rules:
    ids      ``#name``
    classes  ``.name``, ``[attr]`` and pseudo-classes other than ``:where``
    types    element names at the start or after whitespace or a combinator,
             plus one per pseudo-element

``:where()`` is worth nothing. ``:not()``, ``:is()`` and ``:has()`` are worth the
specificity of their argument, evaluated as a standalone selector list (its
most specific member). A selector list is worth its most specific member.

Identifiers may contain CSS escapes, so an escaped colon or dot is part of the
name it sits in. Attribute values are opaque, brackets inside quotes included.
"""

from __future__ import annotations

import re

from cascadelens.model.specificity import INLINE, ZERO, Specificity
from cascadelens.selector.tokenizer import normalize, split_selector_list, strip_attributes

__all__ = ["specificity_of", "inline_specificity"]

_ESCAPE = r"\\(?:[0-9a-fA-F]{1,6}\s?|.)"
_IDENT = rf"-?(?:[^\W\d]|{_ESCAPE})(?:[\w-]|{_ESCAPE})*"

_ID_RE = re.compile(r"(?<!\\)#" + _IDENT)
_CLASS_RE = re.compile(r"(?<!\\)\." + _IDENT)
_PSEUDO_CLASS_RE = re.compile(rf"(?<!\\):(?!:)({_IDENT})(?:\([^)]*\))?")
_TYPE_RE = re.compile(r"(?:^|(?<=[\s>+~,]))" + _IDENT)


def _count_simple(structural: str) -> Specificity:
    """Count ids, classes and types in text free of nested selectors."""
    remainder, classes = strip_attributes(structural)

    ids = len(_ID_RE.findall(remainder))
    remainder = _ID_RE.sub("", remainder)

    classes += len(_CLASS_RE.findall(remainder))
    remainder = _CLASS_RE.sub("", remainder)

    for match in _PSEUDO_CLASS_RE.finditer(remainder):
        if match.group(1).lower() != "where":
            classes += 1
    remainder = _PSEUDO_CLASS_RE.sub("", remainder)

    types = len(_TYPE_RE.findall(remainder))
    return Specificity(ids=ids, classes=classes, types=types)


def _complex_specificity(selector: str) -> Specificity:
    normalized = normalize(selector)
    total = _count_simple(normalized.structural)
    total = total + Specificity(types=len(normalized.pseudo_elements))
    for span in normalized.functional:
        if span.name == "where":
            continue
        total = total + specificity_of(span.argument)
    return total


def specificity_of(selector: str) -> Specificity:
    """Return the specificity of *selector*.

    Never raises: empty or unparsable text yields ``(0,0,0)`` and malformed
    fragments are counted at face value.
    """
    alternatives = split_selector_list(selector or "")
    if not alternatives:
        return ZERO
    return max(_complex_specificity(alt) for alt in alternatives)


def inline_specificity() -> Specificity:
    """Specificity of an element's ``style`` attribute."""
    return INLINE
