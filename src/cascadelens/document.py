"""HTML host document: elements and stylesheets for the scanner.

The document is parsed with lxml and wrapped with cssselect2, whose compiled
selectors act as the host's ``Element.matches`` primitive. Stylesheets are read
once, when the document is built, in document order: ``<style>`` blocks and
``<link rel="stylesheet">`` files resolved against the document's directory.
Remote stylesheets are never fetched; like a cross-origin sheet in a browser
they are present in the list but unreadable.
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path, PurePosixPath
from typing import Sequence
from urllib.parse import unquote, urlsplit

import cssselect2
import lxml.html
from lxml import etree

from cascadelens.errors import DocumentError, SelectorError
from cascadelens.model.rules import Declaration
from cascadelens.stylesheet import (
    ParsedStyleSheet,
    StyleSheet,
    UnreadableStyleSheet,
    parse_declarations,
)

__all__ = ["DocumentElement", "HtmlDocument"]

log = logging.getLogger(__name__)


@functools.lru_cache(maxsize=1024)
def _compile(selector: str) -> tuple[cssselect2.compiler.CompiledSelector, ...]:
    try:
        return tuple(cssselect2.compile_selector_list(selector))
    except cssselect2.SelectorError as exc:
        raise SelectorError(selector, str(exc)) from exc


class DocumentElement:
    """An element of an :class:`HtmlDocument`, usable as a scan target."""

    def __init__(self, wrapper: cssselect2.ElementWrapper) -> None:
        self._wrapper = wrapper

    @property
    def tag(self) -> str:
        return self._wrapper.local_name

    @property
    def label(self) -> str:
        parts = [self._wrapper.local_name]
        if self._wrapper.id:
            parts.append(f"#{self._wrapper.id}")
        parts.extend(f".{cls}" for cls in sorted(self._wrapper.classes))
        return "".join(parts)

    def matches(self, selector: str) -> bool:
        """Test *selector* against this element.

        Selectors ending in a pseudo-element target a sub-part of the element
        and never match the element itself.
        """
        return any(
            compiled.pseudo_element is None and compiled.test(self._wrapper)
            for compiled in _compile(selector)
        )

    def inline_style(self) -> Sequence[Declaration]:
        return parse_declarations(self._wrapper.etree_element.get("style") or "")

    def __repr__(self) -> str:
        return f"<DocumentElement {self.label}>"


def _sheet_label(href: str) -> str:
    path = PurePosixPath(unquote(urlsplit(href).path))
    return path.name or "stylesheet"


def _load_linked(href: str, base_dir: Path | None) -> StyleSheet:
    label = _sheet_label(href)
    parts = urlsplit(href)
    if parts.scheme in ("http", "https") or parts.netloc:
        return UnreadableStyleSheet(label=label, reason=f"cross-origin stylesheet {href}")
    if parts.scheme == "file":
        path = Path(unquote(parts.path))
    elif base_dir is None:
        return UnreadableStyleSheet(label=label, reason="relative stylesheet without a base directory")
    else:
        path = base_dir / unquote(parts.path)
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as exc:
        log.info("Cannot read stylesheet %s: %s", path, exc)
        return UnreadableStyleSheet(label=label, reason=f"cannot read {path}: {exc.strerror or exc}")
    return ParsedStyleSheet.from_css(source, label=label)


def _collect_stylesheets(root: etree._Element, base_dir: Path | None) -> list[StyleSheet]:
    sheets: list[StyleSheet] = []
    style_count = 0
    for el in root.iter():
        if not isinstance(el.tag, str):
            continue
        tag = el.tag.lower()
        if tag == "style":
            style_count += 1
            sheets.append(ParsedStyleSheet.from_css(el.text or "", label=f"<style #{style_count}>"))
        elif tag == "link":
            rel = (el.get("rel") or "").lower().split()
            href = (el.get("href") or "").strip()
            if "stylesheet" in rel and href:
                sheets.append(_load_linked(href, base_dir))
    return sheets


class HtmlDocument:
    """A parsed HTML page and its stylesheets, in document order."""

    def __init__(self, root: etree._Element, stylesheets: Sequence[StyleSheet] = ()) -> None:
        self._root = cssselect2.ElementWrapper.from_html_root(root)
        self.stylesheets: list[StyleSheet] = list(stylesheets)

    @classmethod
    def from_html(cls, source: str, base_dir: Path | None = None) -> HtmlDocument:
        try:
            root = lxml.html.document_fromstring(source)
        except (etree.ParserError, ValueError) as exc:
            raise DocumentError(f"Cannot parse HTML: {exc}") from exc
        return cls(root, _collect_stylesheets(root, base_dir))

    @classmethod
    def from_file(cls, path: str | Path) -> HtmlDocument:
        path = Path(path)
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DocumentError(f"Cannot read {path}: {exc}") from exc
        return cls.from_html(source, base_dir=path.parent)

    def add_stylesheet(self, source: str, label: str) -> None:
        """Append an author stylesheet after the document's own sheets."""
        self.stylesheets.append(ParsedStyleSheet.from_css(source, label=label))

    def query_all(self, selector: str) -> list[DocumentElement]:
        """Return every element matching *selector*, in document order."""
        try:
            compiled = _compile(selector)
        except SelectorError as exc:
            raise DocumentError(str(exc)) from exc
        return [
            DocumentElement(wrapper)
            for wrapper in self._root.iter_subtree()
            if any(c.pseudo_element is None and c.test(wrapper) for c in compiled)
        ]

    def query(self, selector: str) -> DocumentElement:
        """Return the first element matching *selector*."""
        found = self.query_all(selector)
        if not found:
            raise DocumentError(f"No element matches {selector!r}")
        return found[0]
