"""Shared options and document loading for the scan commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import click

from cascadelens.analysis import Analysis, analyze
from cascadelens.config import ScanConfig
from cascadelens.document import HtmlDocument
from cascadelens.errors import DocumentError
from cascadelens.events import EventBus


def document_options(func: Callable) -> Callable:
    """Attach the HTMLFILE argument and the element/stylesheet options."""
    func = click.option(
        "--css",
        "css_files",
        multiple=True,
        type=click.Path(exists=True, dir_okay=False),
        help="Extra stylesheet appended after the document's own (repeatable).",
    )(func)
    func = click.option(
        "--select",
        "-s",
        "target",
        required=True,
        help="CSS selector of the element to inspect (first match is used).",
    )(func)
    func = click.argument("htmlfile", type=click.Path(exists=True, dir_okay=False))(func)
    return func


def run_analysis(
    htmlfile: str,
    target: str,
    css_files: tuple[str, ...],
    config: ScanConfig,
    event_bus: EventBus | None = None,
) -> Analysis:
    """Load the document, pick the element and analyze it; exit 1 on load errors."""
    try:
        document = HtmlDocument.from_file(htmlfile)
        for css_file in css_files:
            path = Path(css_file)
            document.add_stylesheet(path.read_text(encoding="utf-8"), label=path.name)
        element = document.query(target)
    except (DocumentError, OSError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    return analyze(element, document.stylesheets, config, event_bus=event_bus)
