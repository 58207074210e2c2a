"""CLI command: cascadelens check -- lint the cascade of an element."""

from __future__ import annotations

import sys

import click

from cascadelens.cli._common import document_options, run_analysis
from cascadelens.config import ScanConfig
from cascadelens.events import EventBus, RuleSkipped, StylesheetSkipped
from cascadelens.model.diagnostic import Severity


@click.command()
@document_options
@click.option("--heavy-classes", type=int, default=ScanConfig.heavy_class_threshold,
              show_default=True, help="Class-level components above which a selector is heavy.")
@click.option("--strict", is_flag=True, help="Treat warnings as errors.")
def check(
    htmlfile: str,
    target: str,
    css_files: tuple[str, ...],
    heavy_classes: int,
    strict: bool,
) -> None:
    """Report inline styles, ID selectors, heavy selectors and conflicts.

    Exits with code 1 when any ERROR diagnostic is reported, or any WARNING
    with --strict. The built-in checks report warnings and info only, so
    without --strict this command exits 0.
    """
    bus = EventBus(record=True)
    config = ScanConfig(heavy_class_threshold=heavy_classes)
    analysis = run_analysis(htmlfile, target, css_files, config, event_bus=bus)

    for event in bus.events_of(StylesheetSkipped):
        click.echo(f"Skipped stylesheet {event.label}: {event.reason}", err=True)
    for event in bus.events_of(RuleSkipped):
        click.echo(f"Skipped rule {event.selector!r} in {event.source_label}", err=True)

    diagnostics = analysis.diagnostics
    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))
        if diag.fix:
            click.echo(f"  fix: {diag.fix}")

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors or (strict and warnings):
        sys.exit(1)
    sys.exit(0)
