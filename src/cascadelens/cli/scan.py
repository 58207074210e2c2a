"""CLI command: cascadelens scan -- rank the rules matching an element."""

from __future__ import annotations

import json

import click

from cascadelens.analysis import Analysis
from cascadelens.cli._common import document_options, run_analysis
from cascadelens.config import ScanConfig


def _print_analysis(analysis: Analysis) -> None:
    click.echo(f"Element: {analysis.element}")
    click.echo(f"Rules:   {len(analysis.match_set)}")
    stats = analysis.match_set.stats()
    if stats is not None and stats.has_inline:
        click.echo("         has inline styles (highest priority)")
    if stats is not None and stats.has_ids:
        click.echo("         uses ID selectors")
    click.echo()

    if not len(analysis.match_set):
        click.echo("No matching CSS rules found")
    conflicting = analysis.conflicting_selectors
    for index, record in enumerate(analysis.match_set, start=1):
        marker = "!" if record.selector in conflicting else " "
        click.echo(
            f"{index:>3}.{marker} {record.selector}  {record.specificity}  "
            f"[{record.source_label}]"
        )
        for prop, value in record.declarations.items():
            click.echo(f"        {prop}: {value}")

    if analysis.conflicts:
        click.echo()
        click.echo(f"Conflicts: {len(analysis.conflicts)} properties with multiple rules")
        for conflict in analysis.conflicts:
            click.echo(f"  {conflict.css_property}:")
            for rank, contributor in enumerate(conflict.contributors):
                status = "wins" if rank == 0 else "overridden"
                click.echo(
                    f"    {contributor.record.selector}  {contributor.value}  ({status})"
                )

    if analysis.skipped_sheets:
        click.echo()
        click.echo(f"Skipped unreadable stylesheets: {', '.join(analysis.skipped_sheets)}")
    if analysis.skipped_rules:
        click.echo(f"Skipped rules with invalid selectors: {analysis.skipped_rules}")
    if analysis.truncated:
        click.echo("Result truncated; raise --max-matches to see more rules")


@click.command()
@document_options
@click.option("--max-matches", type=int, default=ScanConfig.max_matches, show_default=True,
              help="Stop scanning after this many matching rules.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
def scan(
    htmlfile: str,
    target: str,
    css_files: tuple[str, ...],
    max_matches: int,
    as_json: bool,
) -> None:
    """Scan HTMLFILE's stylesheets for rules matching the selected element.

    Rules are listed winner first, followed by the properties declared by more
    than one rule.
    """
    analysis = run_analysis(htmlfile, target, css_files, ScanConfig(max_matches=max_matches))
    if as_json:
        click.echo(json.dumps(analysis.to_dict(), indent=2))
        return
    _print_analysis(analysis)
