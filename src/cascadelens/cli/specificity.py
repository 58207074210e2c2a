"""CLI command: cascadelens specificity -- score selectors typed by hand."""

from __future__ import annotations

import click

from cascadelens.selector import specificity_of


@click.command()
@click.argument("selectors", nargs=-1, required=True)
def specificity(selectors: tuple[str, ...]) -> None:
    """Print the specificity of each SELECTOR as (ids,classes,types)."""
    width = max(len(s) for s in selectors)
    for selector in selectors:
        value = specificity_of(selector)
        click.echo(f"{selector.ljust(width)}  {value}  [{value.level()}]")
