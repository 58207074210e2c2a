"""cascadelens CLI entry point: Click group with subcommands."""

import logging

import click

from cascadelens import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cascadelens")
@click.option("-v", "--verbose", is_flag=True, help="Log skipped sheets and rules.")
def cli(verbose: bool) -> None:
    """cascadelens - CSS specificity and cascade conflict inspector."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from cascadelens.cli.specificity import specificity  # noqa: E402
from cascadelens.cli.scan import scan  # noqa: E402
from cascadelens.cli.check import check  # noqa: E402

cli.add_command(specificity)
cli.add_command(scan)
cli.add_command(check)
