"""valmaker CLI entry point."""

import logging

import click


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool):
    """Regex combinator validators CLI."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


# Register subcommands
from valmaker.cli.check_cmd import check  # noqa: E402
from valmaker.cli.profile_cmd import profile  # noqa: E402

cli.add_command(check)
cli.add_command(profile)
