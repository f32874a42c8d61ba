# ABOUTME: CLI package for pagewise, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import click

from pagewise.cli.commands import search_cmd


@click.group()
@click.version_option(package_name="pagewise")
def cli() -> None:
    """pagewise - stable, fixed-size pages over the Google Books search API."""


cli.add_command(search_cmd.search)
