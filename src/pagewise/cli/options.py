# ABOUTME: Shared Click options and logging setup for pagewise CLI commands.
# ABOUTME: Provides reusable decorators for the API key and verbosity flags.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

API_KEY_ENVVAR = "GOOGLE_BOOKS_API_KEY"

api_key_option = click.option(
    "--api-key",
    envvar=API_KEY_ENVVAR,
    default=None,
    help=f"Google Books API key (default: ${API_KEY_ENVVAR}).",
)

verbose_option = click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Log upstream calls and collection attempts.",
)


def configure_logging(verbose: bool) -> None:
    """Route pagewise log records through Rich on stderr.

    Only the `pagewise` logger is touched; httpx and the root logger are left alone.
    """
    logger = logging.getLogger("pagewise")
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
