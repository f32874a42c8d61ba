# ABOUTME: The `pagewise search` command for normalized Google Books searches.
# ABOUTME: Prints one fixed-size page as a Rich table or as the JSON output contract.

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from pagewise.cli.options import api_key_option, configure_logging, verbose_option
from pagewise.search.fixture import load_fixture
from pagewise.search.google_books import MAX_RESULTS_PER_CALL
from pagewise.search.http import UpstreamError
from pagewise.search.normalizer import normalize_search, search_books
from pagewise.search.types import SearchRequest, SearchResponse


def _render_table(console: Console, response: SearchResponse) -> None:
    page = response.pagination
    if not response.items:
        if page.end_of_results:
            console.print("[yellow]No more results past the last page.[/yellow]")
        else:
            console.print("[yellow]No results found.[/yellow]")
        return

    table = Table()
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Publisher")
    table.add_column("ISBN", width=14)

    for index, item in enumerate(response.items, start=page.start_index + 1):
        table.add_row(
            str(index),
            item.title,
            item.authors or "[dim]unknown[/dim]",
            item.publisher,
            item.isbn or "",
        )

    console.print(table)
    console.print(
        f"\n[dim]Page {page.current_page} of {page.total_pages} "
        f"({page.total_items} result(s), upstream reported {page.api_total_items})[/dim]"
    )
    if page.has_next:
        console.print(f"[dim]Next page: --offset {page.start_index + page.items_per_page}[/dim]")


@click.command("search")
@click.argument("query")
@click.option(
    "-o",
    "--offset",
    type=click.IntRange(min=0),
    default=0,
    help="Zero-based start index into the upstream results.",
)
@click.option(
    "-n",
    "--page-size",
    type=click.IntRange(1, MAX_RESULTS_PER_CALL),
    default=10,
    help="Items per page (1-40, default 10).",
)
@api_key_option
@click.option(
    "--fixture",
    "fixture_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Serve results from a Google Books JSON file instead of the live API.",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print raw JSON.")
@verbose_option
def search(
    query: str,
    offset: int,
    page_size: int,
    api_key: str | None,
    fixture_path: Path | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Search Google Books and print one normalized page of results."""
    configure_logging(verbose)
    console = Console()

    if fixture_path is not None:
        try:
            client = load_fixture(fixture_path)
        except UpstreamError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise SystemExit(1) from exc
        request = SearchRequest(query=query, offset=offset, page_size=page_size)
        response = normalize_search(request, client)
    else:
        response = search_books(query, offset, page_size, api_key=api_key)

    if as_json:
        click.echo(json.dumps(response.to_dict(), ensure_ascii=False, indent=2))
    elif response.error:
        console.print(f"[red]Error:[/red] {response.error}")
    else:
        _render_table(console, response)

    if not response.ok:
        raise SystemExit(1)
