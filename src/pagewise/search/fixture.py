# ABOUTME: In-memory upstream search client serving canned volumes.
# ABOUTME: Backs offline runs of the CLI and tests; loads Google Books JSON from disk.

import json
from pathlib import Path

from pagewise.search.google_books_parser import parse_volumes_response
from pagewise.search.http import MalformedPayloadError
from pagewise.search.types import RawItem, UpstreamPage


class FixtureSearchClient:
    """Upstream client that pages over a fixed list of items.

    The query is ignored; the relevance filter downstream does the matching.
    The reported total is always the full fixture size.
    """

    def __init__(self, items: list[RawItem]) -> None:
        self._items = list(items)
        self.calls: list[tuple[str, int, int]] = []

    @property
    def name(self) -> str:
        return "fixture"

    def fetch(self, query: str, offset: int, page_size: int) -> UpstreamPage:
        self.calls.append((query, offset, page_size))
        return UpstreamPage(
            items=self._items[offset : offset + page_size],
            reported_total=len(self._items),
        )


def load_fixture(path: Path) -> FixtureSearchClient:
    """Build a FixtureSearchClient from a Google Books volumes JSON file.

    Raises:
        MalformedPayloadError: If the file is not UTF-8 JSON shaped like a
            volumes response.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedPayloadError(f"{path}: {exc}") from exc
    if not isinstance(data, dict):
        raise MalformedPayloadError(f"{path}: expected a JSON object")
    try:
        page = parse_volumes_response(data)
    except (AttributeError, TypeError, ValueError) as exc:
        raise MalformedPayloadError(f"{path}: {exc}") from exc
    return FixtureSearchClient(page.items)
