# ABOUTME: Parsing functions for Google Books API JSON responses.
# ABOUTME: Converts volumes payloads into RawItem and UpstreamPage instances.

from typing import Any

from pagewise.search.types import RawItem, UpstreamPage


def _string_list(value: Any) -> list[str]:
    """Normalize a list-or-scalar field; a bare string becomes a one-item list."""
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [str(entry) for entry in value]


def parse_volume(data: dict[str, Any]) -> RawItem:
    """Parse a single Google Books volume resource into a RawItem.

    Everything interesting lives under `volumeInfo`. Industry identifiers come
    as a list of {"type": ..., "identifier": ...} dicts and are flattened into
    a scheme -> code mapping (first occurrence wins).
    """
    info = data.get("volumeInfo") or {}

    identifiers: dict[str, str] = {}
    for entry in info.get("industryIdentifiers") or []:
        scheme = entry.get("type")
        code = entry.get("identifier")
        if scheme and code and scheme not in identifiers:
            identifiers[scheme] = code

    image_links = {
        size: url for size, url in (info.get("imageLinks") or {}).items() if isinstance(url, str)
    }

    return RawItem(
        title=info.get("title"),
        authors=_string_list(info.get("authors")),
        publisher=info.get("publisher"),
        description=info.get("description"),
        categories=_string_list(info.get("categories")),
        image_links=image_links,
        identifiers=identifiers,
    )


def parse_volumes_response(data: dict[str, Any]) -> UpstreamPage:
    """Parse a Google Books `volumes` search response into an UpstreamPage.

    Both `items` and `totalItems` are optional in the API; a missing items
    array means an empty page and a missing total means zero.
    """
    items = [parse_volume(volume) for volume in data.get("items") or []]
    total = data.get("totalItems") or 0
    return UpstreamPage(items=items, reported_total=max(int(total), 0))


def parse_error_message(data: Any) -> str | None:
    """Extract `error.message` from a Google API error body, if present."""
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    return None
