# ABOUTME: Cover image URL resolution for search hits.
# ABOUTME: Picks the best upstream image variant, falling back to Open Library covers by ISBN.

from pagewise.search.types import RawItem

_COVERS_BASE_URL = "https://covers.openlibrary.org/b/isbn"

# Largest first.
_IMAGE_PRIORITY = (
    "extraLarge",
    "large",
    "medium",
    "small",
    "thumbnail",
    "smallThumbnail",
)

_GOOGLE_IMAGE_HOST = "books.google"


def extract_isbn(identifiers: dict[str, str]) -> str | None:
    """Return the ISBN-13 if present, else the ISBN-10, else None."""
    return identifiers.get("ISBN_13") or identifiers.get("ISBN_10") or None


def build_cover_url(isbn: str, size: str = "M") -> str:
    """Build an Open Library cover image URL for a given ISBN.

    Args:
        isbn: The ISBN to look up cover art for.
        size: Image size: "S" (small), "M" (medium), or "L" (large).
    """
    return f"{_COVERS_BASE_URL}/{isbn}-{size}.jpg"


def _append_param(url: str, name: str, value: str) -> str:
    if f"{name}=" in url:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{name}={value}"


def _upgrade_image_url(url: str) -> str:
    if url.startswith("http:"):
        url = "https:" + url[len("http:") :]
    if _GOOGLE_IMAGE_HOST in url:
        url = _append_param(url, "zoom", "1")
        url = _append_param(url, "edge", "curl")
    return url


def resolve_cover(image_links: dict[str, str], identifiers: dict[str, str]) -> str:
    """Pick the best available cover URL for an item.

    Returns an empty string when neither an image variant nor an ISBN is
    available; the caller is expected to render a placeholder.
    """
    for size in _IMAGE_PRIORITY:
        url = (image_links.get(size) or "").strip()
        if url:
            return _upgrade_image_url(url)

    isbn = extract_isbn(identifiers)
    if isbn:
        return build_cover_url(isbn)
    return ""


def resolve_item_cover(item: RawItem) -> str:
    """Convenience wrapper around resolve_cover for a RawItem."""
    return resolve_cover(item.image_links, item.identifiers)
