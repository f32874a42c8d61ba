# ABOUTME: Converts raw upstream items into display-ready FormattedItem records.
# ABOUTME: Applies placeholders, joins authors, strips HTML, and resolves covers.

import re

from pagewise.search.covers import extract_isbn, resolve_item_cover
from pagewise.search.types import FormattedItem, RawItem

UNKNOWN_TITLE = "Unknown title"
UNKNOWN_PUBLISHER = "Unknown publisher"

_HTML_TAG_RE = re.compile(r"<[^>]*>")


def strip_html(text: str) -> str:
    """Remove HTML tags and surrounding whitespace from a description."""
    return _HTML_TAG_RE.sub("", text).strip()


def format_item(item: RawItem) -> FormattedItem:
    return FormattedItem(
        title=item.title or UNKNOWN_TITLE,
        authors=", ".join(item.authors),
        publisher=item.publisher or UNKNOWN_PUBLISHER,
        cover_image=resolve_item_cover(item),
        description=strip_html(item.description or ""),
        isbn=extract_isbn(item.identifiers),
    )
