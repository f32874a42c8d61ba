# ABOUTME: Search package: normalizes an unreliable paginated upstream into stable pages.
# ABOUTME: Exports the request/response types and the normalizer entry points.

from pagewise.search.client import UpstreamSearchClient
from pagewise.search.normalizer import normalize_search, search_books
from pagewise.search.types import (
    FormattedItem,
    PaginationMetadata,
    SearchRequest,
    SearchResponse,
)

__all__ = [
    "FormattedItem",
    "PaginationMetadata",
    "SearchRequest",
    "SearchResponse",
    "UpstreamSearchClient",
    "normalize_search",
    "search_books",
]
