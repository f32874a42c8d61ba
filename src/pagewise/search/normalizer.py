# ABOUTME: Search normalizer facade: one request in, one well-formed response out.
# ABOUTME: Orchestrates collection and pagination and maps every failure to an error response.

import logging

from pagewise.search.client import UpstreamSearchClient
from pagewise.search.collector import collect_page
from pagewise.search.google_books import GoogleBooksClient
from pagewise.search.http import HttpClient, PagewiseHttpClient, UpstreamError
from pagewise.search.pagination import empty_pagination, paginate
from pagewise.search.types import SearchRequest, SearchResponse

logger = logging.getLogger(__name__)

MISSING_API_KEY_MESSAGE = "API key is not configured"


def empty_response(page_size: int) -> SearchResponse:
    """Zero-result response for blank queries."""
    return SearchResponse(items=[], pagination=empty_pagination(page_size))


def error_response(page_size: int, message: str) -> SearchResponse:
    """Zero-result response carrying a human-readable error and a 500 status."""
    return SearchResponse(
        items=[],
        pagination=empty_pagination(page_size),
        error=message,
        status_code=500,
    )


def normalize_search(request: SearchRequest, client: UpstreamSearchClient) -> SearchResponse:
    """Run one search request end to end.

    Never raises on upstream failures: timeouts, connection errors, non-200
    statuses, malformed payloads and anything unexpected all come back as an
    error response with the same shape as a successful one. A blank query
    returns the empty response without contacting the upstream.
    """
    if not request.query.strip():
        return empty_response(request.page_size)

    try:
        result = collect_page(request, client)
    except UpstreamError as exc:
        logger.warning("Search failed for %r via %s: %s", request.query, client.name, exc)
        return error_response(request.page_size, str(exc))
    except Exception as exc:
        logger.exception("Unexpected error searching for %r", request.query)
        return error_response(request.page_size, f"Unexpected error: {exc}")

    return SearchResponse(items=result.items, pagination=paginate(result, request))


def search_books(
    query: str,
    offset: int = 0,
    page_size: int = 10,
    *,
    api_key: str | None,
    http_client: HttpClient | None = None,
) -> SearchResponse:
    """Search Google Books with an explicitly supplied API key.

    Args:
        query: Raw user query.
        offset: Zero-based start index into the upstream result set.
        page_size: Number of items per normalized page.
        api_key: Google Books API key. A blank key yields an error response.
        http_client: Optional transport override; defaults to PagewiseHttpClient.
    """
    request = SearchRequest(query=query, offset=offset, page_size=page_size)
    if not query.strip():
        return empty_response(page_size)
    if not api_key or not api_key.strip():
        return error_response(page_size, MISSING_API_KEY_MESSAGE)

    if http_client is not None:
        return normalize_search(request, GoogleBooksClient(http_client, api_key))

    owned_client = PagewiseHttpClient()
    try:
        return normalize_search(request, GoogleBooksClient(owned_client, api_key))
    finally:
        owned_client.close()
