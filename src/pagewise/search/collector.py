# ABOUTME: Page collector that assembles a full page of relevant items from a sparse upstream.
# ABOUTME: Over-fetches, filters, and keeps fetching until the page fills or attempts run out.

import logging

from pagewise.search.client import UpstreamSearchClient
from pagewise.search.formatting import format_item
from pagewise.search.query import shape_query
from pagewise.search.relevance import filter_page
from pagewise.search.types import (
    MAX_UPSTREAM_RESULTS,
    CollectionResult,
    FormattedItem,
    SearchRequest,
)

logger = logging.getLogger(__name__)

# Upper bound on collection fetches per request (the offset-0 total lookup is extra).
MAX_ATTEMPTS = 5

# Each fetch asks for this multiple of the page size to absorb filtering losses.
OVERFETCH_FACTOR = 2


def collect_page(request: SearchRequest, client: UpstreamSearchClient) -> CollectionResult:
    """Collect up to one page of relevance-filtered items for a request.

    Returns a result that is either full (`len(items) == page_size`) or marked
    `exhausted`, unless the attempt budget ran out first. Makes at most
    MAX_ATTEMPTS + 1 upstream calls; fetches are strictly sequential because
    each cursor position depends on the previous raw page size.

    The cursor advances by the number of RAW items returned, not the number
    that survived filtering, so it stays aligned with upstream page boundaries.

    Upstream errors propagate to the caller.
    """
    shaped = shape_query(request.query)
    collected: list[FormattedItem] = []
    cursor = request.offset
    attempts = 0
    fetches = 0
    exhausted = False

    while len(collected) < request.page_size and attempts < MAX_ATTEMPTS:
        raw_page = client.fetch(shaped, cursor, request.page_size * OVERFETCH_FACTOR)
        fetches += 1
        filtered = filter_page(raw_page, request.query)
        logger.debug(
            "Attempt %d at cursor %d: %d raw, %d relevant",
            attempts + 1,
            cursor,
            len(raw_page.items),
            len(filtered.items),
        )

        if not filtered.items:
            exhausted = True
            break

        needed = request.page_size - len(collected)
        collected.extend(format_item(item) for item in filtered.items[:needed])
        cursor += len(raw_page.items)
        attempts += 1

    if collected:
        # Totals from offset 0 are more stable than those reported deep in the result set.
        reported_total = client.fetch(shaped, 0, 1).reported_total
    else:
        reported_total = client.fetch(shaped, request.offset, request.page_size).reported_total
    fetches += 1

    if len(collected) < request.page_size and not exhausted:
        logger.info(
            "Gave up after %d attempts with %d/%d items for %r",
            attempts,
            len(collected),
            request.page_size,
            request.query,
        )

    return CollectionResult(
        items=collected,
        effective_total=min(reported_total, MAX_UPSTREAM_RESULTS),
        upstream_reported_total=reported_total,
        exhausted=exhausted,
        fetch_count=fetches,
    )
