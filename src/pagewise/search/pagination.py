# ABOUTME: Pagination metadata calculation for normalized search results.
# ABOUTME: Derives page numbers and next/prev flags from collected items and the capped total.

import math

from pagewise.search.types import CollectionResult, PaginationMetadata, SearchRequest


def current_page_for(offset: int, page_size: int) -> int:
    """One-based page number containing `offset`."""
    return offset // page_size + 1


def paginate(result: CollectionResult, request: SearchRequest) -> PaginationMetadata:
    """Compute pagination metadata for one collected page.

    Three cases:
    - Nothing found on the first page: a genuinely empty result set.
    - Nothing found past the first page: the caller walked off the end, so the
      offset itself is the best known total and `end_of_results` is flagged.
    - Items found: totals come from the capped upstream total.
    """
    offset = request.offset
    page_size = request.page_size
    current_page = current_page_for(offset, page_size)

    if not result.items:
        if current_page == 1:
            return PaginationMetadata(
                total_items=0,
                start_index=offset,
                items_per_page=page_size,
                current_page=current_page,
                total_pages=0,
                has_next=False,
                has_prev=False,
                is_last_page=True,
                api_total_items=result.upstream_reported_total,
            )
        return PaginationMetadata(
            total_items=offset,
            start_index=offset,
            items_per_page=page_size,
            current_page=current_page,
            total_pages=current_page - 1,
            has_next=False,
            has_prev=True,
            is_last_page=True,
            api_total_items=result.upstream_reported_total,
            end_of_results=True,
        )

    total = result.effective_total
    total_pages = max(math.ceil(total / page_size), 1)
    has_next = len(result.items) == page_size and offset + page_size < total
    return PaginationMetadata(
        total_items=total,
        start_index=offset,
        items_per_page=page_size,
        current_page=current_page,
        total_pages=total_pages,
        has_next=has_next,
        has_prev=offset > 0,
        is_last_page=not has_next,
        api_total_items=result.upstream_reported_total,
    )


def empty_pagination(page_size: int) -> PaginationMetadata:
    """Zero-result metadata used for blank queries and failures."""
    return PaginationMetadata(
        total_items=0,
        start_index=0,
        items_per_page=page_size,
        current_page=1,
        total_pages=0,
        has_next=False,
        has_prev=False,
        is_last_page=True,
        api_total_items=0,
    )
