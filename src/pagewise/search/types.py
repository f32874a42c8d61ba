# ABOUTME: Core data structures for the search normalizer pipeline.
# ABOUTME: Requests, raw upstream pages, formatted items, and pagination metadata.

from dataclasses import dataclass, field
from typing import Any

# Upstream totals above this are treated as infeasible and capped.
MAX_UPSTREAM_RESULTS = 1000


@dataclass(frozen=True)
class SearchRequest:
    """A single search request against the upstream catalog.

    `offset` is a zero-based position into the upstream's unfiltered result set.
    """

    query: str
    offset: int = 0
    page_size: int = 10

    def __post_init__(self) -> None:
        if self.offset < 0:
            msg = f"offset must be non-negative, got {self.offset}"
            raise ValueError(msg)
        if self.page_size <= 0:
            msg = f"page_size must be positive, got {self.page_size}"
            raise ValueError(msg)


@dataclass
class RawItem:
    """A single volume as returned by the upstream, before any normalization."""

    title: str | None = None
    authors: list[str] = field(default_factory=list)
    publisher: str | None = None
    description: str | None = None
    categories: list[str] = field(default_factory=list)
    image_links: dict[str, str] = field(default_factory=dict)
    identifiers: dict[str, str] = field(default_factory=dict)


@dataclass
class UpstreamPage:
    """One raw page from the upstream plus its self-reported total.

    The reported total is a hint only; it may be wildly larger than the number
    of items the upstream will actually return.
    """

    items: list[RawItem]
    reported_total: int = 0


@dataclass
class ScoredItem:
    item: RawItem
    relevance_score: int


@dataclass
class FormattedItem:
    """Display-ready search hit."""

    title: str
    authors: str
    publisher: str
    cover_image: str
    description: str
    isbn: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "authors": self.authors,
            "publisher": self.publisher,
            "cover_image": self.cover_image,
            "description": self.description,
            "isbn": self.isbn,
        }


@dataclass
class CollectionResult:
    """Output of the page collector for one request.

    `exhausted` is True when collection stopped because the upstream ran out of
    matchable items, not because the page filled up.
    """

    items: list[FormattedItem]
    effective_total: int
    upstream_reported_total: int
    exhausted: bool = False
    fetch_count: int = 0


@dataclass
class PaginationMetadata:
    total_items: int
    start_index: int
    items_per_page: int
    current_page: int
    total_pages: int
    has_next: bool
    has_prev: bool
    is_last_page: bool
    api_total_items: int
    end_of_results: bool = False

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "total_items": self.total_items,
            "start_index": self.start_index,
            "items_per_page": self.items_per_page,
            "current_page": self.current_page,
            "total_pages": self.total_pages,
            "has_next": self.has_next,
            "has_prev": self.has_prev,
            "api_total_items": self.api_total_items,
            "is_last_page": self.is_last_page,
        }
        # Only present when the caller walked past the last page.
        if self.end_of_results:
            data["end_of_results"] = True
        return data


@dataclass
class SearchResponse:
    """The normalizer's response for one request.

    `error` is set only on failure paths, in which case `status_code` is 500.
    """

    items: list[FormattedItem]
    pagination: PaginationMetadata
    error: str | None = None
    status_code: int = 200

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "items": [item.to_dict() for item in self.items],
            "pagination": self.pagination.to_dict(),
        }
        if self.error is not None:
            data["error"] = self.error
        return data
