# ABOUTME: UpstreamSearchClient protocol defining the contract for raw search sources.
# ABOUTME: Google Books and the fixture client both implement this.

from typing import Protocol, runtime_checkable

from pagewise.search.types import UpstreamPage


@runtime_checkable
class UpstreamSearchClient(Protocol):
    """Protocol for paginated upstream search APIs.

    Implementations return one raw page at a zero-based offset, or raise an
    UpstreamError subclass on transport, status, or parse failures.
    """

    @property
    def name(self) -> str: ...

    def fetch(self, query: str, offset: int, page_size: int) -> UpstreamPage: ...
