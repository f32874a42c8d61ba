# ABOUTME: Fake upstream search client for collector and normalizer tests.
# ABOUTME: Serves scripted pages in order and records every fetch call.

from pagewise.search.types import RawItem, UpstreamPage


class RecordingUpstream:
    """Fake upstream client that serves scripted pages and records every call.

    `pages` is consumed in order by collection fetches; once it runs out, empty
    pages reporting `fallback_total` are returned. Offset-0, size-1 total lookups get
    `lookup_total`. A scripted Exception is raised instead of returned.
    """

    def __init__(
        self,
        pages: list[UpstreamPage | Exception] | None = None,
        lookup_total: int = 0,
        fallback_total: int = 0,
    ) -> None:
        self._pages = list(pages or [])
        self._lookup_total = lookup_total
        self._fallback_total = fallback_total
        self.calls: list[tuple[str, int, int]] = []

    @property
    def name(self) -> str:
        return "recording"

    def fetch(self, query: str, offset: int, page_size: int) -> UpstreamPage:
        self.calls.append((query, offset, page_size))
        if offset == 0 and page_size == 1:
            return UpstreamPage(items=[], reported_total=self._lookup_total)
        if not self._pages:
            return UpstreamPage(items=[], reported_total=self._fallback_total)
        page = self._pages.pop(0)
        if isinstance(page, Exception):
            raise page
        return page


def make_items(count: int, title: str = "Ruby Book") -> list[RawItem]:
    """Build `count` distinct items whose titles all contain `title`."""
    return [RawItem(title=f"{title} {i}", authors=["Some Author"]) for i in range(count)]


def make_page(count: int, total: int, title: str = "Ruby Book") -> UpstreamPage:
    return UpstreamPage(items=make_items(count, title), reported_total=total)
