# ABOUTME: Unit tests for the page collector.
# ABOUTME: Covers over-fetching, raw-count cursor advancement, attempt bounds, and total lookups.

import pytest

from pagewise.search.collector import MAX_ATTEMPTS, collect_page
from pagewise.search.http import UpstreamTimeout
from pagewise.search.types import RawItem, SearchRequest, UpstreamPage
from tests.fixtures.fake_upstream import RecordingUpstream, make_items, make_page


def _mixed_page(relevant: int, irrelevant: int, total: int) -> UpstreamPage:
    """A page whose relevant items come first, followed by unrelated ones."""
    items = make_items(relevant) + make_items(irrelevant, title="Gardening Guide")
    return UpstreamPage(items=items, reported_total=total)


class TestCollectPage:
    """Tests for collect_page."""

    def test_full_first_page_stops_after_one_fetch_plus_total_lookup(self) -> None:
        """A full first fetch needs only one extra call for the total."""
        upstream = RecordingUpstream([make_page(20, total=500)], lookup_total=480)
        result = collect_page(SearchRequest(query="ruby", offset=0, page_size=10), upstream)

        assert len(result.items) == 10
        assert not result.exhausted
        assert upstream.calls == [("ruby", 0, 20), ("ruby", 0, 1)]
        assert result.fetch_count == 2

    def test_over_fetches_twice_the_page_size(self) -> None:
        """Each fetch asks for twice the requested page size."""
        upstream = RecordingUpstream([make_page(14, total=100)], lookup_total=100)
        collect_page(SearchRequest(query="ruby", offset=30, page_size=7), upstream)
        assert upstream.calls[0] == ("ruby", 30, 14)

    def test_uses_shaped_query_upstream(self) -> None:
        """Every upstream call receives the shaped query."""
        upstream = RecordingUpstream([make_page(20, total=50, title="Ruby Rails")], lookup_total=50)
        collect_page(SearchRequest(query="ruby rails", page_size=10), upstream)
        assert all(call[0] == '"ruby rails"' for call in upstream.calls)

    def test_cursor_advances_by_raw_count(self) -> None:
        """Filtered-out items still advance the cursor."""
        upstream = RecordingUpstream(
            [
                _mixed_page(relevant=3, irrelevant=17, total=200),
                _mixed_page(relevant=3, irrelevant=17, total=200),
                _mixed_page(relevant=10, irrelevant=10, total=200),
            ],
            lookup_total=200,
        )
        result = collect_page(SearchRequest(query="ruby", offset=40, page_size=10), upstream)

        assert len(result.items) == 10
        offsets = [call[1] for call in upstream.calls[:3]]
        assert offsets == [40, 60, 80]

    def test_takes_only_what_is_needed(self) -> None:
        """Later fetches contribute only the items still missing."""
        upstream = RecordingUpstream(
            [make_page(8, total=100), make_page(20, total=100)], lookup_total=100
        )
        result = collect_page(SearchRequest(query="ruby", page_size=10), upstream)
        assert len(result.items) == 10
        # First page contributes all 8, second only the first 2.
        assert [item.title for item in result.items[8:]] == ["Ruby Book 0", "Ruby Book 1"]

    def test_empty_filtered_page_marks_exhausted(self) -> None:
        """An empty page after partial collection marks the result exhausted."""
        upstream = RecordingUpstream(
            [make_page(5, total=25), UpstreamPage(items=[], reported_total=25)],
            lookup_total=25,
        )
        result = collect_page(SearchRequest(query="ruby", page_size=10), upstream)
        assert len(result.items) == 5
        assert result.exhausted

    def test_everything_filtered_out(self) -> None:
        """Zero relevance across the board yields an empty, exhausted result."""
        upstream = RecordingUpstream(
            [make_page(20, total=800, title="Gardening Guide")], fallback_total=800
        )
        result = collect_page(SearchRequest(query="ruby", offset=20, page_size=10), upstream)

        assert result.items == []
        assert result.exhausted
        # Fallback direct fetch at the original offset and page size.
        assert upstream.calls[-1] == ("ruby", 20, 10)
        assert result.upstream_reported_total == 800

    def test_no_results_at_all(self) -> None:
        """An empty upstream gives an empty, exhausted result."""
        upstream = RecordingUpstream(
            [UpstreamPage(items=[], reported_total=0)], fallback_total=0
        )
        result = collect_page(SearchRequest(query="zzzzznoresults", page_size=10), upstream)
        assert result.items == []
        assert result.exhausted
        assert result.effective_total == 0

    def test_attempts_are_bounded(self) -> None:
        """A sparse-but-nonempty upstream never loops more than MAX_ATTEMPTS times."""
        sparse = [_mixed_page(relevant=1, irrelevant=19, total=1000) for _ in range(20)]
        upstream = RecordingUpstream(sparse, lookup_total=1000)
        result = collect_page(SearchRequest(query="ruby", page_size=10), upstream)

        assert len(result.items) == MAX_ATTEMPTS
        assert not result.exhausted
        assert len(upstream.calls) == MAX_ATTEMPTS + 1
        assert result.fetch_count == MAX_ATTEMPTS + 1

    @pytest.mark.parametrize("relevant_per_page", [0, 1, 2, 5, 10])
    def test_never_exceeds_fetch_budget(self, relevant_per_page: int) -> None:
        """Upstream calls stay within MAX_ATTEMPTS + 1 for any density."""
        pages = [_mixed_page(relevant_per_page, 20 - relevant_per_page, 999) for _ in range(10)]
        upstream = RecordingUpstream(pages, lookup_total=999, fallback_total=999)
        collect_page(SearchRequest(query="ruby", page_size=10), upstream)
        assert len(upstream.calls) <= MAX_ATTEMPTS + 1

    def test_lookup_total_is_used_and_capped(self) -> None:
        """The offset-0 total is reported raw and capped at 1000."""
        upstream = RecordingUpstream([make_page(20, total=12)], lookup_total=250_000)
        result = collect_page(SearchRequest(query="ruby", page_size=10), upstream)
        assert result.upstream_reported_total == 250_000
        assert result.effective_total == 1000

    def test_items_are_formatted(self) -> None:
        """Collected items are converted to FormattedItem records."""
        page = UpstreamPage(
            items=[RawItem(title="Ruby", authors=["A", "B"], description="<i>x</i>")],
            reported_total=1,
        )
        upstream = RecordingUpstream([page], lookup_total=1)
        result = collect_page(SearchRequest(query="ruby", page_size=1), upstream)
        assert result.items[0].authors == "A, B"
        assert result.items[0].description == "x"

    def test_upstream_errors_propagate(self) -> None:
        """Upstream errors are not swallowed by the collector."""
        upstream = RecordingUpstream([UpstreamTimeout("read")])
        with pytest.raises(UpstreamTimeout):
            collect_page(SearchRequest(query="ruby", page_size=10), upstream)
