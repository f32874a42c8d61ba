# ABOUTME: Keyword-overlap relevance scoring for upstream search hits.
# ABOUTME: Discards items that share no terms with the user's original query.

from pagewise.search.types import RawItem, ScoredItem, UpstreamPage

# Points for a verbatim word hit, and for a hit on the word minus its last character.
_EXACT_WORD_POINTS = 3
_STEM_WORD_POINTS = 1

# Words this short are not stemmed.
_MIN_STEM_LENGTH = 4


def query_words(query: str) -> list[str]:
    """Split a raw query into lower-cased words, dropping phrase quotes."""
    words = (word.strip('"') for word in query.lower().split())
    return [word for word in words if word]


def searchable_text(item: RawItem) -> str:
    """Lower-cased concatenation of the fields a query is matched against."""
    parts = [
        item.title or "",
        " ".join(item.authors),
        item.description or "",
        " ".join(item.categories),
    ]
    return " ".join(parts).lower()


def score_item(item: RawItem, words: list[str]) -> int:
    """Score one item against pre-split query words.

    Each word earns 3 points if it appears verbatim in the searchable text, and
    1 more if it is longer than 3 characters and appears with its last
    character dropped (a crude stem so "books" still rewards "book").
    """
    text = searchable_text(item)
    score = 0
    for word in words:
        if word in text:
            score += _EXACT_WORD_POINTS
        if len(word) >= _MIN_STEM_LENGTH and word[:-1] in text:
            score += _STEM_WORD_POINTS
    return score


def score_page(page: UpstreamPage, query: str) -> list[ScoredItem]:
    """Score every item on a page, preserving upstream order."""
    words = query_words(query)
    return [ScoredItem(item=item, relevance_score=score_item(item, words)) for item in page.items]


def filter_page(page: UpstreamPage, query: str) -> UpstreamPage:
    """Drop items with zero relevance to the original (unshaped) query.

    The reported total is passed through untouched: it describes the upstream's
    unfiltered count and is only used as an upper-bound hint.
    """
    kept = [scored.item for scored in score_page(page, query) if scored.relevance_score > 0]
    return UpstreamPage(items=kept, reported_total=page.reported_total)
