# ABOUTME: Query shaping for the upstream search API.
# ABOUTME: Wraps short phrases and Japanese-script queries in exact-phrase quotes.

import re

# Phrases of up to this many words are sent as exact-phrase queries.
_MAX_PHRASE_WORDS = 3

# Hiragana, Katakana, CJK Extension A, CJK Unified Ideographs.
_JAPANESE_SCRIPT_RE = re.compile(r"[\u3040-\u309f\u30a0-\u30ff\u3400-\u4dbf\u4e00-\u9fff]")


def _quote(text: str) -> str:
    return f'"{text}"'


def _is_quoted(text: str) -> bool:
    return len(text) >= 2 and text.startswith('"') and text.endswith('"')


def shape_query(query: str) -> str:
    """Rewrite a raw user query into an upstream-optimized query string.

    Japanese text and 2-3 word phrases become exact-phrase queries. Longer
    queries and single words pass through so the upstream's own term matching
    applies. Already-quoted input is returned as-is, which makes the transform
    idempotent.
    """
    cleaned = query.strip()
    if not cleaned or _is_quoted(cleaned):
        return cleaned

    if _JAPANESE_SCRIPT_RE.search(cleaned):
        return _quote(cleaned)

    words = cleaned.split()
    if 1 < len(words) <= _MAX_PHRASE_WORDS:
        return _quote(cleaned)
    return cleaned
