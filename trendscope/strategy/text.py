"""
Keyword extraction and theme aggregation over video titles and descriptions.
"""
import re
from datetime import datetime
from typing import Iterable

from .models import VideoInsight

MIN_TOKEN_LENGTH = 3
MAX_KEYWORDS = 10
MAX_THEMES = 5

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "if", "in", "on", "for", "with",
    "of", "to", "by", "from", "about", "is", "are", "was", "were", "be",
    "this", "that", "those", "these", "you", "your", "into", "how", "what",
    "why", "when", "where", "can", "should", "will", "new", "latest", "best",
    "top", "video", "official",
}) | frozenset(str(year) for year in range(2020, datetime.now().year + 2))

_NON_WORD_RE = re.compile(r"[^a-z0-9\s]")


def tokenize(text: str) -> list[str]:
    """Split text into significant lowercase words.

    Order and duplicates are preserved; frequency matters downstream.
    """
    cleaned = _NON_WORD_RE.sub(" ", (text or "").lower())
    return [
        word for word in cleaned.split()
        if len(word) >= MIN_TOKEN_LENGTH and word not in STOP_WORDS
    ]


def aggregate_keywords(texts: Iterable[str], limit: int = MAX_KEYWORDS) -> list[str]:
    """Return the most frequent words across texts, highest count first.

    Ties keep first-seen order.
    """
    counts: dict[str, int] = {}
    first_seen: dict[str, int] = {}
    for text in texts:
        for word in tokenize(text):
            if word not in counts:
                counts[word] = 0
                first_seen[word] = len(first_seen)
            counts[word] += 1

    ranked = sorted(counts, key=lambda w: (-counts[w], first_seen[w]))
    return ranked[:limit]


def extract_themes(
    insights: list[VideoInsight], limit: int = MAX_THEMES
) -> tuple[list[str], list[str]]:
    """Build the theme set from the top insights' combined text.

    Returns:
        (themes, keywords): the first `limit` keywords, and the full
        aggregated keyword list they were taken from.
    """
    keywords = aggregate_keywords(
        f"{insight.title} {insight.description}" for insight in insights
    )
    return keywords[:limit], keywords
