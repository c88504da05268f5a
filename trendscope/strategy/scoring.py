"""
Rank candidate videos by a blend of popularity, recency and keyword relevance.
"""
import logging
import math
import re
from typing import Optional

from .models import VideoCandidate, VideoInsight

logger = logging.getLogger(__name__)

MAX_INSIGHTS = 12

VIEWS_WEIGHT = 0.6
AGE_WEIGHT = 0.3
RELEVANCE_WEIGHT = 0.4
NEUTRAL_RELEVANCE = 0.3

MINUTES_PER_UNIT = {
    "second": 1 / 60,
    "minute": 1,
    "hour": 60,
    "day": 60 * 24,
    "week": 60 * 24 * 7,
    "month": 60 * 24 * 30,
    "year": 60 * 24 * 365,
}
STALE_AGE_MINUTES = MINUTES_PER_UNIT["year"]
AGE_DECAY_MINUTES = 60 * 24 * 21  # ~3 weeks

# Also matches "streamed 3 days ago" and "premiered 2 weeks ago"
_AGE_RE = re.compile(r"(\d+)\s+(second|minute|hour|day|week|month|year)")


def parse_age_minutes(ago: Optional[str]) -> float:
    """Parse a relative age like '3 days ago' into minutes.

    Missing or unrecognised descriptors count as one year old.
    """
    if not ago:
        return STALE_AGE_MINUTES
    match = _AGE_RE.search(ago.lower())
    if not match:
        return STALE_AGE_MINUTES
    return int(match.group(1)) * MINUTES_PER_UNIT[match.group(2)]


def view_score(views: int) -> float:
    return math.log10(max(0, views) + 1) / 6


def age_score(ago: Optional[str]) -> float:
    return math.exp(-parse_age_minutes(ago) / AGE_DECAY_MINUTES)


def keyword_relevance(text: str, keywords: list[str]) -> float:
    """Fraction of keywords appearing as substrings of text (case-insensitive)."""
    if not keywords:
        return NEUTRAL_RELEVANCE
    text = text.lower()
    matches = sum(1 for keyword in keywords if keyword in text)
    return matches / len(keywords)


def score_video(candidate: VideoCandidate, keywords: list[str]) -> tuple[float, float]:
    """Compute (score, relevance) for one candidate.

    The weights are a blend and deliberately do not sum to 1.
    """
    relevance = keyword_relevance(
        f"{candidate.title} {candidate.description}", keywords
    )
    score = (
        VIEWS_WEIGHT * view_score(candidate.views)
        + AGE_WEIGHT * age_score(candidate.ago)
        + RELEVANCE_WEIGHT * relevance
    )
    return score, relevance


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _rounds_to_millions(views: int) -> bool:
    return _round_half_up(views / 1000) >= 1000


def format_views(views: int) -> str:
    """Compact view count: 2.0M, 12k, 999."""
    if _rounds_to_millions(views):
        return f"{views / 1_000_000:.1f}M"
    if views >= 1000:
        return f"{_round_half_up(views / 1000)}k"
    return f"{views:,}"


def _view_label(views: int) -> str:
    if _rounds_to_millions(views):
        return f"{views / 1_000_000:.1f}M views"
    if views > 10_000:
        return f"{_round_half_up(views / 1000)}k views"
    return f"{views:,} views"


def build_highlights(candidate: VideoCandidate, keywords: list[str]) -> list[str]:
    """Short talking points explaining why a video ranked."""
    highlights = []
    lower_title = candidate.title.lower()
    for keyword in keywords[:5]:
        if keyword in lower_title:
            highlights.append(f"Focus on {keyword}")
    if candidate.views:
        highlights.append(_view_label(candidate.views))
    if candidate.ago:
        highlights.append(f"Published {candidate.ago}")
    return highlights


def rank_insights(
    candidates: list[VideoCandidate],
    keywords: list[str],
    limit: int = MAX_INSIGHTS,
) -> list[VideoInsight]:
    """Score every candidate and keep the top `limit` by descending score."""
    insights = []
    for candidate in candidates:
        score, relevance = score_video(candidate, keywords)
        insights.append(
            VideoInsight(
                video_id=candidate.video_id,
                title=candidate.title,
                url=candidate.url,
                thumbnail_url=candidate.thumbnail_url,
                channel_name=candidate.channel_name,
                views=candidate.views,
                ago=candidate.ago or "Unknown",
                description=candidate.description,
                score=score,
                relevance=relevance,
                highlights=build_highlights(candidate, keywords),
            )
        )

    # sorted() is stable, so equal scores keep fetch order
    insights = sorted(insights, key=lambda i: i.score, reverse=True)[:limit]
    if insights:
        logger.info(
            "Ranked %d candidates, kept %d (top score %.4f)",
            len(candidates), len(insights), insights[0].score,
        )
    return insights
