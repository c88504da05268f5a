"""
Strategy pipeline orchestrator.

Combines topic search, ranking, theme extraction and content synthesis
into a single strategy document.
"""
import logging

from .fetcher import fetch_candidates
from .models import RequestMetadata, StrategyDocument, TopicRequest, VideoInsight
from .scoring import MAX_INSIGHTS, rank_insights
from .synthesis import (
    build_action_items,
    build_hook_ideas,
    build_narrative_angle,
    build_outline,
    build_script,
    build_seo,
    build_summary,
)
from .text import extract_themes, tokenize
from .youtube_search import SearchProvider

logger = logging.getLogger(__name__)


def query_keywords(request: TopicRequest) -> list[str]:
    """Keywords used for relevance scoring: topic plus description."""
    tokens = tokenize(f"{request.topic} {request.description or ''}")
    return tokens or tokenize(request.topic)


def assemble_document(
    request: TopicRequest,
    insights: list[VideoInsight],
    themes: list[str],
    keywords: list[str],
) -> StrategyDocument:
    """Run every content builder and package the results."""
    topic = request.topic
    return StrategyDocument(
        query=topic,
        summary=build_summary(topic, insights, themes),
        hook_ideas=build_hook_ideas(topic, themes, request.audience),
        narrative_angle=build_narrative_angle(
            topic, themes, request.audience, request.style
        ),
        key_themes=list(themes),
        action_items=build_action_items(topic, themes, insights),
        seo=build_seo(topic, themes, keywords),
        outline=build_outline(topic, themes),
        script=build_script(topic, themes, request.audience, request.style),
        inspiration=list(insights),
        metadata=RequestMetadata(
            requested_audience=request.audience,
            tone=request.style,
            duration_hint=request.duration,
            language=request.language,
        ),
    )


class StrategyPipeline:
    """Turns a topic request into a strategy document using one search provider."""

    def __init__(self, provider: SearchProvider, max_insights: int = MAX_INSIGHTS):
        self.provider = provider
        self.max_insights = max_insights

    async def run(self, request: TopicRequest) -> StrategyDocument:
        """Run the full pipeline for one request.

        Steps:
            1. Tokenize the topic into scoring keywords
            2. Fetch and deduplicate candidates for three query variants
            3. Score and keep the top insights
            4. Extract themes from the insights
            5. Synthesize and assemble the document

        Raises:
            ProviderError: the search provider failed.
            NoResultsError: no candidates were found.
        """
        keywords = query_keywords(request)
        logger.info("Analyzing topic '%s' with keywords %s", request.topic, keywords)

        candidates = await fetch_candidates(self.provider, request.topic)
        insights = rank_insights(candidates, keywords, limit=self.max_insights)
        themes, theme_keywords = extract_themes(insights)

        document = assemble_document(request, insights, themes, theme_keywords)
        logger.info(
            "Pipeline complete: %d candidates, %d insights, themes=%s",
            len(candidates), len(insights), themes,
        )
        return document
