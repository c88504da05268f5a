"""
Tests for the pipeline orchestrator and the request boundary.
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from conftest import FakeProvider
from trendscope.strategy.errors import NoResultsError, ProviderError, TopicValidationError
from trendscope.strategy.models import TopicRequest
from trendscope.strategy.pipeline import StrategyPipeline, query_keywords
from trendscope.strategy.service import analyze_topic, parse_request

TOPIC = "AI tools for small business"


def _make_record(video_id="abc123", title="Best AI Tools 2025", views=2_000_000,
                 ago="2 days ago",
                 description="Grow your small business with these AI tools"):
    return {
        "videoId": video_id,
        "url": f"https://youtube.com/watch?v={video_id}",
        "title": title,
        "description": description,
        "thumbnail": f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg",
        "views": views,
        "ago": ago,
        "author": {"name": "TestChannel"},
    }


# ── Request Model Tests ───────────────────────────────────────────────


class TestTopicRequest:
    def test_topic_trimmed(self):
        request = TopicRequest(topic="  espresso  ", audience="baristas")
        assert request.topic == "espresso"
        assert request.audience == "baristas"
        assert request.style is None

    def test_blank_topic_rejected(self):
        with pytest.raises(TopicValidationError):
            parse_request({"topic": "   "})

    def test_missing_topic_rejected(self):
        with pytest.raises(TopicValidationError):
            parse_request({"audience": "anyone"})

    def test_wrong_type_elsewhere_is_not_a_topic_error(self):
        with pytest.raises(TopicValidationError) as exc_info:
            parse_request({"topic": "espresso", "style": ["loud"]})
        assert str(exc_info.value) == "Invalid request"

    def test_blank_topic_message(self):
        with pytest.raises(TopicValidationError) as exc_info:
            parse_request({"topic": "  "})
        assert str(exc_info.value) == "Topic is required"

    def test_query_keywords_include_description(self):
        request = TopicRequest(topic="espresso", description="grinder upgrades")
        assert query_keywords(request) == ["espresso", "grinder", "upgrades"]


# ── Pipeline Tests ────────────────────────────────────────────────────


class TestStrategyPipeline:
    @pytest.mark.asyncio
    async def test_single_video_scenario(self):
        provider = FakeProvider(default=[_make_record()])
        document = await StrategyPipeline(provider).run(TopicRequest(topic=TOPIC))

        assert document.query == TOPIC
        assert len(document.inspiration) == 1
        insight = document.inspiration[0]
        assert insight.relevance == 1.0
        assert insight.highlights == ["Focus on tools", "2.0M views", "Published 2 days ago"]

        assert "tools" in document.key_themes
        assert "business" in document.key_themes
        assert "best" not in document.key_themes
        assert "2025" not in document.key_themes
        assert "Best AI Tools 2025 (2,000,000 views)" in document.summary

        assert len(document.hook_ideas) == 3
        assert len(document.script) == 5
        assert document.outline[0].title == "Hook & Context"
        assert document.outline[-1].title == "Action Plan & CTA"
        assert len(document.action_items) == 3
        assert 'Watch "Best AI Tools 2025"' in document.action_items[2]

    @pytest.mark.asyncio
    async def test_insights_capped_and_sorted(self):
        records = [
            _make_record(f"v{i:02d}", title=f"Tools video {i}", views=(i + 1) * 10_000)
            for i in range(20)
        ]
        provider = FakeProvider(default=records)
        document = await StrategyPipeline(provider).run(TopicRequest(topic=TOPIC))

        scores = [i.score for i in document.inspiration]
        assert len(scores) == 12
        assert scores == sorted(scores, reverse=True)

    @pytest.mark.asyncio
    async def test_metadata_echo(self):
        provider = FakeProvider(default=[_make_record()])
        request = TopicRequest(
            topic=TOPIC, audience="founders", style="candid",
            duration="8 minutes", language="en",
        )
        document = await StrategyPipeline(provider).run(request)

        assert document.metadata.to_dict() == {
            "requestedAudience": "founders",
            "tone": "candid",
            "durationHint": "8 minutes",
            "language": "en",
        }
        assert document.hook_ideas[0].startswith("founders, ")
        assert "candid tone" in document.narrative_angle

    @pytest.mark.asyncio
    async def test_idempotent(self):
        provider = FakeProvider(default=[_make_record("a"), _make_record("b", views=10)])
        pipeline = StrategyPipeline(provider)
        first = await pipeline.run(TopicRequest(topic=TOPIC))
        second = await pipeline.run(TopicRequest(topic=TOPIC))
        assert first.to_dict() == second.to_dict()

    @pytest.mark.asyncio
    async def test_no_results(self):
        with pytest.raises(NoResultsError):
            await StrategyPipeline(FakeProvider()).run(TopicRequest(topic=TOPIC))

    @pytest.mark.asyncio
    async def test_provider_error_propagates(self):
        provider = FakeProvider(error=ProviderError(TOPIC, "boom"))
        with pytest.raises(ProviderError):
            await StrategyPipeline(provider).run(TopicRequest(topic=TOPIC))


# ── Service Tests ─────────────────────────────────────────────────────


class TestAnalyzeTopic:
    @pytest.mark.asyncio
    async def test_success(self):
        provider = FakeProvider(default=[_make_record()])
        status, body = await analyze_topic({"topic": TOPIC}, provider)

        assert status == 200
        assert set(body) == {
            "query", "summary", "hookIdeas", "narrativeAngle", "keyThemes",
            "actionItems", "seo", "outline", "script", "inspiration", "metadata",
        }
        assert body["inspiration"][0]["id"] == "abc123"
        assert body["inspiration"][0]["channel"] == "TestChannel"
        assert body["seo"]["tags"][0] == body["keyThemes"][0]
        assert body["metadata"] == {}

    @pytest.mark.asyncio
    async def test_empty_topic_is_400_without_provider_calls(self):
        provider = FakeProvider(default=[_make_record()])
        status, body = await analyze_topic({"topic": ""}, provider)

        assert status == 400
        assert body["error"]
        assert provider.queries == []

    @pytest.mark.asyncio
    async def test_missing_topic_is_400(self):
        status, body = await analyze_topic({}, FakeProvider())
        assert status == 400
        assert body == {"error": "Topic is required"}

    @pytest.mark.asyncio
    async def test_bad_optional_field_is_400_with_generic_message(self):
        provider = FakeProvider(default=[_make_record()])
        status, body = await analyze_topic({"topic": TOPIC, "audience": 5}, provider)

        assert status == 400
        assert body == {"error": "Invalid request"}
        assert provider.queries == []

    @pytest.mark.asyncio
    async def test_no_videos_is_404(self):
        status, body = await analyze_topic({"topic": TOPIC}, FakeProvider())
        assert status == 404
        assert "no videos" in body["error"].lower()

    @pytest.mark.asyncio
    async def test_provider_failure_is_500(self):
        provider = FakeProvider(error=RuntimeError("secret internal detail"))
        status, body = await analyze_topic({"topic": TOPIC}, provider)

        assert status == 500
        assert body == {"error": "Failed to analyze topic. Please try again later."}
        assert "secret" not in body["error"]
