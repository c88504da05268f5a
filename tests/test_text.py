"""
Tests for tokenization, keyword aggregation and theme extraction.
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from trendscope.strategy.models import VideoInsight
from trendscope.strategy.text import (
    STOP_WORDS,
    aggregate_keywords,
    extract_themes,
    tokenize,
)


def _make_insight(title="Test Video", description="", video_id="abc123"):
    return VideoInsight(
        video_id=video_id,
        title=title,
        url=f"https://youtube.com/watch?v={video_id}",
        thumbnail_url="",
        channel_name="TestChannel",
        views=1000,
        ago="1 day ago",
        description=description,
        score=1.0,
        relevance=0.5,
    )


class TestTokenize:
    def test_lowercases_and_drops_stop_words(self):
        assert tokenize("The Latest Espresso Machines") == ["espresso", "machines"]

    def test_punctuation_splits_words(self):
        # "don't" becomes "don" + "t"; the short tail is dropped
        assert tokenize("Don't stop!!! The AI-powered video") == ["don", "stop", "powered"]

    def test_keeps_duplicates_in_order(self):
        assert tokenize("coffee grinder coffee") == ["coffee", "grinder", "coffee"]

    def test_drops_short_tokens(self):
        assert tokenize("ai vs ml on go") == []

    def test_year_tokens_are_stop_words(self):
        assert tokenize("Best AI Tools 2025") == ["tools"]
        assert "2024" in STOP_WORDS

    def test_empty_input(self):
        assert tokenize("") == []
        assert tokenize(None) == []

    @pytest.mark.parametrize("text", [
        "Crème brûlée — a how-to guide (2025 edition)!",
        "#shorts @creator 100% REAL",
        "tabs\tand\nnewlines",
    ])
    def test_tokens_are_clean(self, text):
        for token in tokenize(text):
            assert token.isalnum()
            assert token.isascii()
            assert len(token) >= 3
            assert token not in STOP_WORDS


class TestAggregateKeywords:
    def test_most_frequent_first(self):
        texts = ["budget travel tips", "travel hacks", "travel packing"]
        assert aggregate_keywords(texts)[0] == "travel"

    def test_ties_keep_first_seen_order(self):
        assert aggregate_keywords(["beta alpha", "alpha gamma"]) == ["alpha", "beta", "gamma"]

    def test_limit(self):
        text = " ".join(f"word{i:02d}" for i in range(15))
        assert len(aggregate_keywords([text])) == 10
        assert aggregate_keywords([text], limit=3) == ["word00", "word01", "word02"]

    def test_empty(self):
        assert aggregate_keywords([]) == []


class TestExtractThemes:
    def test_themes_from_titles_and_descriptions(self):
        insights = [
            _make_insight("Best AI Tools 2025", "Grow your small business with these AI tools"),
        ]
        themes, keywords = extract_themes(insights)
        assert themes[0] == "tools"
        assert "business" in themes
        assert "best" not in keywords
        assert "2025" not in keywords

    def test_at_most_five_themes(self):
        insights = [
            _make_insight(
                "alpha bravo charlie delta", "echo foxtrot golf hotel", video_id=str(i)
            )
            for i in range(3)
        ]
        themes, keywords = extract_themes(insights)
        assert themes == ["alpha", "bravo", "charlie", "delta", "echo"]
        assert len(keywords) == 8

    def test_short_theme_set(self):
        themes, keywords = extract_themes([_make_insight("Espresso", "")])
        assert themes == ["espresso"]
        assert keywords == ["espresso"]
