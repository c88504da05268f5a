"""
Data models for the strategy pipeline.
"""
from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class TopicRequest(BaseModel):
    """Inbound topic submission from the presentation layer."""
    model_config = ConfigDict(frozen=True)

    topic: str
    description: Optional[str] = None
    audience: Optional[str] = None
    style: Optional[str] = None
    duration: Optional[str] = None
    language: Optional[str] = None

    @field_validator("topic")
    @classmethod
    def _topic_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Topic is required")
        return value


class ProviderAuthor(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    url: Optional[str] = None


class ProviderVideo(BaseModel):
    """One raw video record as returned by a search provider."""
    model_config = ConfigDict(extra="ignore")

    videoId: Optional[str] = None
    url: str = ""
    title: str = ""
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    image: Optional[str] = None
    views: Optional[int] = None
    ago: Optional[str] = None
    author: Optional[ProviderAuthor] = None


@dataclass(frozen=True)
class VideoCandidate:
    """A video found via one of the topic search queries."""
    video_id: str
    title: str
    url: str
    thumbnail_url: str
    channel_name: str
    views: int
    description: str
    ago: Optional[str]  # raw relative age, None when the provider omitted it


@dataclass(frozen=True)
class VideoInsight:
    """A scored candidate retained for synthesis."""
    video_id: str
    title: str
    url: str
    thumbnail_url: str
    channel_name: str
    views: int
    ago: str
    description: str
    score: float
    relevance: float  # 0.0-1.0
    highlights: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.video_id,
            "title": self.title,
            "url": self.url,
            "thumbnail": self.thumbnail_url,
            "channel": self.channel_name,
            "views": self.views,
            "ago": self.ago,
            "description": self.description,
            "score": self.score,
            "relevance": self.relevance,
            "highlights": list(self.highlights),
        }


@dataclass(frozen=True)
class OutlineSegment:
    title: str
    duration_hint: str
    talking_points: list[str]
    broll_ideas: list[str]

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "durationHint": self.duration_hint,
            "talkingPoints": list(self.talking_points),
            "brollIdeas": list(self.broll_ideas),
        }


@dataclass(frozen=True)
class ScriptSection:
    heading: str
    paragraphs: list[str]
    callout: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"heading": self.heading, "paragraphs": list(self.paragraphs)}
        if self.callout is not None:
            data["callout"] = self.callout
        return data


@dataclass(frozen=True)
class SeoBlock:
    title_ideas: list[str]
    description: str
    tags: list[str]

    def to_dict(self) -> dict:
        return {
            "titleIdeas": list(self.title_ideas),
            "description": self.description,
            "tags": list(self.tags),
        }


@dataclass(frozen=True)
class RequestMetadata:
    """Echo of the optional request fields."""
    requested_audience: Optional[str] = None
    tone: Optional[str] = None
    duration_hint: Optional[str] = None
    language: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "requestedAudience": self.requested_audience,
            "tone": self.tone,
            "durationHint": self.duration_hint,
            "language": self.language,
        }
        return {k: v for k, v in data.items() if v is not None}


@dataclass(frozen=True)
class StrategyDocument:
    """The complete synthesized result for one topic request."""
    query: str
    summary: str
    hook_ideas: list[str]
    narrative_angle: str
    key_themes: list[str]
    action_items: list[str]
    seo: SeoBlock
    outline: list[OutlineSegment]
    script: list[ScriptSection]
    inspiration: list[VideoInsight]
    metadata: RequestMetadata

    def to_dict(self) -> dict:
        """Render the JSON shape consumed by the presentation layer."""
        return {
            "query": self.query,
            "summary": self.summary,
            "hookIdeas": list(self.hook_ideas),
            "narrativeAngle": self.narrative_angle,
            "keyThemes": list(self.key_themes),
            "actionItems": list(self.action_items),
            "seo": self.seo.to_dict(),
            "outline": [segment.to_dict() for segment in self.outline],
            "script": [section.to_dict() for section in self.script],
            "inspiration": [insight.to_dict() for insight in self.inspiration],
            "metadata": self.metadata.to_dict(),
        }
