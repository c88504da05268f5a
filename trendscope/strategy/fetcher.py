"""
Fetch candidate videos for a topic from a search provider.

Three overlapping queries run concurrently; their results are merged and
deduplicated by video ID, earlier queries taking precedence.
"""
import asyncio
import logging

from pydantic import ValidationError

from .errors import NoResultsError, ProviderError
from .models import ProviderVideo, VideoCandidate
from .youtube_search import SearchProvider

logger = logging.getLogger(__name__)

PAGES_PER_QUERY = 1


def build_queries(topic: str) -> list[str]:
    """Primary, trending and best-of query variants, in precedence order."""
    return [topic, f"{topic} trending", f"best {topic}"]


async def fetch_video_set(provider: SearchProvider, query: str) -> list[ProviderVideo]:
    """Run one provider search and validate the returned records."""
    try:
        result = await provider.search(query, pages=PAGES_PER_QUERY)
    except ProviderError:
        raise
    except Exception as e:
        logger.error("Search provider failed for '%s': %s", query, e)
        raise ProviderError(query, str(e)) from e

    videos = []
    for raw in (result or {}).get("videos", []):
        try:
            videos.append(ProviderVideo.model_validate(raw))
        except ValidationError as e:
            logger.warning("Skipping malformed record for '%s': %s", query, e)
    logger.info("Query '%s' returned %d videos", query, len(videos))
    return videos


def dedupe_videos(videos: list[ProviderVideo]) -> list[ProviderVideo]:
    """Keep the first record seen for each video ID; drop records without one."""
    seen: dict[str, ProviderVideo] = {}
    for video in videos:
        if not video.videoId:
            logger.debug("Skipping record without videoId: %s", video.url)
            continue
        if video.videoId not in seen:
            seen[video.videoId] = video
    return list(seen.values())


def to_candidate(video: ProviderVideo) -> VideoCandidate:
    """Normalise a provider record, filling in defaults for missing fields."""
    return VideoCandidate(
        video_id=video.videoId or video.url,
        title=video.title,
        url=video.url,
        thumbnail_url=video.thumbnail or video.image or "",
        channel_name=(video.author.name if video.author else None) or "Unknown",
        views=max(0, video.views or 0),
        description=video.description or "",
        ago=video.ago,
    )


async def fetch_candidates(provider: SearchProvider, topic: str) -> list[VideoCandidate]:
    """Fetch, merge and deduplicate candidates for a topic.

    Raises:
        ProviderError: any of the searches failed.
        NoResultsError: nothing usable came back.
    """
    result_sets = await asyncio.gather(
        *(fetch_video_set(provider, query) for query in build_queries(topic))
    )

    combined = [video for result_set in result_sets for video in result_set]
    unique = dedupe_videos(combined)
    logger.info(
        "Merged %d results into %d unique videos for topic: %s",
        len(combined), len(unique), topic,
    )

    if not unique:
        raise NoResultsError(topic)
    return [to_candidate(video) for video in unique]
