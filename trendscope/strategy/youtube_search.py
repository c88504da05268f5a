"""
Video search providers.

Every provider exposes the same contract:

    await provider.search(query, pages=1) -> {"videos": [...]}

where each video record carries videoId, url, title, description,
thumbnail/image, views, ago and author.name (all but url and title optional).
"""
import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Protocol, Union

import httpx

from .errors import ProviderError

logger = logging.getLogger(__name__)

YOUTUBE_SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"
YOUTUBE_VIDEOS_URL = "https://www.googleapis.com/youtube/v3/videos"
RESULTS_PER_PAGE = 20
REQUEST_TIMEOUT = 30

# Largest unit first; (unit, seconds)
_AGE_UNITS = [
    ("year", 365 * 24 * 3600),
    ("month", 30 * 24 * 3600),
    ("week", 7 * 24 * 3600),
    ("day", 24 * 3600),
    ("hour", 3600),
    ("minute", 60),
    ("second", 1),
]


class SearchProvider(Protocol):
    async def search(self, query: str, pages: int = 1) -> dict:
        ...


def describe_age(published_at: str, now: Optional[datetime] = None) -> Optional[str]:
    """Turn an ISO 8601 timestamp into a relative descriptor like '3 days ago'."""
    if not published_at:
        return None
    try:
        published = datetime.fromisoformat(published_at.replace("Z", "+00:00"))
    except ValueError:
        return None
    if published.tzinfo is None:
        published = published.replace(tzinfo=timezone.utc)

    now = now or datetime.now(timezone.utc)
    elapsed = max(0, int((now - published).total_seconds()))
    for unit, seconds in _AGE_UNITS:
        if elapsed >= seconds:
            count = elapsed // seconds
            return f"{count} {unit}{'s' if count != 1 else ''} ago"
    return "0 seconds ago"


def _to_record(item: dict, now: datetime) -> dict:
    """Map a videos.list item onto the provider record shape."""
    snippet = item.get("snippet", {})
    stats = item.get("statistics", {})
    thumbnails = snippet.get("thumbnails", {})
    thumb = (
        thumbnails.get("high", {}).get("url")
        or thumbnails.get("medium", {}).get("url")
        or thumbnails.get("default", {}).get("url")
    )
    record = {
        "videoId": item["id"],
        "url": f"https://youtube.com/watch?v={item['id']}",
        "title": snippet.get("title", ""),
        "description": snippet.get("description", ""),
        "thumbnail": thumb,
        "author": {"name": snippet.get("channelTitle")},
        "ago": describe_age(snippet.get("publishedAt", ""), now),
    }
    if "viewCount" in stats:
        record["views"] = int(stats["viewCount"])
    return record


class YouTubeSearchProvider:
    """Searches YouTube via the Data API and reports results as provider records.

    Uses search.list (100 quota units per call) followed by videos.list for
    view counts (1 unit per 50 videos).
    """

    def __init__(self, api_key: Optional[str] = None, timeout: float = REQUEST_TIMEOUT):
        self.api_key = api_key or os.environ.get("YOUTUBE_API_KEY")
        if not self.api_key:
            raise ValueError(
                "A YouTube API key is required (pass api_key or set YOUTUBE_API_KEY)"
            )
        self.timeout = timeout

    async def search(self, query: str, pages: int = 1) -> dict:
        client = httpx.AsyncClient(timeout=self.timeout)
        try:
            # Step 1: Search for video IDs
            resp = await client.get(
                YOUTUBE_SEARCH_URL,
                params={
                    "part": "snippet",
                    "q": query,
                    "type": "video",
                    "maxResults": min(RESULTS_PER_PAGE * pages, 50),
                    "order": "relevance",
                    "key": self.api_key,
                },
            )
            resp.raise_for_status()
            items = resp.json().get("items", [])
            video_ids = [
                item["id"]["videoId"]
                for item in items
                if item.get("id", {}).get("videoId")
            ]
            if not video_ids:
                logger.info("No YouTube results for query: %s", query)
                return {"videos": []}

            # Step 2: Fetch statistics for all found videos
            resp = await client.get(
                YOUTUBE_VIDEOS_URL,
                params={
                    "part": "snippet,statistics",
                    "id": ",".join(video_ids),
                    "key": self.api_key,
                },
            )
            resp.raise_for_status()

            now = datetime.now(timezone.utc)
            videos = [_to_record(item, now) for item in resp.json().get("items", [])]
            logger.info("Found %d YouTube videos for query: %s", len(videos), query)
            return {"videos": videos}

        except httpx.HTTPStatusError as e:
            if e.response.status_code == 403:
                logger.error("YouTube API quota exceeded")
            else:
                logger.error("YouTube API error: %s", e)
            raise ProviderError(query, str(e)) from e
        except httpx.HTTPError as e:
            logger.error("YouTube search failed for '%s': %s", query, e)
            raise ProviderError(query, str(e)) from e
        finally:
            await client.aclose()


class SnapshotSearchProvider:
    """Serves recorded search results keyed by query.

    The snapshot is a mapping of query -> {"videos": [...]}; queries
    missing from it return no videos.
    """

    def __init__(self, snapshot: Union[dict, str, Path]):
        if isinstance(snapshot, (str, Path)):
            with open(snapshot, encoding="utf-8") as f:
                snapshot = json.load(f)
        self.snapshot = snapshot

    async def search(self, query: str, pages: int = 1) -> dict:
        result = self.snapshot.get(query)
        if result is None:
            logger.debug("No snapshot entry for query: %s", query)
            return {"videos": []}
        return {"videos": list(result.get("videos", []))}
