"""YouTube Data API v3 client.

Fetches the snippet (title, description, channel, publish date, thumbnail) for one video.
"""

import httpx
from ..config import Settings
from ..errors import VideoNotFoundError
from ..log import get_logger
from ..schemas.api import VideoMetadata

logger = get_logger("metadata")

class MetadataFetcher:
    def __init__(self, settings: Settings):
        self.api_url = settings.YOUTUBE_API_URL
        self.api_key = settings.YOUTUBE_API_KEY
        self.timeout = settings.HTTP_TIMEOUT_SECONDS

    async def fetch(self, video_id: str) -> VideoMetadata:
        """
        Returns the video's snippet metadata.
        Raises VideoNotFoundError if the id does not resolve and
        httpx.HTTPStatusError on a non-2xx response.
        """
        params = {"part": "snippet", "id": video_id, "key": self.api_key}
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            resp = await client.get(self.api_url, params=params)
            resp.raise_for_status()
            data = resp.json()

        items = data.get("items") or []
        if not items:
            logger.info(f"No video found for id {video_id}")
            raise VideoNotFoundError(video_id)

        snippet = items[0]["snippet"]
        return VideoMetadata(
            title=snippet.get("title", ""),
            description=snippet.get("description") or "",
            channel_title=snippet.get("channelTitle", ""),
            published_at=snippet.get("publishedAt", ""),
            thumbnail=snippet["thumbnails"]["default"]["url"],
        )
