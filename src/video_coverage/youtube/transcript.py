"""Transcript lookup with description fallback.

Asks the external transcript service first; when it has nothing usable the
video description stands in for the transcript.
"""

import httpx
from typing import Any, Optional
from ..config import Settings
from ..errors import TranscriptUnavailableError
from ..log import get_logger
from .metadata import MetadataFetcher

logger = get_logger("transcript")

NO_TRANSCRIPT = "No transcript available."

def _transcript_text(raw: Any) -> Optional[str]:
    # The service normally returns a plain string; segment lists are joined.
    if isinstance(raw, list):
        parts = [seg.get("text", "") if isinstance(seg, dict) else str(seg) for seg in raw]
        raw = " ".join(p for p in parts if p)
    return raw or None

class TranscriptResolver:
    def __init__(self, settings: Settings, metadata_fetcher: MetadataFetcher):
        self.service_url = settings.TRANSCRIPT_SERVICE_URL
        self.timeout = settings.HTTP_TIMEOUT_SECONDS
        self.metadata_fetcher = metadata_fetcher

    async def fetch_transcript(self, video_id: str) -> str:
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            resp = await client.get(self.service_url, params={"videoId": video_id})
            resp.raise_for_status()
            data = resp.json()

        text = _transcript_text(data.get("transcript")) if isinstance(data, dict) else None
        if not text:
            raise TranscriptUnavailableError("Transcript not available")
        return text

    async def resolve(self, video_id: str) -> str:
        """
        Returns the transcript, else the video description, else a fixed placeholder.
        Errors from the description lookup propagate.
        """
        try:
            return await self.fetch_transcript(video_id)
        except Exception as e:
            logger.info(f"Transcript lookup failed for {video_id} ({e}), falling back to description")

        metadata = await self.metadata_fetcher.fetch(video_id)
        return metadata.description or NO_TRANSCRIPT
