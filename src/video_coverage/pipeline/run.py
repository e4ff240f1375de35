from typing import List
from ..config import Settings
from ..errors import InvalidRequestError
from ..log import get_logger
from ..llm.client import CompletionClient
from ..youtube.url import extract_video_id, canonical_watch_url
from ..youtube.metadata import MetadataFetcher
from ..youtube.transcript import TranscriptResolver
from ..analysis.coverage import analyze_coverage
from ..schemas.api import AnalyzeResponse, VideoInfo

logger = get_logger("pipeline")

TRANSCRIPT_PREVIEW_CHARS = 500

def transcript_preview(transcript: str) -> str:
    preview = transcript[:TRANSCRIPT_PREVIEW_CHARS]
    if len(transcript) > TRANSCRIPT_PREVIEW_CHARS:
        preview += "..."
    return preview

class Pipeline:
    def __init__(
        self,
        metadata_fetcher: MetadataFetcher,
        transcript_resolver: TranscriptResolver,
        completion_client: CompletionClient,
    ):
        self.metadata_fetcher = metadata_fetcher
        self.transcript_resolver = transcript_resolver
        self.completion_client = completion_client

    @classmethod
    def from_settings(cls, settings: Settings) -> "Pipeline":
        metadata_fetcher = MetadataFetcher(settings)
        return cls(
            metadata_fetcher=metadata_fetcher,
            transcript_resolver=TranscriptResolver(settings, metadata_fetcher),
            completion_client=CompletionClient(settings),
        )

    async def run(self, youtube_url: str, topic: str, subtopics: List[str]) -> AnalyzeResponse:
        # 1. Identify video
        video_id = extract_video_id(youtube_url)
        if not video_id:
            raise InvalidRequestError("Invalid YouTube URL.")
        logger.info(f"Analyzing video {video_id} for topic {topic!r}")

        # 2. Metadata (raises VideoNotFoundError / httpx errors)
        metadata = await self.metadata_fetcher.fetch(video_id)

        # 3. Transcript, falling back to the description
        transcript = await self.transcript_resolver.resolve(video_id)

        # 4. Coverage (never raises)
        analysis = await analyze_coverage(transcript, subtopics, self.completion_client, topic=topic)
        logger.info(f"Video {video_id}: overall coverage {analysis.overall_score}")

        return AnalyzeResponse(
            success=True,
            video_info=VideoInfo(
                video_id=video_id,
                title=metadata.title,
                channel_title=metadata.channel_title,
                published_at=metadata.published_at,
                thumbnail=metadata.thumbnail,
                youtube_url=canonical_watch_url(video_id),
            ),
            transcript=transcript_preview(transcript),
            subtopics=subtopics,
            analysis=analysis,
        )
