from typing import List, Optional
from pydantic import Field
from .coverage import CamelModel, CoverageReport


class AnalyzeRequest(CamelModel):
    # Everything is optional here so that missing fields produce our own 400 body
    youtube_url: Optional[str] = None
    topic: Optional[str] = None
    custom_subtopics: Optional[List[str]] = None


class VideoMetadata(CamelModel):
    title: str = ""
    description: str = ""
    channel_title: str = ""
    published_at: str = ""
    thumbnail: Optional[str] = None


class VideoInfo(CamelModel):
    video_id: str
    title: str
    channel_title: str
    published_at: str
    thumbnail: Optional[str] = None
    youtube_url: str


class AnalyzeResponse(CamelModel):
    success: bool = True
    video_info: VideoInfo
    transcript: str
    subtopics: List[str]
    analysis: CoverageReport


class HealthResponse(CamelModel):
    status: str = "OK"
    message: str = "Server running"
    has_groq_key: bool
    # to_camel would give hasYoutubeKey
    has_youtube_key: bool = Field(..., alias="hasYouTubeKey")


class ErrorResponse(CamelModel):
    error: str
    details: Optional[str] = None
