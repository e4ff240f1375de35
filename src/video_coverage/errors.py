"""Exception types raised across the analysis pipeline.

Anything that is not an InvalidRequestError ends up as a generic 500 at the API layer,
VideoNotFoundError included.
"""


class CoverageServiceError(Exception):
    """Base class for errors raised by this package."""


class InvalidRequestError(CoverageServiceError):
    """Missing or malformed request fields. Surfaced as HTTP 400."""


class VideoNotFoundError(CoverageServiceError):
    """The video id did not resolve to a video on the metadata API."""

    def __init__(self, video_id: str, message: str = "Video not found"):
        super().__init__(message)
        self.video_id = video_id


class TranscriptUnavailableError(CoverageServiceError):
    """The transcript service had no transcript. Triggers the description fallback."""
