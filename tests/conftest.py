import pytest
import os
from unittest.mock import AsyncMock, MagicMock, patch
from dotenv import load_dotenv
from video_coverage.config import Settings
from video_coverage.schemas.api import VideoMetadata

@pytest.fixture(scope="session", autouse=True)
def _load_env():
    # Load .env once per session to avoid side-effects on import time
    load_dotenv()

def _truthy(v: str | None) -> bool:
    return v is not None and v.strip().lower() not in ("", "0", "false", "no")

@pytest.fixture(scope="session")
def allow_integration(_load_env) -> bool:
    return _truthy(os.getenv("RUN_INTEGRATION_TESTS"))

@pytest.fixture(scope="session")
def live_settings(_load_env) -> Settings | None:
    """Settings from the real environment, or None if either key is missing."""
    settings = Settings()
    if not settings.has_groq_key or not settings.has_youtube_key:
        return None
    return settings

@pytest.fixture
def settings():
    """
    Deterministic settings that ignore the developer's .env file.
    """
    return Settings(
        _env_file=None,
        GROQ_API_KEY="gsk-test",
        YOUTUBE_API_KEY="yt-test",
        GROQ_BASE_URL="https://api.groq.com/openai/v1",
        GROQ_MODEL="meta-llama/llama-4-scout-17b-16e-instruct",
        YOUTUBE_API_URL="https://youtube.test/videos",
        TRANSCRIPT_SERVICE_URL="https://transcripts.test/transcript",
    )

@pytest.fixture
def sample_metadata():
    return VideoMetadata(
        title="Intro to Python",
        description="A beginner course covering loops and functions.",
        channel_title="Code Channel",
        published_at="2024-01-01T00:00:00Z",
        thumbnail="https://i.ytimg.com/vi/dQw4w9WgXcQ/default.jpg",
    )

@pytest.fixture
def fake_completion_client():
    """
    Stand-in for CompletionClient. Set `.complete.return_value` or `.complete.side_effect` per test.
    """
    client = MagicMock()
    client.complete = AsyncMock(return_value="")
    return client

@pytest.fixture
def mock_async_httpx():
    """
    Mocks httpx.AsyncClient for metadata/transcript tests.
    Yields the client instance returned by `async with httpx.AsyncClient(...)`.
    """
    with patch("httpx.AsyncClient") as mock_client:
        instance = mock_client.return_value.__aenter__.return_value
        instance.get = AsyncMock()
        yield instance

@pytest.fixture
def make_response():
    """Factory for fake httpx responses whose .json() returns the given payload."""
    def _make(payload):
        resp = MagicMock()
        resp.json.return_value = payload
        resp.raise_for_status.return_value = None
        return resp
    return _make
