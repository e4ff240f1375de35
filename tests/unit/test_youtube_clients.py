import asyncio
import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from video_coverage.errors import VideoNotFoundError
from video_coverage.schemas.api import VideoMetadata
from video_coverage.youtube.metadata import MetadataFetcher
from video_coverage.youtube.transcript import TranscriptResolver, NO_TRANSCRIPT

VIDEO_ID = "dQw4w9WgXcQ"

SNIPPET_PAYLOAD = {
    "items": [{
        "snippet": {
            "title": "Intro to Python",
            "description": "Loops and functions.",
            "channelTitle": "Code Channel",
            "publishedAt": "2024-01-01T00:00:00Z",
            "thumbnails": {"default": {"url": "https://i.ytimg.com/default.jpg"}},
        }
    }]
}

def test_metadata_fetch_success(settings, mock_async_httpx, make_response):
    """
    WHY: The response's videoInfo is built from the YouTube snippet.
    HOW: Mock httpx.AsyncClient to return a videos.list payload.
    EXPECTED: VideoMetadata with the snippet fields; request carries part/id/key params.
    """
    mock_async_httpx.get.return_value = make_response(SNIPPET_PAYLOAD)

    meta = asyncio.run(MetadataFetcher(settings).fetch(VIDEO_ID))

    assert meta.title == "Intro to Python"
    assert meta.description == "Loops and functions."
    assert meta.channel_title == "Code Channel"
    assert meta.published_at == "2024-01-01T00:00:00Z"
    assert meta.thumbnail == "https://i.ytimg.com/default.jpg"

    url = mock_async_httpx.get.call_args[0][0]
    params = mock_async_httpx.get.call_args[1]["params"]
    assert url == "https://youtube.test/videos"
    assert params == {"part": "snippet", "id": VIDEO_ID, "key": "yt-test"}

def test_metadata_not_found(settings, mock_async_httpx, make_response):
    mock_async_httpx.get.return_value = make_response({"items": []})

    with pytest.raises(VideoNotFoundError, match="Video not found"):
        asyncio.run(MetadataFetcher(settings).fetch(VIDEO_ID))

def test_metadata_http_error_propagates(settings, mock_async_httpx, make_response):
    """
    WHY: A bad API key must surface as an upstream error, not an empty result.
    HOW: Make raise_for_status raise HTTPStatusError.
    EXPECTED: The error propagates to the caller.
    """
    resp = make_response({})
    resp.raise_for_status.side_effect = httpx.HTTPStatusError(
        "403 Forbidden", request=MagicMock(), response=MagicMock()
    )
    mock_async_httpx.get.return_value = resp

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(MetadataFetcher(settings).fetch(VIDEO_ID))

def _resolver(settings, description="Fallback description."):
    fetcher = MagicMock()
    fetcher.fetch = AsyncMock(return_value=VideoMetadata(description=description))
    return TranscriptResolver(settings, fetcher), fetcher

def test_transcript_from_service(settings, mock_async_httpx, make_response):
    mock_async_httpx.get.return_value = make_response({"transcript": "Hello and welcome."})
    resolver, fetcher = _resolver(settings)

    text = asyncio.run(resolver.resolve(VIDEO_ID))

    assert text == "Hello and welcome."
    assert mock_async_httpx.get.call_args[1]["params"] == {"videoId": VIDEO_ID}
    fetcher.fetch.assert_not_called()

def test_transcript_segments_are_joined(settings, mock_async_httpx, make_response):
    mock_async_httpx.get.return_value = make_response(
        {"transcript": [{"text": "Hello"}, {"text": "world"}]}
    )
    resolver, _ = _resolver(settings)
    assert asyncio.run(resolver.resolve(VIDEO_ID)) == "Hello world"

def test_transcript_falls_back_to_description(settings, mock_async_httpx, make_response):
    """
    WHY: Many videos have no transcript; the description is the next best text.
    HOW: Transcript service returns no transcript, then raises a network error.
    EXPECTED: Description from the metadata fetcher in both cases.
    """
    mock_async_httpx.get.return_value = make_response({"transcript": ""})
    resolver, fetcher = _resolver(settings)
    assert asyncio.run(resolver.resolve(VIDEO_ID)) == "Fallback description."
    fetcher.fetch.assert_awaited_once_with(VIDEO_ID)

    mock_async_httpx.get.side_effect = httpx.ConnectError("boom")
    resolver, _ = _resolver(settings)
    assert asyncio.run(resolver.resolve(VIDEO_ID)) == "Fallback description."

def test_transcript_placeholder_when_nothing_available(settings, mock_async_httpx):
    mock_async_httpx.get.side_effect = httpx.ConnectError("boom")
    resolver, _ = _resolver(settings, description="")
    assert asyncio.run(resolver.resolve(VIDEO_ID)) == NO_TRANSCRIPT

def test_fallback_errors_propagate(settings, mock_async_httpx):
    mock_async_httpx.get.side_effect = httpx.ConnectError("boom")
    fetcher = MagicMock()
    fetcher.fetch = AsyncMock(side_effect=VideoNotFoundError(VIDEO_ID))
    resolver = TranscriptResolver(settings, fetcher)

    with pytest.raises(VideoNotFoundError):
        asyncio.run(resolver.resolve(VIDEO_ID))

def test_outbound_clients_follow_redirects(settings, make_response):
    """
    WHY: A moved transcript service or API endpoint should be followed, not treated as a failure.
    HOW: Patch httpx.AsyncClient and run a metadata fetch and a transcript lookup.
    EXPECTED: Every client is built with follow_redirects=True and the configured timeout.
    """
    with patch("httpx.AsyncClient") as MockClient:
        instance = MockClient.return_value.__aenter__.return_value
        instance.get = AsyncMock(side_effect=[
            make_response(SNIPPET_PAYLOAD),
            make_response({"transcript": "Hello."}),
        ])
        fetcher = MetadataFetcher(settings)
        asyncio.run(fetcher.fetch(VIDEO_ID))
        asyncio.run(TranscriptResolver(settings, fetcher).resolve(VIDEO_ID))

    assert MockClient.call_count == 2
    for call in MockClient.call_args_list:
        assert call.kwargs == {"timeout": None, "follow_redirects": True}
