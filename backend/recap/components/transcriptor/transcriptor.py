import re
import logging
import requests

from typing import Optional
from urllib.parse import parse_qs, urlparse

from youtube_transcript_api import (
    CouldNotRetrieveTranscript,
    FetchedTranscript,
    NoTranscriptFound,
    RequestBlocked,
    TranscriptsDisabled,
    VideoUnavailable,
    YouTubeTranscriptApi,
)
from youtube_transcript_api.proxies import WebshareProxyConfig

from recap.components.transcriptor.schemas import (
    TranscriptData,
    TranscriptSegment,
    join_segments,
)
from recap.errors import InvalidInputError, NotFoundError, UpstreamError

_logger = logging.getLogger(__name__)

_VIDEO_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{11}$")

DEFAULT_LANGUAGES = ["en", "en-US", "it", "es", "fr", "de", "pt"]


def extract_video_id(value: str) -> str:
    """Extract the video ID from a bare ID or a YouTube URL."""
    value = (value or "").strip()
    if _VIDEO_ID_PATTERN.match(value):
        return value

    parsed = urlparse(value)

    if parsed.hostname in ("youtu.be", "www.youtu.be"):
        candidate = parsed.path[1:]
        if _VIDEO_ID_PATTERN.match(candidate):
            return candidate

    if parsed.hostname in ("youtube.com", "www.youtube.com", "m.youtube.com"):
        if parsed.path == "/watch":
            candidates = parse_qs(parsed.query).get("v", [])
            if candidates and _VIDEO_ID_PATTERN.match(candidates[0]):
                return candidates[0]
        for prefix in ("/embed/", "/v/", "/shorts/"):
            if parsed.path.startswith(prefix):
                candidate = parsed.path.split("/")[2]
                if _VIDEO_ID_PATTERN.match(candidate):
                    return candidate

    raise InvalidInputError(f"Invalid video ID: {value!r}")


def _fetch(
    ytt_api: YouTubeTranscriptApi, video_id: str, languages: list[str]
) -> FetchedTranscript:
    try:
        return ytt_api.fetch(video_id, languages=languages)
    except NoTranscriptFound:
        # None of the preferred languages: take the first transcript listed
        for transcript in ytt_api.list(video_id):
            _logger.info(
                "Using %s transcript for %s", transcript.language_code, video_id
            )
            return transcript.fetch()
        raise


def fetch_transcript(
    video_id: str,
    *,
    languages: Optional[list[str]] = None,
    proxy_username: Optional[str] = None,
    proxy_password: Optional[str] = None,
    proxy_location: str = "es",
) -> TranscriptData:
    """Fetch the timestamped transcript of a video.

    Tries direct API first, falls back to Webshare proxy if YouTube blocks the request.

    Args:
        video_id: YouTube video ID or URL
        languages: Preferred languages, in priority order
        proxy_username: Webshare proxy username (optional)
        proxy_password: Webshare proxy password (optional)
        proxy_location: Webshare exit location filter

    Returns:
        TranscriptData containing plain text, segments, and video_id

    Raises:
        NotFoundError: The video has no transcript available.
        UpstreamError: YouTube could not be reached or refused the request.
    """
    if languages is None:
        languages = DEFAULT_LANGUAGES

    video_id = extract_video_id(video_id)

    try:
        try:
            transcript = _fetch(YouTubeTranscriptApi(), video_id, languages)
            _logger.debug("Fetched transcript for %s (direct)", video_id)
        except RequestBlocked:
            if not (proxy_username and proxy_password):
                _logger.error("Proxy credentials not configured, cannot fallback")
                raise
            _logger.warning("Rate limited for %s, trying proxy fallback...", video_id)
            proxy_config = WebshareProxyConfig(
                proxy_username=proxy_username,
                proxy_password=proxy_password,
                filter_ip_locations=[proxy_location],
            )
            transcript = _fetch(
                YouTubeTranscriptApi(proxy_config=proxy_config), video_id, languages
            )
            _logger.info("Fetched transcript for %s (via proxy)", video_id)
    except (TranscriptsDisabled, NoTranscriptFound, VideoUnavailable) as exc:
        _logger.info("No transcript for %s: %s", video_id, type(exc).__name__)
        raise NotFoundError("No transcript available.") from exc
    except CouldNotRetrieveTranscript as exc:
        raise UpstreamError(f"Could not retrieve transcript: {exc}") from exc
    except requests.RequestException as exc:
        raise UpstreamError(f"YouTube request failed: {exc}") from exc

    segments = [
        TranscriptSegment(
            text=snippet.text, start=snippet.start, duration=snippet.duration
        )
        for snippet in transcript
    ]
    if not segments:
        raise NotFoundError("No transcript available.")

    # Join and clean for plain text
    text = re.sub(r"\s+", " ", join_segments(segments)).strip()

    return TranscriptData(text=text, segments=segments, video_id=video_id)
