import logging
from typing import Any

import requests

from recap.components.video_info.schemas import (
    ChannelInfo,
    VideoInfo,
    VideoStatistics,
)
from recap.errors import NotFoundError, UpstreamError

_logger = logging.getLogger(__name__)

YOUTUBE_DATA_API_URL = "https://www.googleapis.com/youtube/v3"


class YouTubeMetadataClient:
    """Video and channel lookups against the YouTube Data API v3."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = YOUTUBE_DATA_API_URL,
        timeout: float = 30.0,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _first_item(self, resource: str, part: str, item_id: str) -> dict[str, Any] | None:
        try:
            response = requests.get(
                f"{self.base_url}/{resource}",
                params={"part": part, "id": item_id, "key": self.api_key},
                timeout=self.timeout,
            )
            response.raise_for_status()
            items = response.json().get("items") or []
        except requests.RequestException as exc:
            _logger.error("YouTube Data API %s lookup failed: %s", resource, exc)
            raise UpstreamError(f"YouTube Data API request failed: {exc}") from exc
        return items[0] if items else None

    def get_video_info(self, video_id: str) -> tuple[VideoInfo, ChannelInfo]:
        """Fetch a video's snippet, duration and counts plus its channel's profile."""
        video = self._first_item("videos", "snippet,contentDetails,statistics", video_id)
        if video is None:
            raise NotFoundError("Video not found")

        snippet = video.get("snippet", {})
        statistics = video.get("statistics", {})
        channel_id = snippet.get("channelId", "")

        channel = self._first_item("channels", "snippet,statistics", channel_id)
        if channel is None:
            raise NotFoundError("Channel not found")

        channel_snippet = channel.get("snippet", {})
        channel_statistics = channel.get("statistics", {})

        video_info = VideoInfo(
            title=snippet.get("title", ""),
            description=snippet.get("description", ""),
            published_at=snippet.get("publishedAt"),
            thumbnails=snippet.get("thumbnails", {}),
            duration=video.get("contentDetails", {}).get("duration"),
            statistics=VideoStatistics(
                view_count=statistics.get("viewCount"),
                like_count=statistics.get("likeCount"),
            ),
        )
        channel_info = ChannelInfo(
            channel_id=channel_id,
            channel_title=snippet.get("channelTitle"),
            channel_description=channel_snippet.get("description", ""),
            channel_thumbnails=channel_snippet.get("thumbnails", {}),
            subscriber_count=channel_statistics.get("subscriberCount"),
            video_count=channel_statistics.get("videoCount"),
        )
        return video_info, channel_info
