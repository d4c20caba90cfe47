from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class YouTubeModel(BaseModel):
    """Serialized with the camelCase keys the YouTube Data API uses."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VideoStatistics(YouTubeModel):
    view_count: str | None = None
    like_count: str | None = None


class VideoInfo(YouTubeModel):
    """Metadata of a single YouTube video."""

    title: str
    description: str = ""
    published_at: str | None = None
    thumbnails: dict[str, Any] = Field(default_factory=dict)
    duration: str | None = Field(default=None, description="ISO 8601 duration")
    statistics: VideoStatistics = Field(default_factory=VideoStatistics)


class ChannelInfo(YouTubeModel):
    """Metadata of the channel that published a video."""

    channel_id: str
    channel_title: str | None = None
    channel_description: str = ""
    channel_thumbnails: dict[str, Any] = Field(default_factory=dict)
    subscriber_count: str | None = None
    video_count: str | None = None
