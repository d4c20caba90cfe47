from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from recap.components.transcriptor.schemas import TranscriptSegment
from recap.components.video_info.schemas import ChannelInfo, VideoInfo


class CamelResponse(BaseModel):
    """Serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy"] = "healthy"
    version: str


class TranscriptResponse(CamelResponse):
    success: bool = True
    transcript: list[TranscriptSegment]


class LanguageResponse(CamelResponse):
    success: bool = True
    language: str


class TranslationResponse(CamelResponse):
    success: bool = True
    translation: str


class SummarizeResponse(CamelResponse):
    success: bool = True
    summary: str
    concept_map: Any = Field(
        default=None, description="Nodes/edges graph as returned by the model"
    )


class VideoInfoResponse(CamelResponse):
    success: bool = True
    video_info: VideoInfo
    channel_info: ChannelInfo


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: Literal[False] = False
    error: str = Field(..., description="Error message")

    class Config:
        json_schema_extra = {
            "example": {"success": False, "error": "Missing transcript."}
        }
