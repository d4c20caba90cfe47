from pydantic import BaseModel, ConfigDict, Field


class TranscriptSegment(BaseModel):
    """A single caption unit from a YouTube transcript."""

    model_config = ConfigDict(extra="ignore")

    text: str = Field(description="The text content of this segment")
    start: float | None = Field(
        default=None, ge=0.0, description="Start time in seconds"
    )
    duration: float | None = Field(
        default=None, ge=0.0, description="Duration in seconds"
    )


class TranscriptData(BaseModel):
    """Complete transcript data with both plain text and timestamped segments."""

    text: str = Field(description="Full transcript as plain text")
    segments: list[TranscriptSegment] = Field(
        description="Individual timestamped segments"
    )
    video_id: str = Field(description="YouTube video ID")


def join_segments(segments: list[TranscriptSegment]) -> str:
    """Concatenate segment texts with single spaces, preserving order."""
    return " ".join(segment.text for segment in segments)
