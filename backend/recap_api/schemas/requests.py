from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from recap.components.transcriptor.schemas import TranscriptSegment


class CamelModel(BaseModel):
    """Accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DetectLanguageRequest(CamelModel):
    """Request schema for language detection."""

    text: str = Field(default="", description="Text whose language is detected")


class TranslateRequest(CamelModel):
    """Request schema for translating a text."""

    text: str = Field(default="", description="Text to translate")
    target_language: str = Field(
        default="",
        description="Target language name (english, italian, ...) or code",
        examples=["italian"],
    )


class SummarizeRequest(CamelModel):
    """Request schema for summarizing a transcript."""

    transcript: list[TranscriptSegment] = Field(
        default_factory=list,
        description="Caption segments in chronological order",
    )
    language: str = Field(
        default="", description="Language of the summary", examples=["english"]
    )
    length: str | None = Field(
        default=None,
        description="short, medium or long; anything else means medium",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "transcript": [
                    {"text": "Hello", "start": 0.0, "duration": 1.2},
                    {"text": "world", "start": 1.2, "duration": 0.8},
                ],
                "language": "english",
                "length": "short",
            }
        },
    )
