from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SummaryLength(str, Enum):
    """Requested summary length."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


STANDARD_TOKEN_BUDGETS: Mapping[SummaryLength, int] = {
    SummaryLength.SHORT: 300,
    SummaryLength.MEDIUM: 500,
    SummaryLength.LONG: 800,
}

EXTENDED_TOKEN_BUDGETS: Mapping[SummaryLength, int] = {
    SummaryLength.SHORT: 500,
    SummaryLength.MEDIUM: 800,
    SummaryLength.LONG: 1200,
}


class SummaryPolicy(BaseModel):
    """Named knobs of the summarization pipeline."""

    model_config = ConfigDict(frozen=True)

    max_transcript_chars: int = Field(
        default=8000, gt=0, description="Hard cut applied to the joined transcript"
    )
    token_budgets: dict[SummaryLength, int] = Field(
        default_factory=lambda: dict(STANDARD_TOKEN_BUDGETS),
        description="Output token cap per summary length",
    )
    summary_temperature: float = Field(default=0.5, ge=0.0, le=2.0)
    concept_map_max_tokens: int = Field(default=1200, gt=0)
    concept_map_temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    detection_prefix_chars: int = Field(default=300, gt=0)
    detection_max_tokens: int = Field(default=5, gt=0)
    detection_temperature: float = Field(default=0.0, ge=0.0, le=2.0)
    include_emojis: bool = Field(
        default=True, description="Ask for emojis in headings and concept labels"
    )

    @field_validator("token_budgets")
    @classmethod
    def _require_every_length(cls, value: dict[SummaryLength, int]):
        missing = [length.value for length in SummaryLength if length not in value]
        if missing:
            raise ValueError(f"token_budgets is missing: {', '.join(missing)}")
        return value


# Any JSON value; only well-formed output has the nodes/edges shape
ConceptMap = Any


class SummaryResult(BaseModel):
    """Summary text plus the concept map derived from it."""

    summary: str
    concept_map: ConceptMap = None
