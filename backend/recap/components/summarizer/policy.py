from typing import Mapping, Optional

from recap.components.summarizer.schemas import SummaryLength


def parse_length(length: Optional[str]) -> SummaryLength:
    """Map a free-form length selector to a SummaryLength, defaulting to medium."""
    if isinstance(length, SummaryLength):
        return length
    normalized = (length or "").strip().lower()
    try:
        return SummaryLength(normalized)
    except ValueError:
        return SummaryLength.MEDIUM


def resolve_token_budget(
    length: Optional[str], budgets: Mapping[SummaryLength, int]
) -> int:
    """Output token budget for a length selector. Pure: same input, same budget."""
    return budgets[parse_length(length)]


def truncate(text: str, max_chars: int) -> str:
    """Hard-cut text to max_chars; anything past the limit is dropped."""
    return text[:max_chars]
