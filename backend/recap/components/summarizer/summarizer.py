import logging
from typing import Optional

from recap.components.generation.generator import TextGenerator
from recap.components.summarizer.policy import (
    parse_length,
    resolve_token_budget,
    truncate,
)
from recap.components.summarizer.schemas import SummaryPolicy
from recap.errors import EmptyGenerationError

_logger = logging.getLogger(__name__)


def build_summary_system_prompt(language: str, *, include_emojis: bool) -> str:
    """System instruction fixing output language and markdown structure."""
    highlight = (
        "Use headings (h1,h2,h3,h4,h5,h6) and emojis to highlight key concepts."
        if include_emojis
        else "Use headings (h1,h2,h3,h4,h5,h6) to highlight key concepts."
    )
    return (
        "You are an advanced summarization assistant. "
        f"The user wants a well-structured summary in {language}.\n"
        f"{highlight}\n"
        "Produce a thorough summary with relevant details, "
        "sized to the requested length."
    )


def build_summary_user_prompt(
    text: str, language: str, length: Optional[str], *, include_emojis: bool
) -> str:
    """User message carrying the (already truncated) transcript text."""
    instructions = ["- Use headings (h2, h3, etc.) for sections"]
    if include_emojis:
        instructions.append("- Use emojis for key concepts")
    instructions.extend(
        [
            "- Be detailed, do not be extremely short",
            f"- Language: {language}",
            f"- Length: {parse_length(length).value} (short, medium, long)",
        ]
    )
    return f"Transcript:\n\n{text}\n\nInstructions:\n" + "\n".join(instructions)


async def generate_summary(
    generator: TextGenerator,
    full_text: str,
    language: str,
    length: Optional[str],
    policy: SummaryPolicy,
) -> str:
    """Summarize transcript text in the requested language and length.

    Raises:
        EmptyGenerationError: The model produced no summary text.
        UpstreamError: The generation call failed.
    """
    text = truncate(full_text, policy.max_transcript_chars)
    if len(full_text) > len(text):
        _logger.info(
            "Transcript truncated from %d to %d characters",
            len(full_text),
            len(text),
        )

    max_tokens = resolve_token_budget(length, policy.token_budgets)
    summary = await generator.generate(
        build_summary_system_prompt(language, include_emojis=policy.include_emojis),
        build_summary_user_prompt(
            text, language, length, include_emojis=policy.include_emojis
        ),
        max_output_tokens=max_tokens,
        temperature=policy.summary_temperature,
    )

    summary = (summary or "").strip()
    if not summary:
        raise EmptyGenerationError("The model returned an empty summary.")
    return summary
