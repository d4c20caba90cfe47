import logging

from recap.components.generation.generator import TextGenerator
from recap.components.summarizer.schemas import SummaryPolicy
from recap.errors import InvalidInputError

_logger = logging.getLogger(__name__)

DETECTION_SYSTEM_PROMPT = (
    "Detect the language and return only the ISO code (e.g., 'en', 'it', 'es')."
)


async def detect_language(
    generator: TextGenerator, text: str, policy: SummaryPolicy
) -> str:
    """Return the lower-cased ISO code of the language text is written in."""
    if not text or not text.strip():
        raise InvalidInputError("Missing text input.")

    reply = await generator.generate(
        DETECTION_SYSTEM_PROMPT,
        text[: policy.detection_prefix_chars],
        max_output_tokens=policy.detection_max_tokens,
        temperature=policy.detection_temperature,
    )
    language = reply.strip().lower()
    _logger.debug("Detected language: %s", language)
    return language
