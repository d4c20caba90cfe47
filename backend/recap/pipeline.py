import logging
from typing import Optional, Sequence

from recap.components.concept_map.concept_map import derive_concept_map
from recap.components.generation.generator import TextGenerator
from recap.components.language_detector.detector import detect_language
from recap.components.summarizer.schemas import SummaryPolicy, SummaryResult
from recap.components.summarizer.summarizer import generate_summary
from recap.components.transcriptor.schemas import TranscriptSegment, join_segments
from recap.errors import InvalidInputError
from recap.utils.profile import timer

_logger = logging.getLogger(__name__)


class SummarizationPipeline:
    """
    Summary and concept map derivation for a video transcript.

    The two generation calls run sequentially: the concept map is derived
    from the summary text. Stateless between calls, so one instance can serve
    concurrent requests.
    """

    def __init__(
        self, generator: TextGenerator, policy: Optional[SummaryPolicy] = None
    ):
        self.generator = generator
        self.policy = policy or SummaryPolicy()

    async def summarize(
        self,
        transcript: Sequence[TranscriptSegment],
        language: str,
        length: Optional[str] = None,
    ) -> SummaryResult:
        """
        Summarize a transcript and derive a concept map from the summary.

        Args:
            transcript: Caption segments in chronological order
            language: Language the summary is written in (name or code)
            length: "short", "medium" or "long"; anything else means medium

        Returns:
            SummaryResult with the trimmed summary and the concept map

        Raises:
            InvalidInputError: Empty transcript or language, before any upstream call.
            EmptyGenerationError: The summary step produced nothing.
            UpstreamError: A generation call failed.
        """
        if not transcript:
            raise InvalidInputError("Missing transcript.")
        if not language or not language.strip():
            raise InvalidInputError("Missing language.")

        full_text = join_segments(list(transcript))
        _logger.info(
            "Summarizing %d segments (%d characters) in %s, length=%s",
            len(transcript),
            len(full_text),
            language,
            length,
        )

        with timer("Summary generation"):
            summary = await generate_summary(
                self.generator, full_text, language, length, self.policy
            )

        with timer("Concept map generation"):
            concept_map = await derive_concept_map(
                self.generator, summary, self.policy
            )

        return SummaryResult(summary=summary, concept_map=concept_map)

    async def detect_language(self, text: str) -> str:
        """Return the ISO code of the language text is written in."""
        return await detect_language(self.generator, text, self.policy)
