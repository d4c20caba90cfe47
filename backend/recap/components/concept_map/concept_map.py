import copy
import json
import logging

from recap.components.generation.generator import TextGenerator
from recap.components.summarizer.schemas import ConceptMap, SummaryPolicy
from recap.errors import EmptyGenerationError, MalformedStructuredOutputError

_logger = logging.getLogger(__name__)

FALLBACK_CONCEPT_MAP: dict = {
    "nodes": [
        {"id": "root", "label": "Main Topic"},
        {"id": "1", "label": "Subtopic 1"},
        {"id": "2", "label": "Subtopic 2"},
    ],
    "edges": [
        {"source": "root", "target": "1"},
        {"source": "root", "target": "2"},
    ],
}


def build_concept_map_system_prompt(*, include_emojis: bool) -> str:
    """Strict-JSON instruction with the fixed nodes/edges schema."""
    emoji_line = "Include emojis in labels if relevant.\n" if include_emojis else ""
    return (
        "You are a concept map generator. Based on the summary, produce a JSON "
        'flowchart with "nodes" and "edges".\n'
        'Each node has an "id" and a "label".\n'
        f"{emoji_line}"
        "Return ONLY valid JSON, with no prose or code fences, of the form:\n"
        "{\n"
        '  "nodes": [\n'
        '    { "id": "1", "label": "Main Topic" },\n'
        "    ...\n"
        "  ],\n"
        '  "edges": [\n'
        '    { "source": "1", "target": "2" },\n'
        "    ...\n"
        "  ]\n"
        "}"
    )


def fallback_concept_map() -> ConceptMap:
    """Placeholder map: one root node and two subtopics hanging off it."""
    return copy.deepcopy(FALLBACK_CONCEPT_MAP)


def parse_concept_map(text: str) -> ConceptMap:
    """
    Parse model output as JSON.

    Only the syntax is checked; any JSON value is returned as-is.

    Raises:
        MalformedStructuredOutputError: text is not valid JSON.
    """
    try:
        return json.loads(text.strip())
    except (json.JSONDecodeError, TypeError, AttributeError) as exc:
        raise MalformedStructuredOutputError(
            f"Concept map is not valid JSON: {exc}"
        ) from exc


async def derive_concept_map(
    generator: TextGenerator, summary: str, policy: SummaryPolicy
) -> ConceptMap:
    """Ask the model for a concept map of the summary, falling back on bad JSON."""
    try:
        raw = await generator.generate(
            build_concept_map_system_prompt(include_emojis=policy.include_emojis),
            summary,
            max_output_tokens=policy.concept_map_max_tokens,
            temperature=policy.concept_map_temperature,
        )
        return parse_concept_map(raw)
    except (MalformedStructuredOutputError, EmptyGenerationError) as exc:
        _logger.warning("Error parsing concept map, fallback used: %s", exc)
        return fallback_concept_map()
