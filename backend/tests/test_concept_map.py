import pytest

from recap.components.concept_map.concept_map import (
    FALLBACK_CONCEPT_MAP,
    build_concept_map_system_prompt,
    derive_concept_map,
    fallback_concept_map,
    parse_concept_map,
)
from recap.components.summarizer.schemas import SummaryPolicy
from recap.errors import (
    EmptyGenerationError,
    MalformedStructuredOutputError,
    UpstreamError,
)


def test_parse_valid_concept_map():
    concept_map = parse_concept_map(
        ' {"nodes": [{"id": "1", "label": "A"}], "edges": []}\n'
    )
    assert concept_map == {"nodes": [{"id": "1", "label": "A"}], "edges": []}


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('{"topics": ["a", "b"]}', {"topics": ["a", "b"]}),
        (
            '{"nodes": [{"id": "1"}], "connections": []}',
            {"nodes": [{"id": "1"}], "connections": []},
        ),
        ("[1, 2, 3]", [1, 2, 3]),
    ],
)
def test_parse_passes_any_json_shape_through(raw, expected):
    assert parse_concept_map(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        '{"nodes": [{"id": "1", "label": "A"}',
        '{"nodes": [], "edges": []} Hope this helps!',
        "Here is your concept map:",
        "",
    ],
)
def test_parse_rejects_malformed_json(raw):
    with pytest.raises(MalformedStructuredOutputError):
        parse_concept_map(raw)


def test_fallback_has_root_and_two_subtopics():
    concept_map = fallback_concept_map()
    assert [node["id"] for node in concept_map["nodes"]] == ["root", "1", "2"]
    assert concept_map["edges"] == [
        {"source": "root", "target": "1"},
        {"source": "root", "target": "2"},
    ]


def test_fallback_returns_independent_copies():
    concept_map = fallback_concept_map()
    concept_map["nodes"].clear()
    assert len(FALLBACK_CONCEPT_MAP["nodes"]) == 3
    assert len(fallback_concept_map()["nodes"]) == 3


@pytest.mark.asyncio
async def test_derive_uses_summary_as_input(make_generator, concept_map_json):
    generator = make_generator(concept_map_json)
    concept_map = await derive_concept_map(generator, "# Summary", SummaryPolicy())

    assert concept_map["nodes"][0]["label"] == "Greeting"
    call = generator.calls[0]
    assert call.user_prompt == "# Summary"
    assert call.max_output_tokens == 1200
    assert call.temperature == 0.3
    assert '"nodes"' in call.system_prompt and '"edges"' in call.system_prompt


@pytest.mark.asyncio
async def test_derive_falls_back_on_malformed_json(make_generator):
    generator = make_generator('{"nodes": [')
    concept_map = await derive_concept_map(generator, "summary", SummaryPolicy())
    assert concept_map == FALLBACK_CONCEPT_MAP


@pytest.mark.asyncio
async def test_derive_falls_back_on_empty_output(make_generator):
    generator = make_generator(EmptyGenerationError("nothing"))
    concept_map = await derive_concept_map(generator, "summary", SummaryPolicy())
    assert concept_map == FALLBACK_CONCEPT_MAP


@pytest.mark.asyncio
async def test_derive_propagates_upstream_errors(make_generator):
    generator = make_generator(UpstreamError("503 Service Unavailable"))
    with pytest.raises(UpstreamError):
        await derive_concept_map(generator, "summary", SummaryPolicy())


def test_prompt_without_emojis():
    assert "emojis" not in build_concept_map_system_prompt(include_emojis=False)
    assert "emojis" in build_concept_map_system_prompt(include_emojis=True)
