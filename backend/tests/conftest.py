import os
from dataclasses import dataclass
from typing import Callable, Sequence, Union

import pytest

# recap_api.main builds the app at import time and needs these keys
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")
os.environ.setdefault("DEEPL_API_KEY", "test-deepl-key")
os.environ.setdefault("YOUTUBE_API_KEY", "test-youtube-key")

from recap.components.transcriptor.schemas import TranscriptSegment  # noqa: E402


@dataclass
class GenerationCall:
    system_prompt: str
    user_prompt: str
    max_output_tokens: int
    temperature: float


class StubGenerator:
    """Replays canned replies (or raises canned errors) and records every call."""

    def __init__(self, replies: Sequence[Union[str, Exception]]):
        self.replies = list(replies)
        self.calls: list[GenerationCall] = []

    async def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        max_output_tokens: int,
        temperature: float,
    ) -> str:
        self.calls.append(
            GenerationCall(system_prompt, user_prompt, max_output_tokens, temperature)
        )
        if not self.replies:
            raise AssertionError("Unexpected generation call")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


VALID_CONCEPT_MAP = (
    '{"nodes": [{"id": "1", "label": "Greeting"}, {"id": "2", "label": "World"}],'
    ' "edges": [{"source": "1", "target": "2"}]}'
)


@pytest.fixture
def concept_map_json() -> str:
    return VALID_CONCEPT_MAP


@pytest.fixture
def make_generator() -> Callable[..., StubGenerator]:
    def _make(*replies: Union[str, Exception]) -> StubGenerator:
        return StubGenerator(replies)

    return _make


@pytest.fixture
def hello_transcript() -> list[TranscriptSegment]:
    return [
        TranscriptSegment(text="Hello", start=0.0, duration=1.0),
        TranscriptSegment(text="world", start=1.0, duration=1.0),
    ]
