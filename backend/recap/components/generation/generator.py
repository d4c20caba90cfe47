import logging
from typing import Protocol

from openai import OpenAIError
from pydantic_ai import Agent
from pydantic_ai.exceptions import AgentRunError, UnexpectedModelBehavior
from pydantic_ai.models import Model, ModelSettings

from recap.errors import EmptyGenerationError, UpstreamError

_logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    """A text-completion capability driven by a system and a user prompt."""

    async def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        max_output_tokens: int,
        temperature: float,
    ) -> str: ...


class AgentTextGenerator:
    """TextGenerator backed by a pydantic-ai agent with plain text output."""

    def __init__(self, model: Model):
        self._model = model

    def _build_agent(
        self, system_prompt: str, max_output_tokens: int, temperature: float
    ) -> Agent:
        model_settings: ModelSettings = {
            "temperature": temperature,
            "max_tokens": max_output_tokens,
        }
        return Agent(
            model=self._model,
            output_type=str,
            model_settings=model_settings,
            system_prompt=system_prompt,
            retries=0,
        )

    async def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        max_output_tokens: int,
        temperature: float,
    ) -> str:
        agent = self._build_agent(system_prompt, max_output_tokens, temperature)
        try:
            result = await agent.run(user_prompt)
        except UnexpectedModelBehavior as exc:
            _logger.error("Generation returned no usable output: %s", exc)
            raise EmptyGenerationError(str(exc)) from exc
        except (AgentRunError, OpenAIError) as exc:
            _logger.error("Generation request failed: %s", exc)
            raise UpstreamError(str(exc)) from exc

        text = result.output
        if not text or not text.strip():
            raise EmptyGenerationError("The model returned an empty completion.")
        return text
