from enum import Enum

from openai import AsyncOpenAI
from pydantic import BaseModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider


class ModelConfig(BaseModel):
    """Configuration for a language model."""

    provider: str
    model_name: str


class ModelChoice(Enum):
    """Available language models with their configurations."""

    OPENAI_GPT35_TURBO = ModelConfig(
        provider="openai",
        model_name="gpt-3.5-turbo",
    )
    OPENAI_GPT4O_MINI = ModelConfig(
        provider="openai",
        model_name="gpt-4o-mini",
    )
    OPENAI_GPT4O = ModelConfig(
        provider="openai",
        model_name="gpt-4o",
    )


def get_model(
    choice: ModelChoice, *, api_key: str, timeout: float = 30.0
) -> OpenAIChatModel:
    """
    Build a chat model for a ModelChoice.

    The underlying client never retries on its own: a failed call fails the request.
    """
    config = choice.value
    if config.provider != "openai":
        raise ValueError(f"Unsupported model provider: {config.provider}")

    client = AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0)
    provider = OpenAIProvider(openai_client=client)
    return OpenAIChatModel(model_name=config.model_name, provider=provider)
