from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from recap.components.summarizer.schemas import (
    EXTENDED_TOKEN_BUDGETS,
    STANDARD_TOKEN_BUDGETS,
    SummaryPolicy,
)
from recap.components.translator.translator import DEEPL_FREE_API_URL
from recap.components.video_info.video_info import YOUTUBE_DATA_API_URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Configuration
    api_prefix: str = "/api"
    project_name: str = "recap API"
    version: str = "0.1.0"
    debug: bool = False

    # CORS Configuration
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allow_methods: list[str] = ["GET", "POST"]
    cors_allow_headers: list[str] = ["Content-Type", "Authorization"]

    # Upstream credentials (required)
    openai_api_key: SecretStr
    deepl_api_key: SecretStr
    youtube_api_key: SecretStr

    # Upstream endpoints
    upstream_timeout_seconds: float = Field(default=30.0, gt=0)
    deepl_api_url: str = DEEPL_FREE_API_URL
    youtube_api_url: str = YOUTUBE_DATA_API_URL
    transcript_languages: list[str] = ["en", "en-US", "it", "es", "fr", "de", "pt"]
    webshare_proxy_username: str | None = None
    webshare_proxy_password: SecretStr | None = None
    webshare_proxy_location: str = "es"

    # Summarization Pipeline Configuration
    max_transcript_chars: int = Field(default=8000, gt=0)
    summary_length_profile: Literal["standard", "extended"] = "standard"
    summary_temperature: float = Field(default=0.5, ge=0.0, le=2.0)
    include_emojis: bool = True

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: Literal["debug", "info", "warning", "error", "critical"] = "info"

    @field_validator("openai_api_key", "deepl_api_key", "youtube_api_key")
    @classmethod
    def _reject_blank_keys(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("API key must not be blank")
        return SecretStr(value.get_secret_value().strip())

    def summary_policy(self) -> SummaryPolicy:
        """Build the pipeline policy from the configured knobs."""
        budgets = (
            EXTENDED_TOKEN_BUDGETS
            if self.summary_length_profile == "extended"
            else STANDARD_TOKEN_BUDGETS
        )
        return SummaryPolicy(
            max_transcript_chars=self.max_transcript_chars,
            token_budgets=dict(budgets),
            summary_temperature=self.summary_temperature,
            include_emojis=self.include_emojis,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()  # type: ignore[call-arg]
