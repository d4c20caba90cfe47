import pytest
from pydantic import ValidationError

from recap.components.summarizer.schemas import SummaryLength
from recap_api.core.config import Settings

KEYS = {
    "openai_api_key": "sk-test",
    "deepl_api_key": "deepl-test",
    "youtube_api_key": "yt-test",
}


@pytest.fixture
def no_key_env(monkeypatch):
    for name in ("OPENAI_API_KEY", "DEEPL_API_KEY", "YOUTUBE_API_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.usefixtures("no_key_env")
@pytest.mark.parametrize("missing", sorted(KEYS))
def test_missing_api_key_is_fatal(missing):
    values = {name: value for name, value in KEYS.items() if name != missing}
    with pytest.raises(ValidationError) as exc_info:
        Settings(_env_file=None, **values)
    assert missing in str(exc_info.value)


@pytest.mark.usefixtures("no_key_env")
def test_blank_api_key_is_fatal():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{**KEYS, "deepl_api_key": "   "})


@pytest.mark.usefixtures("no_key_env")
def test_defaults():
    settings = Settings(_env_file=None, **KEYS)
    assert settings.api_prefix == "/api"
    assert settings.port == 3001
    assert settings.cors_origins == ["*"]
    assert settings.openai_api_key.get_secret_value() == "sk-test"


@pytest.mark.usefixtures("no_key_env")
def test_summary_policy_profiles():
    standard = Settings(_env_file=None, **KEYS).summary_policy()
    extended = Settings(
        _env_file=None, summary_length_profile="extended", max_transcript_chars=4000, **KEYS
    ).summary_policy()

    assert standard.token_budgets[SummaryLength.SHORT] == 300
    assert standard.max_transcript_chars == 8000
    assert extended.token_budgets[SummaryLength.SHORT] == 500
    assert extended.token_budgets[SummaryLength.LONG] == 1200
    assert extended.max_transcript_chars == 4000


def test_keys_are_read_from_the_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-from-env")
    monkeypatch.setenv("DEEPL_API_KEY", "deepl-from-env")
    monkeypatch.setenv("YOUTUBE_API_KEY", "yt-from-env")

    settings = Settings(_env_file=None)

    assert settings.deepl_api_key.get_secret_value() == "deepl-from-env"
