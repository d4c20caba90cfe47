import logging

import requests

from recap.errors import InvalidInputError, UpstreamError

_logger = logging.getLogger(__name__)

DEEPL_FREE_API_URL = "https://api-free.deepl.com/v2/translate"
DEFAULT_LANGUAGE_CODE = "EN"

LANGUAGE_CODES: dict[str, str] = {
    "english": "EN",
    "italian": "IT",
    "spanish": "ES",
    "french": "FR",
    "german": "DE",
    "portuguese": "PT",
}


def resolve_language_code(target_language: str) -> str:
    """Map a language name (or one of its codes) to a DeepL target code.

    Unknown names resolve to English.
    """
    normalized = (target_language or "").strip().lower()
    if normalized in LANGUAGE_CODES:
        return LANGUAGE_CODES[normalized]
    if normalized.upper() in LANGUAGE_CODES.values():
        return normalized.upper()
    return DEFAULT_LANGUAGE_CODE


class DeepLTranslator:
    """Thin client for the DeepL translate endpoint."""

    def __init__(
        self,
        api_key: str,
        *,
        api_url: str = DEEPL_FREE_API_URL,
        timeout: float = 30.0,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout

    def translate(self, text: str, target_language: str) -> str:
        """Translate text into target_language and return the first translation."""
        if not text or not target_language:
            raise InvalidInputError("Missing text or targetLanguage.")

        target_code = resolve_language_code(target_language)
        try:
            response = requests.post(
                self.api_url,
                json={"text": [text], "target_lang": target_code},
                headers={
                    "Authorization": f"DeepL-Auth-Key {self.api_key}",
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            _logger.error("DeepL request failed: %s", exc)
            raise UpstreamError(f"Translation request failed: {exc}") from exc

        try:
            return data["translations"][0]["text"]
        except (KeyError, IndexError, TypeError) as exc:
            raise UpstreamError("Unexpected response from translation API") from exc
