from unittest.mock import MagicMock, patch

import pytest
import requests

from recap.components.translator.translator import (
    DeepLTranslator,
    resolve_language_code,
)
from recap.errors import InvalidInputError, UpstreamError


@pytest.mark.parametrize(
    "name, code",
    [
        ("english", "EN"),
        ("italian", "IT"),
        ("Spanish", "ES"),
        ("french ", "FR"),
        ("german", "DE"),
        ("portuguese", "PT"),
        ("it", "IT"),
        ("klingon", "EN"),
        ("", "EN"),
    ],
)
def test_resolve_language_code(name, code):
    assert resolve_language_code(name) == code


def _response(payload):
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


@pytest.fixture
def translator():
    return DeepLTranslator("secret", api_url="https://deepl.test/v2/translate", timeout=5)


def test_translate_posts_to_deepl(translator):
    with patch(
        "recap.components.translator.translator.requests.post",
        return_value=_response({"translations": [{"text": "Ciao mondo"}]}),
    ) as post:
        assert translator.translate("Hello world", "italian") == "Ciao mondo"

    post.assert_called_once()
    args, kwargs = post.call_args
    assert args[0] == "https://deepl.test/v2/translate"
    assert kwargs["json"] == {"text": ["Hello world"], "target_lang": "IT"}
    assert kwargs["headers"]["Authorization"] == "DeepL-Auth-Key secret"
    assert kwargs["timeout"] == 5


def test_unknown_target_defaults_to_english(translator):
    with patch(
        "recap.components.translator.translator.requests.post",
        return_value=_response({"translations": [{"text": "Hello"}]}),
    ) as post:
        translator.translate("Ciao", "klingon")

    assert post.call_args.kwargs["json"]["target_lang"] == "EN"


def test_transport_errors_become_upstream_errors(translator):
    with patch(
        "recap.components.translator.translator.requests.post",
        side_effect=requests.ConnectionError("connection refused"),
    ):
        with pytest.raises(UpstreamError):
            translator.translate("Hello", "french")


def test_http_errors_become_upstream_errors(translator):
    response = _response({})
    response.raise_for_status.side_effect = requests.HTTPError("403 Forbidden")
    with patch(
        "recap.components.translator.translator.requests.post", return_value=response
    ):
        with pytest.raises(UpstreamError, match="403"):
            translator.translate("Hello", "french")


def test_unexpected_body_becomes_upstream_error(translator):
    with patch(
        "recap.components.translator.translator.requests.post",
        return_value=_response({"translations": []}),
    ):
        with pytest.raises(UpstreamError):
            translator.translate("Hello", "german")


def test_missing_text_is_rejected_without_calling_deepl(translator):
    with patch("recap.components.translator.translator.requests.post") as post:
        with pytest.raises(InvalidInputError):
            translator.translate("", "german")
    post.assert_not_called()
