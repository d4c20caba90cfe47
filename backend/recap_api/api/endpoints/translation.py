import asyncio

from fastapi import APIRouter, Depends

from recap.components.translator.translator import DeepLTranslator
from recap_api.core.dependencies import get_translator
from recap_api.schemas.requests import TranslateRequest
from recap_api.schemas.responses import ErrorResponse, TranslationResponse

router = APIRouter(tags=["translation"])


@router.post(
    "/translate",
    response_model=TranslationResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing text or targetLanguage"},
        500: {"model": ErrorResponse, "description": "Translation API failed"},
    },
)
async def translate(
    request: TranslateRequest,
    translator: DeepLTranslator = Depends(get_translator),
) -> TranslationResponse:
    """Translate a text with DeepL."""
    translation = await asyncio.to_thread(
        translator.translate, request.text, request.target_language
    )
    return TranslationResponse(translation=translation)
