from fastapi import APIRouter, Depends

from recap.pipeline import SummarizationPipeline
from recap_api.core.dependencies import get_pipeline
from recap_api.schemas.requests import DetectLanguageRequest
from recap_api.schemas.responses import ErrorResponse, LanguageResponse

router = APIRouter(tags=["language"])


@router.post(
    "/detect-language",
    response_model=LanguageResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing text"},
        500: {"model": ErrorResponse, "description": "Generation failed"},
    },
)
async def detect_language(
    request: DetectLanguageRequest,
    pipeline: SummarizationPipeline = Depends(get_pipeline),
) -> LanguageResponse:
    """Detect the language of a text and return its ISO code."""
    language = await pipeline.detect_language(request.text)
    return LanguageResponse(language=language)
