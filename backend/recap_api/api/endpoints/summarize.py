import logging

from fastapi import APIRouter, Depends

from recap.pipeline import SummarizationPipeline
from recap_api.core.dependencies import get_pipeline
from recap_api.schemas.requests import SummarizeRequest
from recap_api.schemas.responses import ErrorResponse, SummarizeResponse

router = APIRouter(tags=["summarize"])
_logger = logging.getLogger(__name__)


@router.post(
    "/summarize",
    response_model=SummarizeResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing transcript or language"},
        500: {"model": ErrorResponse, "description": "Generation failed"},
    },
)
async def summarize(
    request: SummarizeRequest,
    pipeline: SummarizationPipeline = Depends(get_pipeline),
) -> SummarizeResponse:
    """
    Summarize a transcript and derive a concept map from the summary.

    An unparseable concept map is replaced by a placeholder; the request still succeeds.
    """
    result = await pipeline.summarize(
        request.transcript, request.language, request.length
    )
    _logger.info("Summary generated (%d characters)", len(result.summary))
    return SummarizeResponse(summary=result.summary, concept_map=result.concept_map)
