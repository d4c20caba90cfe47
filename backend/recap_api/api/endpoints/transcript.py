import asyncio
import logging

from fastapi import APIRouter, Depends

from recap.components.transcriptor.transcriptor import fetch_transcript
from recap_api.core.config import Settings, get_settings
from recap_api.schemas.responses import ErrorResponse, TranscriptResponse

router = APIRouter(tags=["transcript"])
_logger = logging.getLogger(__name__)


@router.get(
    "/transcript/{video_id}",
    response_model=TranscriptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid video ID"},
        404: {"model": ErrorResponse, "description": "No transcript available"},
        500: {"model": ErrorResponse, "description": "YouTube request failed"},
    },
)
async def get_transcript(
    video_id: str,
    settings: Settings = Depends(get_settings),
) -> TranscriptResponse:
    """Return the timed caption segments of a YouTube video."""
    proxy_password = settings.webshare_proxy_password
    transcript_data = await asyncio.to_thread(
        fetch_transcript,
        video_id,
        languages=settings.transcript_languages,
        proxy_username=settings.webshare_proxy_username,
        proxy_password=proxy_password.get_secret_value() if proxy_password else None,
        proxy_location=settings.webshare_proxy_location,
    )
    _logger.info(
        "Transcript for %s: %d segments",
        transcript_data.video_id,
        len(transcript_data.segments),
    )
    return TranscriptResponse(transcript=transcript_data.segments)
