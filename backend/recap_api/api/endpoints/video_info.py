import asyncio

from fastapi import APIRouter, Depends

from recap.components.video_info.video_info import YouTubeMetadataClient
from recap_api.core.dependencies import get_metadata_client
from recap_api.schemas.responses import ErrorResponse, VideoInfoResponse

router = APIRouter(tags=["video-info"])


@router.get(
    "/video-info/{video_id}",
    response_model=VideoInfoResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Video or channel not found"},
        500: {"model": ErrorResponse, "description": "YouTube Data API failed"},
    },
)
async def get_video_info(
    video_id: str,
    client: YouTubeMetadataClient = Depends(get_metadata_client),
) -> VideoInfoResponse:
    """Return title, thumbnails, duration and counts of a video and its channel."""
    video_info, channel_info = await asyncio.to_thread(
        client.get_video_info, video_id
    )
    return VideoInfoResponse(video_info=video_info, channel_info=channel_info)
