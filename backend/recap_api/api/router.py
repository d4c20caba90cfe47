from fastapi import APIRouter

from recap_api.api.endpoints import (
    health,
    language,
    summarize,
    transcript,
    translation,
    video_info,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="", tags=["health"])
api_router.include_router(transcript.router, prefix="", tags=["transcript"])
api_router.include_router(video_info.router, prefix="", tags=["video-info"])
api_router.include_router(language.router, prefix="", tags=["language"])
api_router.include_router(translation.router, prefix="", tags=["translation"])
api_router.include_router(summarize.router, prefix="", tags=["summarize"])
