import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from recap.components.generation.generator import AgentTextGenerator
from recap.components.translator.translator import DeepLTranslator
from recap.components.video_info.video_info import YouTubeMetadataClient
from recap.models.config import SUMMARIZATION_MODEL
from recap.models.llm import get_model
from recap.pipeline import SummarizationPipeline
from recap_api.api.router import api_router
from recap_api.core.config import Settings, get_settings
from recap_api.core.errors import register_exception_handlers

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    force=True,
)

_logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    _logger.info(f"✅ Starting {settings.project_name} v{settings.version}")
    yield
    _logger.info(f"Shutting down {settings.project_name}")


def build_pipeline(settings: Settings) -> SummarizationPipeline:
    """Wire the generation model and policy described by the settings."""
    model = get_model(
        SUMMARIZATION_MODEL,
        api_key=settings.openai_api_key.get_secret_value(),
        timeout=settings.upstream_timeout_seconds,
    )
    return SummarizationPipeline(
        AgentTextGenerator(model), policy=settings.summary_policy()
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Settings are validated here; a missing API key stops startup.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        description="Summarize YouTube videos into markdown and a concept map",
        docs_url="/docs",
        redoc_url=None,  # Disable ReDoc
        openapi_url=f"{settings.api_prefix}/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.pipeline = build_pipeline(settings)
    app.state.translator = DeepLTranslator(
        settings.deepl_api_key.get_secret_value(),
        api_url=settings.deepl_api_url,
        timeout=settings.upstream_timeout_seconds,
    )
    app.state.metadata_client = YouTubeMetadataClient(
        settings.youtube_api_key.get_secret_value(),
        base_url=settings.youtube_api_url,
        timeout=settings.upstream_timeout_seconds,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Include API router
    app.include_router(api_router, prefix=settings.api_prefix)

    # Root endpoint
    @app.get("/")
    async def root():
        return JSONResponse(
            {
                "message": f"Welcome to {settings.project_name}",
                "version": settings.version,
                "docs": "/docs",
                "api": settings.api_prefix,
                "health": f"{settings.api_prefix}/health",
            }
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "recap_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        reload=settings.debug,
    )
