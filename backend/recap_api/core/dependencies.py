from fastapi import Request

from recap.components.translator.translator import DeepLTranslator
from recap.components.video_info.video_info import YouTubeMetadataClient
from recap.pipeline import SummarizationPipeline


def get_pipeline(request: Request) -> SummarizationPipeline:
    return request.app.state.pipeline


def get_translator(request: Request) -> DeepLTranslator:
    return request.app.state.translator


def get_metadata_client(request: Request) -> YouTubeMetadataClient:
    return request.app.state.metadata_client
