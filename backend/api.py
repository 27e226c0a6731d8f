"""FastAPI application for Speech Coach analysis."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from config import create_model_adapters, get_config
from mappers import result_to_dto
from models import AnalysisResponse, AnalyzeSpeechRequest, HealthResponse, ModelList, ModelStatus
from ports.capabilities import ModelCapabilities
from use_cases.analyze_speech import AnalyzeRequest, AnalyzeSpeechUseCase

logger = logging.getLogger(__name__)


def create_app(models: Optional[ModelCapabilities] = None, warm_up: bool = True) -> FastAPI:
    config = get_config()
    if models is None:
        models = create_model_adapters(config)
    use_case = AnalyzeSpeechUseCase(models, max_grammar_sentences=config.max_grammar_sentences)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if warm_up:
            status = await models.warm_up()
            logger.info(f"Model warm-up complete: {status}")
        yield

    app = FastAPI(title="Speech Coach Analysis", lifespan=lifespan)
    app.state.models = models

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(models=models.status())

    @app.get("/v1/models", response_model=ModelList)
    async def list_models():
        return ModelList(data={name: ModelStatus(**info) for name, info in models.describe().items()})

    @app.post("/v1/speech/analyze", response_model=AnalysisResponse)
    async def analyze_speech(body: AnalyzeSpeechRequest):
        result = await use_case.execute(AnalyzeRequest(
            transcript=body.transcript,
            topic=body.topic,
            mode=body.mode,
        ))
        return result_to_dto(result)

    return app
