"""HuggingFaceSentimentClassifier — three-way sentiment via transformers."""

import logging
from typing import Optional

from adapters.huggingface.pipeline_loader import LazyPipeline, PipelineFactory, top_prediction
from domain.models import SentimentLabel
from exceptions import ModelResponseError, SpeechAnalysisError
from ports.sentiment import SentimentClassifierPort

logger = logging.getLogger(__name__)

DEFAULT_SENTIMENT_MODEL = "cardiffnlp/twitter-roberta-base-sentiment-latest"

LABEL_KINDS = {
    "label_0": "negative",
    "label_1": "neutral",
    "label_2": "positive",
    "negative": "negative",
    "neutral": "neutral",
    "positive": "positive",
}


class HuggingFaceSentimentClassifier(SentimentClassifierPort):
    def __init__(
        self,
        model_id: str = DEFAULT_SENTIMENT_MODEL,
        device: str = "cpu",
        factory: Optional[PipelineFactory] = None,
    ):
        self._pipeline = LazyPipeline("sentiment", "sentiment-analysis", model_id, device, factory)

    async def load(self) -> None:
        await self._pipeline.get()

    async def classify(self, text: str) -> SentimentLabel:
        try:
            output = await self._pipeline(text, truncation=True)
        except SpeechAnalysisError:
            raise
        except Exception as e:
            raise ModelResponseError("sentiment", str(e), e) from e

        label, score = top_prediction(output, "sentiment")
        kind = LABEL_KINDS.get(label.lower())
        if kind is None:
            raise ModelResponseError("sentiment", f"unknown label {label!r}")
        logger.debug(f"Sentiment: {label} -> {kind} ({score:.2f})")
        return SentimentLabel(kind=kind, score=score)

    def is_loaded(self) -> bool:
        return self._pipeline.is_loaded()

    def model_name(self) -> str:
        return self._pipeline.model_id
