"""HuggingFaceEmbedding — mean-pooled sentence embeddings via transformers."""

import logging
from typing import Optional

import numpy as np

from adapters.huggingface.pipeline_loader import LazyPipeline, PipelineFactory
from exceptions import ModelResponseError, SpeechAnalysisError
from ports.embedding import TextEmbeddingPort

logger = logging.getLogger(__name__)

DEFAULT_EMBEDDING_MODEL = "sentence-transformers/all-MiniLM-L6-v2"


class HuggingFaceEmbedding(TextEmbeddingPort):
    def __init__(
        self,
        model_id: str = DEFAULT_EMBEDDING_MODEL,
        device: str = "cpu",
        factory: Optional[PipelineFactory] = None,
    ):
        self._pipeline = LazyPipeline("embedding", "feature-extraction", model_id, device, factory)

    async def load(self) -> None:
        await self._pipeline.get()

    async def embed(self, text: str) -> list[float]:
        try:
            output = await self._pipeline(text, truncation=True)
        except SpeechAnalysisError:
            raise
        except Exception as e:
            raise ModelResponseError("embedding", str(e), e) from e

        try:
            vectors = np.asarray(output, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ModelResponseError("embedding", "output is not numeric", e) from e

        # feature-extraction yields (batch, tokens, dim); pool over tokens
        if vectors.ndim == 3:
            vectors = vectors[0]
        if vectors.ndim == 2:
            vectors = vectors.mean(axis=0)
        if vectors.ndim != 1 or vectors.size == 0:
            raise ModelResponseError("embedding", f"unexpected output shape {vectors.shape}")
        return vectors.tolist()

    def is_loaded(self) -> bool:
        return self._pipeline.is_loaded()

    def model_name(self) -> str:
        return self._pipeline.model_id
