"""ModelCapabilities — the set of optional model ports handed to the use case."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

from exceptions import SpeechAnalysisError
from ports.embedding import TextEmbeddingPort
from ports.grammar import GrammarClassifierPort
from ports.sentiment import SentimentClassifierPort

logger = logging.getLogger(__name__)


@dataclass
class ModelCapabilities:
    grammar: GrammarClassifierPort
    sentiment: SentimentClassifierPort
    embedding: TextEmbeddingPort

    @classmethod
    def absent(cls) -> "ModelCapabilities":
        """All capabilities missing; every scorer takes its rule-based path."""
        from adapters.noop import NoOpEmbedding, NoOpGrammarClassifier, NoOpSentimentClassifier
        return cls(
            grammar=NoOpGrammarClassifier(),
            sentiment=NoOpSentimentClassifier(),
            embedding=NoOpEmbedding(),
        )

    def _ports(self) -> dict[str, Any]:
        return {"grammar": self.grammar, "sentiment": self.sentiment, "embedding": self.embedding}

    async def warm_up(self) -> dict[str, bool]:
        """Load every model concurrently. Returns capability -> loaded."""
        ports = self._ports()
        results = await asyncio.gather(
            *(port.load() for port in ports.values()), return_exceptions=True
        )
        for name, result in zip(ports, results):
            if isinstance(result, SpeechAnalysisError):
                logger.warning(f"{name} model not available, using rule-based scoring: {result}")
            elif isinstance(result, BaseException):
                raise result
        return self.status()

    def status(self) -> dict[str, bool]:
        return {name: port.is_loaded() for name, port in self._ports().items()}

    def describe(self) -> dict[str, dict[str, Any]]:
        return {
            name: {"model": port.model_name(), "loaded": port.is_loaded()}
            for name, port in self._ports().items()
        }
