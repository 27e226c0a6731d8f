"""No-op adapters used when ENABLE_MODELS is off or in tests."""

from domain.models import AcceptabilityVerdict, SentimentLabel
from exceptions import ModelUnavailableError
from ports.embedding import TextEmbeddingPort
from ports.grammar import GrammarClassifierPort
from ports.sentiment import SentimentClassifierPort


class NoOpGrammarClassifier(GrammarClassifierPort):
    async def load(self) -> None:
        raise ModelUnavailableError("grammar")

    async def classify(self, sentence: str) -> AcceptabilityVerdict:
        raise ModelUnavailableError("grammar")

    def is_loaded(self) -> bool:
        return False

    def model_name(self) -> str:
        return "none"


class NoOpSentimentClassifier(SentimentClassifierPort):
    async def load(self) -> None:
        raise ModelUnavailableError("sentiment")

    async def classify(self, text: str) -> SentimentLabel:
        raise ModelUnavailableError("sentiment")

    def is_loaded(self) -> bool:
        return False

    def model_name(self) -> str:
        return "none"


class NoOpEmbedding(TextEmbeddingPort):
    async def load(self) -> None:
        raise ModelUnavailableError("embedding")

    async def embed(self, text: str) -> list[float]:
        raise ModelUnavailableError("embedding")

    def is_loaded(self) -> bool:
        return False

    def model_name(self) -> str:
        return "none"
