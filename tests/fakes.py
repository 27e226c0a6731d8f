"""In-memory model ports for tests."""

from typing import Callable, List, Optional

from domain.models import AcceptabilityVerdict, SentimentLabel
from exceptions import ModelResponseError
from ports.capabilities import ModelCapabilities
from ports.embedding import TextEmbeddingPort
from ports.grammar import GrammarClassifierPort
from ports.sentiment import SentimentClassifierPort
from adapters.noop import NoOpEmbedding, NoOpGrammarClassifier, NoOpSentimentClassifier


class FakeGrammarClassifier(GrammarClassifierPort):
    def __init__(self, judge: Callable[[str], bool] = lambda s: True):
        self._judge = judge
        self.calls: List[str] = []

    async def load(self) -> None:
        pass

    async def classify(self, sentence: str) -> AcceptabilityVerdict:
        self.calls.append(sentence)
        return AcceptabilityVerdict(acceptable=self._judge(sentence), score=0.9)

    def is_loaded(self) -> bool:
        return True

    def model_name(self) -> str:
        return "fake-grammar"


class FailingGrammarClassifier(FakeGrammarClassifier):
    async def classify(self, sentence: str) -> AcceptabilityVerdict:
        self.calls.append(sentence)
        raise ModelResponseError("grammar", "boom")


class FakeSentimentClassifier(SentimentClassifierPort):
    def __init__(self, kind: str = "positive", score: float = 0.9):
        self.label = SentimentLabel(kind=kind, score=score)
        self.calls = 0

    async def load(self) -> None:
        pass

    async def classify(self, text: str) -> SentimentLabel:
        self.calls += 1
        return self.label

    def is_loaded(self) -> bool:
        return True

    def model_name(self) -> str:
        return "fake-sentiment"


class BrokenSentimentClassifier(FakeSentimentClassifier):
    async def classify(self, text: str) -> SentimentLabel:
        raise RuntimeError("model crashed")


class FakeEmbedding(TextEmbeddingPort):
    def __init__(self, vector: Optional[List[float]] = None):
        self.vector = vector or [0.5, 0.5, 0.5]

    async def load(self) -> None:
        pass

    async def embed(self, text: str) -> List[float]:
        return list(self.vector)

    def is_loaded(self) -> bool:
        return True

    def model_name(self) -> str:
        return "fake-embedding"


def capabilities(grammar=None, sentiment=None, embedding=None) -> ModelCapabilities:
    return ModelCapabilities(
        grammar=grammar or NoOpGrammarClassifier(),
        sentiment=sentiment or NoOpSentimentClassifier(),
        embedding=embedding or NoOpEmbedding(),
    )
