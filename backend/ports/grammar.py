"""GrammarClassifierPort — abstract interface for sentence acceptability models."""

from abc import ABC, abstractmethod

from domain.models import AcceptabilityVerdict


class GrammarClassifierPort(ABC):
    @abstractmethod
    async def load(self) -> None:
        """Load the classifier. Raises ModelUnavailableError on failure."""

    @abstractmethod
    async def classify(self, sentence: str) -> AcceptabilityVerdict:
        """Judge one sentence. Raises ModelUnavailableError or ModelResponseError."""

    @abstractmethod
    def is_loaded(self) -> bool:
        """Whether the classifier is loaded and ready for inference."""

    @abstractmethod
    def model_name(self) -> str:
        """Return the model identifier for status responses."""
