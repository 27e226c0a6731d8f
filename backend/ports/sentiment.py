"""SentimentClassifierPort — abstract interface for transcript sentiment models."""

from abc import ABC, abstractmethod

from domain.models import SentimentLabel


class SentimentClassifierPort(ABC):
    @abstractmethod
    async def load(self) -> None:
        """Load the classifier. Raises ModelUnavailableError on failure."""

    @abstractmethod
    async def classify(self, text: str) -> SentimentLabel:
        """Return the top sentiment label for the whole transcript."""

    @abstractmethod
    def is_loaded(self) -> bool:
        """Whether the classifier is loaded and ready for inference."""

    @abstractmethod
    def model_name(self) -> str:
        """Return the model identifier for status responses."""
