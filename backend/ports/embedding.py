"""TextEmbeddingPort — abstract interface for sentence embedding models."""

from abc import ABC, abstractmethod


class TextEmbeddingPort(ABC):
    @abstractmethod
    async def load(self) -> None:
        """Load the embedding model. Raises ModelUnavailableError on failure."""

    @abstractmethod
    async def embed(self, text: str) -> list[float]:
        """Return a fixed-size embedding vector for the text."""

    @abstractmethod
    def is_loaded(self) -> bool:
        """Whether the model is loaded and ready for inference."""

    @abstractmethod
    def model_name(self) -> str:
        """Return the model identifier for status responses."""
