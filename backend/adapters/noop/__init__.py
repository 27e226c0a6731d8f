"""No-op model adapters: every call fails fast with ModelUnavailableError."""

from .models import NoOpEmbedding, NoOpGrammarClassifier, NoOpSentimentClassifier

__all__ = ["NoOpEmbedding", "NoOpGrammarClassifier", "NoOpSentimentClassifier"]
