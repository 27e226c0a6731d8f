"""Hugging Face transformers adapters for the optional scoring models."""

from .embedding import HuggingFaceEmbedding
from .grammar import HuggingFaceGrammarClassifier
from .sentiment import HuggingFaceSentimentClassifier

__all__ = ["HuggingFaceEmbedding", "HuggingFaceGrammarClassifier", "HuggingFaceSentimentClassifier"]
