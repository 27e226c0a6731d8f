"""Heuristic speech scorers."""

from .clarity import score_clarity
from .confidence import score_confidence
from .errors import detect_errors
from .feedback import generate_improvements, generate_strengths
from .fluency import score_fluency
from .grammar import score_grammar
from .topic import score_topic_relevance
from .vocabulary import score_vocabulary

__all__ = [
    "detect_errors",
    "generate_improvements",
    "generate_strengths",
    "score_clarity",
    "score_confidence",
    "score_fluency",
    "score_grammar",
    "score_topic_relevance",
    "score_vocabulary",
]
