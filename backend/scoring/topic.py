"""Topic relevance for prompted speeches.

Combines keyword coverage, a content-depth estimate that depends on the
speech mode, and (when an embedding model is available) the semantic
similarity between topic and transcript.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from domain.models import SpeechMode, Transcript
from ports.embedding import TextEmbeddingPort
from scoring.patterns import (
    ARGUMENT_PATTERN, NARRATIVE_PATTERN, OPINION_PATTERN, PERSONAL_PATTERN, count_matches,
)
from scoring.tiers import Tier, evaluate_tiers

logger = logging.getLogger(__name__)

STOP_WORDS = {
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "is", "are", "than", "vs", "versus",
}

KEYWORD_EXPANSIONS = {
    "winter": ["cold", "snow", "ice", "freezing"],
    "summer": ["hot", "warm", "heat", "sun", "vacation"],
    "better": ["prefer", "superior", "advantage", "benefit"],
}

DEFAULT_MODE_FACTOR = 0.5
FULL_CREDIT_WORDS = 100


@dataclass(frozen=True)
class TopicSignals:
    keyword_ratio: float
    content_depth: float
    semantic_score: float = 0.0


TOPIC_TIERS: list[Tier[TopicSignals]] = [
    Tier(
        "excellent",
        lambda s: s.keyword_ratio > 0.7 and s.content_depth > 0.8 and s.semantic_score > 0.7,
        lambda s: 9 + min(1, s.keyword_ratio + s.semantic_score),
    ),
    Tier(
        "good",
        lambda s: s.keyword_ratio > 0.5 and s.content_depth > 0.6,
        lambda s: 7 + s.keyword_ratio * 2,
    ),
    Tier(
        "moderate",
        lambda s: s.keyword_ratio > 0.3 and s.content_depth > 0.4,
        lambda s: 5 + s.keyword_ratio,
    ),
    Tier(
        "minimal",
        lambda s: s.keyword_ratio > 0.1 or s.content_depth > 0.2,
        lambda s: 3 + s.keyword_ratio * 2,
    ),
]


def extract_topic_keywords(topic: str) -> list[str]:
    topic = topic.lower()
    keywords = [w for w in topic.split() if len(w) > 2 and w not in STOP_WORDS]
    for trigger, extra in KEYWORD_EXPANSIONS.items():
        if trigger in topic:
            keywords.extend(extra)
    return keywords


def matched_keywords(transcript: Transcript, keywords: Sequence[str]) -> list[str]:
    text = transcript.text.lower()
    return [k for k in keywords if k in text]


def mode_factor(transcript: Transcript, mode: Optional[SpeechMode]) -> float:
    text = transcript.text.lower()
    if mode == "opinion":
        opinions = count_matches(OPINION_PATTERN, text)
        arguments = count_matches(ARGUMENT_PATTERN, text)
        if opinions and arguments:
            return 1.0
        if opinions:
            return 0.7
    elif mode == "storytelling":
        narrative = count_matches(NARRATIVE_PATTERN, text)
        personal = count_matches(PERSONAL_PATTERN, text)
        if narrative > 2 and personal > 3:
            return 1.0
        if narrative:
            return 0.7
    return DEFAULT_MODE_FACTOR


def content_depth(transcript: Transcript, mode: Optional[SpeechMode]) -> float:
    length_factor = min(1.0, transcript.raw_word_count / FULL_CREDIT_WORDS)
    return mode_factor(transcript, mode) * length_factor


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    if va.shape != vb.shape:
        return 0.0
    norm = np.linalg.norm(va) * np.linalg.norm(vb)
    if norm == 0:
        return 0.0
    return float(np.dot(va, vb) / norm)


async def semantic_similarity(transcript: Transcript, topic: str, embedding: TextEmbeddingPort) -> float:
    try:
        topic_vector = await embedding.embed(topic)
        transcript_vector = await embedding.embed(transcript.text)
    except Exception as e:
        logger.warning(f"Semantic analysis failed, using keyword-based analysis: {e}")
        return 0.0
    return cosine_similarity(topic_vector, transcript_vector)


async def score_topic_relevance(
    transcript: Transcript,
    topic: str,
    mode: Optional[SpeechMode],
    embedding: TextEmbeddingPort,
) -> int:
    keywords = extract_topic_keywords(topic)
    keyword_ratio = len(matched_keywords(transcript, keywords)) / len(keywords) if keywords else 0.0
    signals = TopicSignals(
        keyword_ratio=keyword_ratio,
        content_depth=content_depth(transcript, mode),
        semantic_score=await semantic_similarity(transcript, topic, embedding),
    )
    return evaluate_tiers(TOPIC_TIERS, signals)
