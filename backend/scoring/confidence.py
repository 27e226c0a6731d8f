"""Confidence scoring.

Marker ratios are always computed from the text. When a sentiment classifier
is available its top label is folded into the ladder; if it is missing or
fails, the marker-only ladder is used instead.
"""

import logging
from dataclasses import dataclass, replace

from domain.models import SentimentLabel, Transcript
from ports.sentiment import SentimentClassifierPort
from scoring.patterns import (
    CONFIDENCE_PATTERN, HESITATION_PATTERN, MIN_TRANSCRIPT_CHARS,
    QUESTION_TAG_PATTERN, UNCERTAINTY_PATTERN, count_matches,
)
from scoring.tiers import MIN_SCORE, Tier, evaluate_tiers

logger = logging.getLogger(__name__)

NEUTRAL_SENTIMENT = 0.5
NEGATIVE_SENTIMENT = 0.2


@dataclass(frozen=True)
class ConfidenceSignals:
    uncertainty_ratio: float
    confidence_ratio: float
    hesitation_ratio: float
    question_tag_ratio: float
    sentiment: float = 0.0


MODEL_TIERS: list[Tier[ConfidenceSignals]] = [
    Tier(
        "assertive",
        lambda s: (s.confidence_ratio > 0.02 and s.uncertainty_ratio < 0.01
                   and s.hesitation_ratio < 0.01 and s.sentiment > 0.8),
        lambda s: 9 + s.sentiment,
    ),
    Tier(
        "confident",
        lambda s: (s.confidence_ratio > 0.01 and s.uncertainty_ratio < 0.03
                   and s.hesitation_ratio < 0.03 and s.sentiment > 0.6),
        lambda s: 7 + s.sentiment * 2,
    ),
    Tier(
        "moderate",
        lambda s: s.uncertainty_ratio < 0.05 and s.hesitation_ratio < 0.05 and s.sentiment > 0.4,
        lambda s: 5 + s.sentiment,
    ),
    Tier(
        "low",
        lambda s: s.uncertainty_ratio < 0.1 and s.hesitation_ratio < 0.1,
        lambda s: 3 + s.sentiment * 2,
    ),
]

FALLBACK_TIERS: list[Tier[ConfidenceSignals]] = [
    Tier(
        "assertive",
        lambda s: s.confidence_ratio > 0.02 and s.uncertainty_ratio < 0.01 and s.hesitation_ratio < 0.01,
        lambda s: 9,
    ),
    Tier(
        "confident",
        lambda s: s.confidence_ratio > 0.01 and s.uncertainty_ratio < 0.03 and s.hesitation_ratio < 0.03,
        lambda s: 7,
    ),
    Tier(
        "moderate",
        lambda s: s.uncertainty_ratio < 0.05 and s.hesitation_ratio < 0.05 and s.question_tag_ratio < 0.02,
        lambda s: 5,
    ),
    Tier(
        "low",
        lambda s: s.uncertainty_ratio < 0.1 and s.hesitation_ratio < 0.1,
        lambda s: 3,
    ),
]


def confidence_signals(transcript: Transcript) -> ConfidenceSignals:
    text = transcript.text.lower()
    word_count = transcript.raw_word_count
    return ConfidenceSignals(
        uncertainty_ratio=count_matches(UNCERTAINTY_PATTERN, text) / word_count,
        confidence_ratio=count_matches(CONFIDENCE_PATTERN, text) / word_count,
        hesitation_ratio=count_matches(HESITATION_PATTERN, text) / word_count,
        question_tag_ratio=count_matches(QUESTION_TAG_PATTERN, transcript.text) / word_count,
    )


def sentiment_value(label: SentimentLabel) -> float:
    """Positive keeps the model's own score; neutral and negative are fixed."""
    if label.kind == "positive":
        return label.score
    if label.kind == "neutral":
        return NEUTRAL_SENTIMENT
    return NEGATIVE_SENTIMENT


def score_confidence_with_sentiment(signals: ConfidenceSignals, sentiment: float) -> int:
    return evaluate_tiers(MODEL_TIERS, replace(signals, sentiment=sentiment))


def score_confidence_fallback(signals: ConfidenceSignals) -> int:
    return evaluate_tiers(FALLBACK_TIERS, signals)


async def score_confidence(transcript: Transcript, sentiment: SentimentClassifierPort) -> int:
    if len(transcript) < MIN_TRANSCRIPT_CHARS:
        return MIN_SCORE

    signals = confidence_signals(transcript)
    try:
        label = await sentiment.classify(transcript.text)
    except Exception as e:
        logger.warning(f"Sentiment analysis failed, using fallback: {e}")
        return score_confidence_fallback(signals)
    return score_confidence_with_sentiment(signals, sentiment_value(label))
