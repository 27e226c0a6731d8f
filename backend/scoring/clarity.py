"""Clarity scoring from transcription artefacts and word length."""

from dataclasses import dataclass

from domain.models import Transcript
from scoring.patterns import (
    MIDSENTENCE_CAPITAL_PATTERN, MIN_TRANSCRIPT_CHARS, REPEATED_CHARACTER_PATTERN, count_matches,
)
from scoring.tiers import MIN_SCORE, Tier, evaluate_tiers


@dataclass(frozen=True)
class ClaritySignals:
    unclear_patterns: int
    fragment_ratio: float
    capitalization_ratio: float
    avg_word_length: float


CLARITY_TIERS: list[Tier[ClaritySignals]] = [
    Tier(
        "excellent",
        lambda s: (s.unclear_patterns == 0 and s.fragment_ratio < 0.02
                   and s.capitalization_ratio < 0.01 and s.avg_word_length > 4.5),
        lambda s: 9 + s.avg_word_length / 10,
    ),
    Tier(
        "good",
        lambda s: (s.unclear_patterns < 2 and s.fragment_ratio < 0.05
                   and s.capitalization_ratio < 0.03 and s.avg_word_length > 4),
        lambda s: 7 + s.avg_word_length / 5,
    ),
    Tier(
        "average",
        lambda s: (s.unclear_patterns < 5 and s.fragment_ratio < 0.1
                   and s.capitalization_ratio < 0.05 and s.avg_word_length > 3.5),
        lambda s: 5 + s.avg_word_length / 3,
    ),
    Tier(
        "below average",
        lambda s: s.unclear_patterns < 8 and s.fragment_ratio < 0.2 and s.avg_word_length > 3,
        lambda s: 3 + s.avg_word_length / 2,
    ),
]


def clarity_signals(transcript: Transcript) -> ClaritySignals:
    words = transcript.words
    return ClaritySignals(
        unclear_patterns=count_matches(REPEATED_CHARACTER_PATTERN, transcript.text),
        fragment_ratio=sum(1 for w in words if len(w) < 2) / len(words),
        capitalization_ratio=count_matches(MIDSENTENCE_CAPITAL_PATTERN, transcript.text) / len(words),
        avg_word_length=sum(len(w) for w in words) / len(words),
    )


def score_clarity(transcript: Transcript) -> int:
    if len(transcript) < MIN_TRANSCRIPT_CHARS or not transcript.words:
        return MIN_SCORE
    return evaluate_tiers(CLARITY_TIERS, clarity_signals(transcript))
