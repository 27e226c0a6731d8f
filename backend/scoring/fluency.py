"""Fluency scoring: filler words, pause marks and sentence fragments."""

from dataclasses import dataclass

from domain.models import Transcript
from scoring.patterns import (
    FLUENCY_FILLER_PATTERNS, MIN_TRANSCRIPT_CHARS, PAUSE_PATTERN, count_matches,
)
from scoring.tiers import MIN_SCORE, Tier, evaluate_tiers

MIN_SENTENCE_WORDS = 3


@dataclass(frozen=True)
class FluencySignals:
    filler_ratio: float
    pause_ratio: float
    incomplete_ratio: float


FLUENCY_TIERS: list[Tier[FluencySignals]] = [
    Tier(
        "excellent",
        lambda s: s.filler_ratio < 0.02 and s.pause_ratio < 0.1 and s.incomplete_ratio < 0.1,
        lambda s: 9 + (1 - s.filler_ratio * 10),
    ),
    Tier(
        "good",
        lambda s: s.filler_ratio < 0.05 and s.pause_ratio < 0.2 and s.incomplete_ratio < 0.2,
        lambda s: 7 + (1 - s.filler_ratio * 5),
    ),
    Tier(
        "average",
        lambda s: s.filler_ratio < 0.1 and s.pause_ratio < 0.3 and s.incomplete_ratio < 0.3,
        lambda s: 5 + (1 - s.filler_ratio * 3),
    ),
    Tier(
        "below average",
        lambda s: s.filler_ratio < 0.2 and s.pause_ratio < 0.5,
        lambda s: 3 + (1 - s.filler_ratio * 2),
    ),
]


def fluency_signals(transcript: Transcript) -> FluencySignals:
    text = transcript.text.lower()
    fillers = sum(count_matches(p, text) for p in FLUENCY_FILLER_PATTERNS)
    sentences = transcript.sentences
    incomplete = sum(1 for s in sentences if len(s.split(" ")) < MIN_SENTENCE_WORDS)
    return FluencySignals(
        filler_ratio=fillers / transcript.raw_word_count,
        pause_ratio=count_matches(PAUSE_PATTERN, transcript.text) / len(sentences),
        incomplete_ratio=incomplete / len(sentences),
    )


def score_fluency(transcript: Transcript) -> int:
    if len(transcript) < MIN_TRANSCRIPT_CHARS or not transcript.sentences:
        return MIN_SCORE
    return evaluate_tiers(FLUENCY_TIERS, fluency_signals(transcript))
