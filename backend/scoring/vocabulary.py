"""Vocabulary scoring: lexical diversity, long-word share and repetition."""

from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from scoring.tiers import MIN_SCORE, Tier, evaluate_tiers

MIN_WORDS = 10
SOPHISTICATED_LENGTH = 6
OVERUSED_COUNT = 3


@dataclass(frozen=True)
class VocabularySignals:
    diversity: float
    sophistication: float
    repetition: float


VOCABULARY_TIERS: list[Tier[VocabularySignals]] = [
    Tier(
        "rich",
        lambda s: s.diversity > 0.7 and s.sophistication > 0.3 and s.repetition < 0.1,
        lambda s: 9 + s.diversity * s.sophistication,
    ),
    Tier(
        "good",
        lambda s: s.diversity > 0.6 and s.sophistication > 0.2 and s.repetition < 0.2,
        lambda s: 7 + s.diversity * 2,
    ),
    Tier(
        "average",
        lambda s: s.diversity > 0.4 and s.sophistication > 0.1 and s.repetition < 0.3,
        lambda s: 5 + s.diversity * 2,
    ),
    Tier(
        "limited",
        lambda s: s.diversity > 0.25 and s.repetition < 0.5,
        lambda s: 3 + s.diversity,
    ),
]


def vocabulary_signals(words: Sequence[str]) -> VocabularySignals:
    counts = Counter(words)
    total = len(words)
    return VocabularySignals(
        diversity=len(counts) / total,
        sophistication=sum(1 for w in words if len(w) > SOPHISTICATED_LENGTH) / total,
        repetition=sum(1 for c in counts.values() if c > OVERUSED_COUNT) / len(counts),
    )


def score_vocabulary(words: Sequence[str]) -> int:
    if len(words) < MIN_WORDS:
        return MIN_SCORE
    return evaluate_tiers(VOCABULARY_TIERS, vocabulary_signals(words))
