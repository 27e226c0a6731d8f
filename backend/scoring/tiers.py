"""Ordered threshold ladders shared by the scorers.

Each scorer declares its tiers most-stringent first. The first tier whose
predicate holds produces the raw score; if none hold the baseline is used.
"""

import math
from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

S = TypeVar("S")

MIN_SCORE = 1
MAX_SCORE = 10


@dataclass(frozen=True)
class Tier(Generic[S]):
    name: str
    applies: Callable[[S], bool]
    formula: Callable[[S], float]


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def clamp_score(value: float) -> int:
    """Clamp to [1, 10] and round half up."""
    return round_half_up(min(MAX_SCORE, max(MIN_SCORE, value)))


def evaluate_tiers(tiers: Sequence[Tier[S]], signals: S, baseline: float = MIN_SCORE) -> int:
    for tier in tiers:
        if tier.applies(signals):
            return clamp_score(tier.formula(signals))
    return clamp_score(baseline)

