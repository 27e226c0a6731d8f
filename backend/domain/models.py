"""Framework-agnostic domain models for Speech Coach analysis.

The scoring functions work on these plain dataclasses. Pydantic DTOs in
models.py are only used at the HTTP boundary, with mappers in between.
"""

import re
from dataclasses import dataclass, field
from functools import cached_property
from typing import Literal, Optional

ErrorType = Literal[
    "grammar", "filler", "repetition", "clarity", "vocabulary", "fluency", "topic",
]
SpeechMode = Literal["opinion", "storytelling"]
SentimentKind = Literal["negative", "neutral", "positive"]

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class Transcript:
    """Raw speech-to-text output with its derived sentences and words."""
    text: str

    @cached_property
    def sentences(self) -> list[str]:
        """Non-empty chunks between runs of terminal punctuation, trimmed."""
        return [s.strip() for s in _SENTENCE_SPLIT.split(self.text) if s.strip()]

    @cached_property
    def words(self) -> list[str]:
        """Lowercase whitespace-separated tokens."""
        return [w for w in _WHITESPACE.split(self.text.lower()) if w]

    @cached_property
    def raw_word_count(self) -> int:
        # Whitespace split without dropping empty edge tokens, so never zero.
        return len(_WHITESPACE.split(self.text))

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class ScoreSet:
    """The five sub-scores, each an integer in [1, 10]."""
    vocabulary: int
    fluency: int
    confidence: int
    clarity: int
    grammar: int

    def as_tuple(self) -> tuple[int, int, int, int, int]:
        return (self.vocabulary, self.fluency, self.confidence, self.clarity, self.grammar)


@dataclass(frozen=True)
class ErrorAnnotation:
    """A positioned issue found in the transcript. position is [start, end)."""
    type: ErrorType
    text: str
    suggestion: str
    position: tuple[int, int]


@dataclass
class Feedback:
    strengths: list[str] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)
    errors: list[ErrorAnnotation] = field(default_factory=list)


@dataclass
class AnalysisResult:
    """Complete output of one analysis call."""
    overall: int
    scores: ScoreSet
    transcript: str
    feedback: Feedback
    topic_relevance: Optional[int] = None

    @property
    def vocabulary(self) -> int:
        return self.scores.vocabulary

    @property
    def fluency(self) -> int:
        return self.scores.fluency

    @property
    def confidence(self) -> int:
        return self.scores.confidence

    @property
    def clarity(self) -> int:
        return self.scores.clarity

    @property
    def grammar(self) -> int:
        return self.scores.grammar


@dataclass(frozen=True)
class AcceptabilityVerdict:
    """Output of the sentence acceptability classifier."""
    acceptable: bool
    score: float


@dataclass(frozen=True)
class SentimentLabel:
    """Top label of the sentiment classifier."""
    kind: SentimentKind
    score: float
