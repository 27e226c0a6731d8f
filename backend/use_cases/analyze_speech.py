"""AnalyzeSpeechUseCase — runs every scorer over one transcript.

Model capabilities are injected; with ModelCapabilities.absent() every
scorer takes its deterministic path.
"""

import asyncio
import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from domain.models import AnalysisResult, Feedback, ScoreSet, SpeechMode, Transcript
from ports.capabilities import ModelCapabilities
from scoring import (
    detect_errors, generate_improvements, generate_strengths, score_clarity,
    score_confidence, score_fluency, score_grammar, score_topic_relevance,
    score_vocabulary,
)
from scoring.tiers import round_half_up

logger = logging.getLogger(__name__)

MECHANICS_WEIGHT = 0.7
TOPIC_WEIGHT = 0.3
OFF_TOPIC_THRESHOLD = 3
OFF_TOPIC_CAP = 4


@dataclass
class AnalyzeRequest:
    """All parameters for an analysis request."""
    transcript: str
    audio: Optional[bytes] = None
    topic: Optional[str] = None
    mode: Optional[SpeechMode] = None


def overall_score(scores: ScoreSet, topic_relevance: Optional[int] = None) -> int:
    mechanics = sum(scores.as_tuple()) / 5
    if topic_relevance is None:
        return round_half_up(mechanics)

    weighted = mechanics * MECHANICS_WEIGHT + topic_relevance * TOPIC_WEIGHT
    if topic_relevance < OFF_TOPIC_THRESHOLD:
        return min(OFF_TOPIC_CAP, round_half_up(weighted))
    return round_half_up(weighted)


class AnalyzeSpeechUseCase:
    def __init__(self, models: ModelCapabilities, max_grammar_sentences: Optional[int] = None):
        self._models = models
        self._max_grammar_sentences = max_grammar_sentences

    async def execute(self, req: AnalyzeRequest) -> AnalysisResult:
        job_id = uuid.uuid4().hex[:12]
        transcript = Transcript(req.transcript)
        # Audio is accepted for callers that have it; the heuristics work on text only.
        logger.info(
            f"[{job_id}] Analyzing transcript: {len(transcript)} chars, "
            f"{len(transcript.words)} words, {len(transcript.sentences)} sentences"
        )

        topic = req.topic.strip() if req.topic and req.topic.strip() else None

        async def _topic() -> Optional[int]:
            if topic is None:
                return None
            return await score_topic_relevance(transcript, topic, req.mode, self._models.embedding)

        confidence, grammar, topic_relevance = await asyncio.gather(
            score_confidence(transcript, self._models.sentiment),
            score_grammar(transcript.sentences, self._models.grammar, self._max_grammar_sentences),
            _topic(),
        )
        scores = ScoreSet(
            vocabulary=score_vocabulary(transcript.words),
            fluency=score_fluency(transcript),
            confidence=confidence,
            clarity=score_clarity(transcript),
            grammar=grammar,
        )

        errors = detect_errors(transcript, topic, req.mode)
        feedback = Feedback(
            strengths=generate_strengths(scores, topic_relevance),
            improvements=generate_improvements(scores, errors, topic_relevance),
            errors=errors,
        )
        overall = overall_score(scores, topic_relevance)

        logger.info(
            f"[{job_id}] overall={overall} vocabulary={scores.vocabulary} fluency={scores.fluency} "
            f"confidence={scores.confidence} clarity={scores.clarity} grammar={scores.grammar} "
            f"topic={topic_relevance} errors={len(errors)}"
        )
        return AnalysisResult(
            overall=overall,
            scores=scores,
            transcript=req.transcript,
            feedback=feedback,
            topic_relevance=topic_relevance,
        )


async def analyze(
    transcript: str,
    audio: Optional[bytes] = None,
    *,
    models: Optional[ModelCapabilities] = None,
    topic: Optional[str] = None,
    mode: Optional[SpeechMode] = None,
) -> AnalysisResult:
    """Analyze one transcript. Without models, only rule-based scoring is used."""
    use_case = AnalyzeSpeechUseCase(models or ModelCapabilities.absent())
    return await use_case.execute(AnalyzeRequest(transcript=transcript, audio=audio, topic=topic, mode=mode))
