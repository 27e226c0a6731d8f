"""Strengths and improvements derived from the scores and detected errors."""

from typing import List, Optional, Sequence

from domain.models import ErrorAnnotation, ScoreSet

STRENGTH_THRESHOLD = 8
IMPROVEMENT_THRESHOLD = 6
FILLER_ERROR_LIMIT = 3
REPETITION_ERROR_LIMIT = 2

STRENGTH_MESSAGES = {
    "vocabulary": "Excellent vocabulary diversity and word choice",
    "fluency": "Very smooth and natural speech flow",
    "confidence": "Strong, confident delivery",
    "clarity": "Clear and articulate pronunciation",
    "grammar": "Proper grammar and sentence structure",
}
TOPIC_STRENGTH = "Excellent topic engagement and content relevance"
GOOD_OVERALL = "Good overall communication skills"
SHOWS_POTENTIAL = "Shows potential for improvement"

IMPROVEMENT_MESSAGES = {
    "vocabulary": "Expand vocabulary with more varied word choices",
    "fluency": "Reduce filler words and practice smoother delivery",
    "confidence": "Use more assertive language and confident tone",
    "clarity": "Focus on clearer pronunciation and articulation",
    "grammar": "Review grammar rules and sentence construction",
}
TOPIC_IMPROVEMENT = "Stay more focused on the given topic and provide relevant examples"
FILLER_IMPROVEMENT = "Practice eliminating filler words like 'um' and 'uh'"
REPETITION_IMPROVEMENT = "Avoid unnecessary word repetition"
TOPIC_ERROR_IMPROVEMENT = "Address the given topic more directly with relevant content and examples"
KEEP_PRACTICING = "Continue practicing to maintain your strong speaking skills"


def _by_dimension(scores: ScoreSet) -> dict[str, int]:
    return {
        "vocabulary": scores.vocabulary,
        "fluency": scores.fluency,
        "confidence": scores.confidence,
        "clarity": scores.clarity,
        "grammar": scores.grammar,
    }


def generate_strengths(scores: ScoreSet, topic_relevance: Optional[int] = None) -> List[str]:
    strengths = [
        STRENGTH_MESSAGES[name]
        for name, score in _by_dimension(scores).items()
        if score >= STRENGTH_THRESHOLD
    ]
    if topic_relevance is not None and topic_relevance >= STRENGTH_THRESHOLD:
        strengths.append(TOPIC_STRENGTH)

    if not strengths:
        if max(scores.as_tuple()) >= IMPROVEMENT_THRESHOLD:
            strengths.append(GOOD_OVERALL)
        else:
            strengths.append(SHOWS_POTENTIAL)
    return strengths


def generate_improvements(
    scores: ScoreSet,
    errors: Sequence[ErrorAnnotation],
    topic_relevance: Optional[int] = None,
) -> List[str]:
    improvements = [
        IMPROVEMENT_MESSAGES[name]
        for name, score in _by_dimension(scores).items()
        if score < IMPROVEMENT_THRESHOLD
    ]
    if topic_relevance is not None and topic_relevance < IMPROVEMENT_THRESHOLD:
        improvements.append(TOPIC_IMPROVEMENT)

    if sum(1 for e in errors if e.type == "filler") > FILLER_ERROR_LIMIT:
        improvements.append(FILLER_IMPROVEMENT)
    if sum(1 for e in errors if e.type == "repetition") > REPETITION_ERROR_LIMIT:
        improvements.append(REPETITION_IMPROVEMENT)
    if any(e.type == "topic" for e in errors):
        improvements.append(TOPIC_ERROR_IMPROVEMENT)

    if not improvements:
        improvements.append(KEEP_PRACTICING)
    return improvements
