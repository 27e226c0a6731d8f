from domain.models import ErrorAnnotation, ScoreSet
from scoring.feedback import (
    FILLER_IMPROVEMENT, GOOD_OVERALL, KEEP_PRACTICING, REPETITION_IMPROVEMENT,
    SHOWS_POTENTIAL, TOPIC_ERROR_IMPROVEMENT, TOPIC_IMPROVEMENT, TOPIC_STRENGTH,
    generate_improvements, generate_strengths,
)


def _errors(kind, n):
    return [ErrorAnnotation(type=kind, text="x", suggestion="", position=(0, 1))] * n


def test_all_high_scores():
    scores = ScoreSet(8, 9, 10, 8, 8)
    strengths = generate_strengths(scores)
    improvements = generate_improvements(scores, [])
    assert len(strengths) == 5
    assert improvements == [KEEP_PRACTICING]


def test_no_strengths_but_decent_scores():
    assert generate_strengths(ScoreSet(6, 5, 5, 5, 5)) == [GOOD_OVERALL]


def test_no_strengths_low_scores():
    assert generate_strengths(ScoreSet(5, 5, 5, 5, 5)) == [SHOWS_POTENTIAL]


def test_improvements_per_weak_dimension():
    improvements = generate_improvements(ScoreSet(5, 9, 3, 9, 1), [])
    assert len(improvements) == 3
    assert KEEP_PRACTICING not in improvements


def test_error_count_thresholds():
    scores = ScoreSet(9, 9, 9, 9, 9)
    assert generate_improvements(scores, _errors("filler", 3)) == [KEEP_PRACTICING]
    assert generate_improvements(scores, _errors("filler", 4)) == [FILLER_IMPROVEMENT]
    assert generate_improvements(scores, _errors("repetition", 2)) == [KEEP_PRACTICING]
    assert generate_improvements(scores, _errors("repetition", 3)) == [REPETITION_IMPROVEMENT]


def test_topic_feedback_only_when_scored():
    scores = ScoreSet(9, 9, 9, 9, 9)
    assert TOPIC_STRENGTH not in generate_strengths(scores)
    assert TOPIC_STRENGTH in generate_strengths(scores, topic_relevance=9)
    assert generate_improvements(scores, [], topic_relevance=4) == [TOPIC_IMPROVEMENT]
    assert generate_improvements(scores, _errors("topic", 1), topic_relevance=8) == [TOPIC_ERROR_IMPROVEMENT]
