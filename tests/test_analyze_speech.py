import asyncio

from domain.models import ScoreSet
from ports.capabilities import ModelCapabilities
from use_cases.analyze_speech import AnalyzeRequest, AnalyzeSpeechUseCase, analyze, overall_score

from fakes import (
    BrokenSentimentClassifier, FailingGrammarClassifier, FakeGrammarClassifier,
    FakeSentimentClassifier, capabilities,
)
from samples import CLEAN_SPEECH, CONFIDENT_SPEECH, FILLER_SPEECH, HESITANT_SPEECH

EDGE_CASES = ["", " ", " " * 80, "." * 60, "a" * 60, "!?!?", "um", "Hello world.", "ça va très bien " * 5]


def test_clean_speech_end_to_end():
    result = asyncio.run(analyze(CLEAN_SPEECH))
    assert result.vocabulary >= 9
    assert result.fluency >= 9
    assert result.clarity >= 9
    assert result.overall >= 8
    assert result.transcript == CLEAN_SPEECH
    assert result.topic_relevance is None
    assert result.feedback.errors == []


def test_all_scores_in_range_for_any_input():
    for text in EDGE_CASES + [CLEAN_SPEECH, CONFIDENT_SPEECH, FILLER_SPEECH, HESITANT_SPEECH]:
        result = asyncio.run(analyze(text))
        for score in result.scores.as_tuple() + (result.overall,):
            assert isinstance(score, int)
            assert 1 <= score <= 10
        assert result.feedback.strengths
        assert result.feedback.improvements


def test_short_transcript_minimum_scores():
    result = asyncio.run(analyze("Too short to judge."))
    assert result.fluency == 1
    assert result.confidence == 1
    assert result.clarity == 1
    assert result.vocabulary == 1


def test_overall_is_rounded_mean():
    for text in [CLEAN_SPEECH, CONFIDENT_SPEECH, FILLER_SPEECH, HESITANT_SPEECH]:
        result = asyncio.run(analyze(text))
        mean = sum(result.scores.as_tuple()) / 5
        assert result.overall == int(mean + 0.5)


def test_overall_score_arithmetic():
    assert overall_score(ScoreSet(10, 10, 5, 10, 5)) == 8
    assert overall_score(ScoreSet(7, 7, 7, 7, 8)) == 7
    assert overall_score(ScoreSet(8, 8, 8, 8, 6)) == 8


def test_overall_with_topic_is_weighted_and_capped():
    assert overall_score(ScoreSet(5, 5, 5, 5, 5), topic_relevance=5) == 5
    assert overall_score(ScoreSet(10, 10, 10, 10, 10), topic_relevance=10) == 10
    # 0.7 * 10 + 0.3 * 2 = 7.6, capped for an off-topic speech
    assert overall_score(ScoreSet(10, 10, 10, 10, 10), topic_relevance=2) == 4


def test_idempotent():
    first = asyncio.run(analyze(CONFIDENT_SPEECH))
    second = asyncio.run(analyze(CONFIDENT_SPEECH))
    assert first == second


def test_audio_is_accepted_but_ignored():
    with_audio = asyncio.run(analyze(CLEAN_SPEECH, b"RIFF....WAVE"))
    without = asyncio.run(analyze(CLEAN_SPEECH))
    assert with_audio == without


def test_models_are_used_when_present():
    grammar = FakeGrammarClassifier()
    sentiment = FakeSentimentClassifier("positive", 0.9)
    result = asyncio.run(analyze(CONFIDENT_SPEECH, models=capabilities(grammar=grammar, sentiment=sentiment)))
    assert result.grammar == 10
    assert result.confidence == 10
    assert sentiment.calls == 1
    assert len(grammar.calls) == 3


def test_failing_models_never_abort_the_analysis():
    broken = capabilities(grammar=FailingGrammarClassifier(), sentiment=BrokenSentimentClassifier())
    degraded = asyncio.run(analyze(CONFIDENT_SPEECH, models=broken))
    baseline = asyncio.run(analyze(CONFIDENT_SPEECH, models=ModelCapabilities.absent()))
    assert degraded == baseline


def test_topic_analysis_off_topic():
    text = "Bananas grow in tropical regions and taste sweet. Farmers harvest them before they fully ripen."
    use_case = AnalyzeSpeechUseCase(ModelCapabilities.absent())
    result = asyncio.run(use_case.execute(AnalyzeRequest(transcript=text, topic="Public transport in cities")))
    assert result.topic_relevance == 1
    assert result.overall <= 4
    assert any(e.type == "topic" for e in result.feedback.errors)


def test_blank_topic_is_ignored():
    result = asyncio.run(analyze(CLEAN_SPEECH, topic="   "))
    assert result.topic_relevance is None
