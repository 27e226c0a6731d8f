from domain.models import Transcript
from scoring.clarity import CLARITY_TIERS, ClaritySignals, clarity_signals, score_clarity
from scoring.tiers import evaluate_tiers

from samples import CLEAN_SPEECH


def test_short_transcript_scores_one():
    assert score_clarity(Transcript("Crisp and clear.")) == 1


def test_clean_speech_scores_high():
    assert score_clarity(Transcript(CLEAN_SPEECH)) >= 9


def test_whitespace_only_scores_one():
    assert score_clarity(Transcript(" " * 80)) == 1


def test_signals():
    t = Transcript("we met at noon and then Sarah arrived with the plans for tomorrow, sooo good")
    signals = clarity_signals(t)
    assert signals.unclear_patterns == 1
    assert signals.capitalization_ratio == 1 / 15
    assert signals.fragment_ratio == 0


def test_tiers_in_isolation():
    assert evaluate_tiers(CLARITY_TIERS, ClaritySignals(1, 0.03, 0.02, 4.2)) == 8
    assert evaluate_tiers(CLARITY_TIERS, ClaritySignals(4, 0.08, 0.04, 3.6)) == 6
    assert evaluate_tiers(CLARITY_TIERS, ClaritySignals(9, 0.0, 0.0, 6.0)) == 1
