import asyncio

from adapters.noop import NoOpGrammarClassifier
from scoring.grammar import score_grammar, score_grammar_rules, sentence_issues

from fakes import FailingGrammarClassifier, FakeGrammarClassifier

WELL_FORMED = [
    "The committee approved the new budget",
    "Several members raised thoughtful questions",
    "The chair answered each concern patiently",
    "Everyone left the session satisfied",
    "The next meeting starts on Monday",
]


def _score(sentences, classifier=None, max_sentences=None):
    return asyncio.run(score_grammar(sentences, classifier or NoOpGrammarClassifier(), max_sentences))


def test_no_sentences_scores_one():
    assert _score([]) == 1
    assert _score([], FakeGrammarClassifier()) == 1


def test_model_path_all_acceptable():
    assert _score(WELL_FORMED, FakeGrammarClassifier()) == 10


def test_model_path_mostly_acceptable():
    classifier = FakeGrammarClassifier(judge=lambda s: "Monday" not in s)
    # 4 of 5 acceptable: 7 + 0.8 * 2
    assert _score(WELL_FORMED, classifier) == 9


def test_model_checks_at_most_five_sentences():
    classifier = FakeGrammarClassifier()
    _score(WELL_FORMED + ["Another long sentence here", "And yet one more"], classifier)
    assert len(classifier.calls) == 5


def test_model_sentence_limit_is_configurable():
    classifier = FakeGrammarClassifier()
    _score(WELL_FORMED, classifier, max_sentences=2)
    assert classifier.calls == WELL_FORMED[:2]


def test_zero_sentence_limit_uses_rules_only():
    classifier = FakeGrammarClassifier()
    assert _score(WELL_FORMED, classifier, max_sentences=0) == score_grammar_rules(WELL_FORMED)
    assert classifier.calls == []


def test_model_skips_short_sentences_and_falls_back_when_none_checked():
    classifier = FakeGrammarClassifier(judge=lambda s: False)
    assert _score(["Hi", "Yes", "Okay"], classifier) == 9
    assert classifier.calls == []


def test_failing_model_falls_back_to_rules():
    classifier = FailingGrammarClassifier()
    assert _score(WELL_FORMED, classifier) == score_grammar_rules(WELL_FORMED)
    assert len(classifier.calls) == 1


def test_sentence_issues():
    assert sentence_issues("Hi") == 0
    # missing terminal punctuation only
    assert sentence_issues("The plan works well") == 0.5
    assert sentence_issues("i is happy about this") == 2.5
    assert sentence_issues("They is  going") == 2.0
    assert sentence_issues("He did good quickly!") == 1


def test_rule_based_scores():
    # split sentences never keep their punctuation, so each long one costs 0.5
    assert score_grammar_rules(WELL_FORMED) == 5
    assert score_grammar_rules(["i is happy about this", "They is going home now"]) == 1
    assert score_grammar_rules(["Fine", "Good", "Yes", "Okay", "Sure", "The plan works well"]) == 9
    assert score_grammar_rules(["Fine", "Good", "The plan works well"]) == 7
