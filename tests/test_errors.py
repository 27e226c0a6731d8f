from domain.models import Transcript
from scoring.errors import FILLER_SUGGESTION, detect_errors, detect_repetition_errors, find_repetitions


def test_filler_positions():
    text = "um so like this is a test um"
    errors = detect_errors(Transcript(text))
    fillers = [e for e in errors if e.type == "filler"]
    assert [(e.text, e.position) for e in fillers] == [
        ("um", (0, 2)),
        ("um", (26, 28)),
        ("so", (3, 5)),
        ("like", (6, 10)),
    ]
    assert all(e.suggestion == FILLER_SUGGESTION for e in fillers)
    assert text[slice(*fillers[0].position)] == "um"


def test_filler_match_keeps_original_case():
    errors = detect_errors(Transcript("Well, You Know what I mean"))
    assert [e.text for e in errors] == ["You Know", "Well"]


def test_fillers_need_word_boundaries():
    assert detect_errors(Transcript("Umbrellas are unlikely to sober anyone")) == []


def test_repetitions_reported_once_per_word():
    words = ["hello", "world", "hello", "world", "hello", "world"]
    errors = detect_repetition_errors("hello world hello world hello world", words)
    assert [(e.type, e.text, e.position) for e in errors] == [
        ("repetition", "hello", (0, 5)),
        ("repetition", "world", (6, 11)),
    ]
    assert errors[0].suggestion == 'Avoid repeating "hello" 3 times'


def test_repetition_ignores_short_and_infrequent_words():
    assert find_repetitions(["the", "the", "the", "cart", "cart"]) == []


def test_repetition_position_is_first_case_insensitive_occurrence():
    text = "Nothing matters to me, truly nothing and nothing at all"
    errors = detect_errors(Transcript(text))
    assert [(e.text, e.position) for e in errors] == [("nothing", (0, 7))]


def test_filler_and_repetition_can_overlap():
    errors = detect_errors(Transcript("like like like"))
    assert [e.type for e in errors] == ["filler", "filler", "filler", "repetition"]


def test_topic_errors_only_with_topic():
    text = "Bananas grow in tropical regions and taste sweet."
    assert all(e.type != "topic" for e in detect_errors(Transcript(text)))
    errors = detect_errors(Transcript(text), topic="Public transport in cities", mode="opinion")
    topic_errors = [e for e in errors if e.type == "topic"]
    assert [e.text for e in topic_errors] == ["No topic keywords found", "No clear opinion stated"]
    assert topic_errors[0].position == (0, len(text))
