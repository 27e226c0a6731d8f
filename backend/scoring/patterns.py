"""Word lists and compiled patterns shared by the scorers and error detector."""

import re

MIN_TRANSCRIPT_CHARS = 50

# Counted against fluency.
FLUENCY_FILLERS = [
    "um", "uh", "like", "you know", "so", "well",
    "actually", "basically", "sort of", "kind of",
]

# Annotated individually by the error detector.
ANNOTATED_FILLERS = ["um", "uh", "like", "you know", "so", "well", "actually", "basically"]


def word_pattern(term: str) -> re.Pattern:
    return re.compile(r"\b" + re.escape(term) + r"\b", re.IGNORECASE)


FLUENCY_FILLER_PATTERNS = [word_pattern(f) for f in FLUENCY_FILLERS]
ANNOTATED_FILLER_PATTERNS = [(f, word_pattern(f)) for f in ANNOTATED_FILLERS]

PAUSE_PATTERN = re.compile(r"\s{3,}|\.{2,}|,{2,}")

UNCERTAINTY_PATTERN = re.compile(
    r"\b(i think|maybe|perhaps|possibly|i guess|i suppose|i believe|sort of|kind of|i'm not sure)\b"
)
CONFIDENCE_PATTERN = re.compile(
    r"\b(definitely|certainly|absolutely|clearly|obviously|without doubt|i'm confident|i know|surely)\b"
)
HESITATION_PATTERN = re.compile(r"\b(well|um|uh|er|ah|hmm)\b")
QUESTION_TAG_PATTERN = re.compile(r",?\s*(right|ok|you know)\?", re.IGNORECASE)

REPEATED_CHARACTER_PATTERN = re.compile(r"(.)\1{2,}")
MIDSENTENCE_CAPITAL_PATTERN = re.compile(r"[a-z]\s+[A-Z][a-z]")

LEADING_CAPITAL_PATTERN = re.compile(r"^[A-Z]")
TERMINAL_PUNCTUATION_PATTERN = re.compile(r"[.!?]$")
GRAMMAR_MISTAKE_PATTERNS = [
    re.compile(r"\bi is\b"),
    re.compile(r"\bthey is\b"),
    re.compile(r"\bwe was\b"),
    re.compile(r"\bgood\s+\w+ly\b"),
]

OPINION_PATTERN = re.compile(
    r"\b(i think|i believe|in my opinion|personally|i feel|i prefer|better|worse|should|would|agree|disagree)\b"
)
STATED_OPINION_PATTERN = re.compile(r"\b(i think|i believe|in my opinion|personally|i feel|i prefer)\b")
ARGUMENT_PATTERN = re.compile(
    r"\b(because|since|therefore|however|although|for example|such as|this shows|this proves)\b"
)
NARRATIVE_PATTERN = re.compile(
    r"\b(once|when|then|after|before|during|while|remember|happened|experience|story|time)\b"
)
NARRATIVE_ELEMENT_PATTERN = re.compile(r"\b(once|when|then|after|remember|happened|experience|story)\b")
PERSONAL_PATTERN = re.compile(r"\b(i|me|my|myself|we|us|our)\b")


def count_matches(pattern: re.Pattern, text: str) -> int:
    return sum(1 for _ in pattern.finditer(text))
