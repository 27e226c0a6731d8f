"""Error detection: filler words, over-used words and topic coverage.

Annotations are emitted in detection order and never deduplicated, so a word
can show up both as a filler and as a repetition.
"""

import logging
from collections import Counter
from typing import List, Optional, Sequence

from domain.models import ErrorAnnotation, SpeechMode, Transcript
from scoring.patterns import (
    ANNOTATED_FILLER_PATTERNS, NARRATIVE_ELEMENT_PATTERN, STATED_OPINION_PATTERN,
)
from scoring.topic import extract_topic_keywords, matched_keywords

logger = logging.getLogger(__name__)

FILLER_SUGGESTION = "Consider pausing instead of using filler words"
SIGNIFICANT_WORD_LENGTH = 3
REPETITION_THRESHOLD = 2


def find_repetitions(words: Sequence[str]) -> List[tuple[str, int]]:
    """Words longer than 3 chars used more than twice, in first-seen order."""
    counts = Counter(w for w in words if len(w) > SIGNIFICANT_WORD_LENGTH)
    return [(word, count) for word, count in counts.items() if count > REPETITION_THRESHOLD]


def detect_filler_errors(text: str) -> List[ErrorAnnotation]:
    errors = []
    for _filler, pattern in ANNOTATED_FILLER_PATTERNS:
        for match in pattern.finditer(text):
            errors.append(ErrorAnnotation(
                type="filler",
                text=match.group(0),
                suggestion=FILLER_SUGGESTION,
                position=(match.start(), match.end()),
            ))
    return errors


def detect_repetition_errors(text: str, words: Sequence[str]) -> List[ErrorAnnotation]:
    """One annotation per repeated word, positioned at its first occurrence only."""
    lowered = text.lower()
    errors = []
    for word, count in find_repetitions(words):
        index = lowered.find(word)
        if index == -1:
            continue
        errors.append(ErrorAnnotation(
            type="repetition",
            text=word,
            suggestion=f'Avoid repeating "{word}" {count} times',
            position=(index, index + len(word)),
        ))
    return errors


def detect_topic_errors(
    transcript: Transcript, topic: str, mode: Optional[SpeechMode] = None
) -> List[ErrorAnnotation]:
    text = transcript.text
    whole = (0, len(text))
    keywords = extract_topic_keywords(topic)
    mentioned = matched_keywords(transcript, keywords)
    errors = []

    if not mentioned:
        errors.append(ErrorAnnotation(
            type="topic",
            text="No topic keywords found",
            suggestion=(
                f'Your speech should address the topic: "{topic}". '
                "Include relevant keywords and stay on topic."
            ),
            position=whole,
        ))
    elif len(mentioned) < len(keywords) * 0.5:
        errors.append(ErrorAnnotation(
            type="topic",
            text="Insufficient topic coverage",
            suggestion=(
                f'Address more aspects of the topic: "{topic}". '
                f"You covered {len(mentioned)} out of {len(keywords)} key areas."
            ),
            position=whole,
        ))

    lowered = text.lower()
    if mode == "opinion" and not STATED_OPINION_PATTERN.search(lowered):
        errors.append(ErrorAnnotation(
            type="topic",
            text="No clear opinion stated",
            suggestion=(
                'For opinion topics, clearly state your viewpoint using phrases like '
                '"I believe", "In my opinion", or "I think".'
            ),
            position=whole,
        ))
    elif mode == "storytelling" and not NARRATIVE_ELEMENT_PATTERN.search(lowered):
        errors.append(ErrorAnnotation(
            type="topic",
            text="Missing storytelling elements",
            suggestion=(
                "For storytelling topics, include narrative elements like personal "
                "experiences, sequences of events, and descriptive details."
            ),
            position=whole,
        ))
    return errors


def detect_errors(
    transcript: Transcript,
    topic: Optional[str] = None,
    mode: Optional[SpeechMode] = None,
) -> List[ErrorAnnotation]:
    """Fillers first, then repetitions, then topic issues when a topic is given."""
    errors = detect_filler_errors(transcript.text)
    errors.extend(detect_repetition_errors(transcript.text, transcript.words))
    if topic:
        errors.extend(detect_topic_errors(transcript, topic, mode))
    logger.debug(f"Detected {len(errors)} errors")
    return errors
