"""Grammar scoring.

Uses the acceptability classifier on a handful of sentences when it is
available, otherwise a rule-based issue count over every sentence.
"""

import logging
from typing import Optional, Sequence

from ports.grammar import GrammarClassifierPort
from scoring.patterns import (
    GRAMMAR_MISTAKE_PATTERNS, LEADING_CAPITAL_PATTERN, TERMINAL_PUNCTUATION_PATTERN,
)
from scoring.tiers import MIN_SCORE, Tier, evaluate_tiers

logger = logging.getLogger(__name__)

MAX_CHECKED_SENTENCES = 5
MIN_CHECKED_LENGTH = 5

ACCEPTABILITY_TIERS: list[Tier[float]] = [
    Tier("excellent", lambda r: r >= 0.9, lambda r: 9 + r),
    Tier("good", lambda r: r >= 0.7, lambda r: 7 + r * 2),
    Tier("average", lambda r: r >= 0.5, lambda r: 5 + r),
    Tier("below average", lambda r: r >= 0.3, lambda r: 3 + r),
]

ISSUE_TIERS: list[Tier[float]] = [
    Tier("minimal", lambda r: r < 0.1, lambda r: 9),
    Tier("few", lambda r: r < 0.3, lambda r: 7),
    Tier("some", lambda r: r < 0.6, lambda r: 5),
    Tier("many", lambda r: r < 1, lambda r: 3),
]


def sentence_issues(sentence: str) -> float:
    """Heuristic issue weight for a single sentence."""
    sent = sentence.strip()
    if len(sent) <= MIN_CHECKED_LENGTH:
        return 0.0

    issues = 0.0
    if not LEADING_CAPITAL_PATTERN.search(sent):
        issues += 1
    if not TERMINAL_PUNCTUATION_PATTERN.search(sent):
        issues += 0.5
    if len(sent.split(" ")) < 3:
        issues += 1
    if "  " in sent:
        issues += 0.5
    lowered = sent.lower()
    issues += sum(1 for p in GRAMMAR_MISTAKE_PATTERNS if p.search(lowered))
    return issues


def score_grammar_rules(sentences: Sequence[str]) -> int:
    if not sentences:
        return MIN_SCORE
    issue_ratio = sum(sentence_issues(s) for s in sentences) / len(sentences)
    return evaluate_tiers(ISSUE_TIERS, issue_ratio)


def score_acceptability(acceptable: int, checked: int) -> int:
    return evaluate_tiers(ACCEPTABILITY_TIERS, acceptable / checked)


async def _acceptability_counts(
    sentences: Sequence[str], classifier: GrammarClassifierPort, limit: int
) -> tuple[int, int]:
    acceptable = 0
    checked = 0
    for sentence in sentences[:limit]:
        sent = sentence.strip()
        if len(sent) <= MIN_CHECKED_LENGTH:
            continue
        verdict = await classifier.classify(sent)
        if verdict.acceptable:
            acceptable += 1
        checked += 1
    return acceptable, checked


async def score_grammar(
    sentences: Sequence[str],
    classifier: GrammarClassifierPort,
    max_sentences: Optional[int] = None,
) -> int:
    if not sentences:
        return MIN_SCORE

    limit = MAX_CHECKED_SENTENCES if max_sentences is None else max_sentences
    try:
        acceptable, checked = await _acceptability_counts(sentences, classifier, limit)
    except Exception as e:
        logger.warning(f"Grammar analysis failed, using fallback: {e}")
    else:
        if checked:
            return score_acceptability(acceptable, checked)
        logger.debug("No sentences long enough for the grammar model, using fallback")
    return score_grammar_rules(sentences)
