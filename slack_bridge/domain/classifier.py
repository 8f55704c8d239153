"""Rule-based sentiment and risk-label classifier.

Pure Python, no framework dependencies. Scores sanitized text against the
weighted lexicons in ``lexicons.py``:

- an intensifier in the two preceding tokens doubles a hit
- a negator in the three preceding tokens flips a polarity hit to the
  opposite accumulator (risk categories ignore negation)
- risk-category hits add their label; a few label/score combinations
  escalate to composite labels
"""

from typing import List, NamedTuple, Set

from slack_bridge.domain import lexicons
from slack_bridge.domain.models import Sentiment, SentimentResult
from slack_bridge.domain.sanitizer import strip_punctuation

NEGATION_WINDOW = 3
INTENSIFIER_WINDOW = 2
INTENSIFIER_MULTIPLIER = 2

# (required label, negative score that must be exceeded, escalated label)
ESCALATIONS = (
    ("burnout_risk", 2, "wellbeing_concern"),
    ("attrition_risk", 1, "retention_flag"),
    ("conflict_risk", 1, "team_dynamics_issue"),
)


class Scores(NamedTuple):
    positive: int
    negative: int
    labels: Set[str]


def tokenize(text: str) -> List[str]:
    return strip_punctuation(text.lower()).split()


def _window(tokens: List[str], index: int, size: int) -> List[str]:
    return tokens[max(0, index - size):index]


def score(text: str) -> Scores:
    """Accumulate polarity scores and category labels, before escalation.

    Polarity hits only move the scores; labels come from risk categories alone,
    so a negated polarity hit never adds a label either.
    """
    tokens = tokenize(text)
    positive = 0
    negative = 0
    labels: Set[str] = set()

    for i, token in enumerate(tokens):
        multiplier = 1
        if any(t in lexicons.INTENSIFIERS for t in _window(tokens, i, INTENSIFIER_WINDOW)):
            multiplier = INTENSIFIER_MULTIPLIER

        positive_weight = lexicons.POSITIVE.get(token, 0)
        negative_weight = lexicons.NEGATIVE.get(token, 0)
        if positive_weight or negative_weight:
            negated = any(t in lexicons.NEGATORS for t in _window(tokens, i, NEGATION_WINDOW))
            if negated:
                positive, negative = (
                    positive + negative_weight * multiplier,
                    negative + positive_weight * multiplier,
                )
            else:
                positive += positive_weight * multiplier
                negative += negative_weight * multiplier

        for category, lexicon in lexicons.RISK_LEXICONS.items():
            if token in lexicon:
                labels.add(lexicons.CATEGORY_LABELS[category])

    return Scores(positive, negative, labels)


def classify(sanitized_text) -> SentimentResult:
    """Classify text into a primary polarity and a set of risk labels."""
    if not isinstance(sanitized_text, str) or not sanitized_text.strip():
        return SentimentResult()

    positive, negative, labels = score(sanitized_text)

    if negative > positive:
        primary = Sentiment.NEGATIVE
    elif positive > negative:
        primary = Sentiment.POSITIVE
    else:
        primary = Sentiment.NEUTRAL

    for required, threshold, escalated in ESCALATIONS:
        if required in labels and negative > threshold:
            labels.add(escalated)

    return SentimentResult(primary=primary, labels=sorted(labels))
