"""Severity-weighted accuracy for a classified mistake list."""
from __future__ import annotations

from typing import Sequence

from text_compare.config import ACCURACY_DIGITS, SeverityWeights
from text_compare.models.mistake import Mistake


def score(
    target_length: int,
    mistakes: Sequence[Mistake],
    weights: SeverityWeights = SeverityWeights(),
) -> float:
    """Reduce a mistake list to one accuracy value in [0, 1].

    accuracy = (matched - sum(severity weight of every mistake)) / target_length

    where matched = target_length - target-side mistakes, computed as one
    quotient and rounded to ACCURACY_DIGITS places.

    Insertions do not lower the base ratio but still pay their penalty, so
    reading the whole passage and then rambling on does not score 1.0.

    An empty target scores exactly 1.0 whatever the attempt was.

    Args:
        target_length: Number of target tokens
        mistakes: Output of the mistake classifier
        weights: Penalty per severity class

    Returns:
        Accuracy clamped to [0, 1]
    """
    if target_length <= 0:
        return 1.0

    target_errors = sum(1 for m in mistakes if m.kind.covers_target)
    matched = max(target_length - target_errors, 0)
    penalty = sum(weights.weight(m.severity) for m in mistakes)
    accuracy = min(1.0, max(0.0, (matched - penalty) / target_length))
    # exact boundary scores (0.9, 0.7, 0.5) must not drift below their threshold
    return round(accuracy, ACCURACY_DIGITS)
