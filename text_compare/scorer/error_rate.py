"""Unweighted word error rate between target and attempt tokens."""
from __future__ import annotations

from typing import Sequence

from jiwer import wer

from text_compare.models.token import Token


def word_error_rate(target: Sequence[Token], attempt: Sequence[Token]) -> float:
    """WER of the attempt against the target over normalized words, clamped to [0, 1].

    An empty target gives 0.0 for an empty attempt and 1.0 otherwise; an
    empty attempt against a non-empty target is 1.0.
    """
    reference = " ".join(t.normalized_text for t in target)
    hypothesis = " ".join(a.normalized_text for a in attempt)
    if not reference:
        return 1.0 if hypothesis else 0.0
    if not hypothesis:
        return 1.0
    return min(1.0, max(0.0, wer(reference, hypothesis)))
