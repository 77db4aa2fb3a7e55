"""Accuracy-to-feedback mapping."""
from __future__ import annotations

from text_compare.config import EXCELLENT_THRESHOLD, FAIR_THRESHOLD, GOOD_THRESHOLD
from text_compare.models.comparison_result import FeedbackCategory


def select_category(accuracy: float) -> FeedbackCategory:
    """Bucket accuracy; lower bounds are inclusive (0.9 is EXCELLENT, 0.7 is GOOD)."""
    if accuracy >= EXCELLENT_THRESHOLD:
        return FeedbackCategory.EXCELLENT
    if accuracy >= GOOD_THRESHOLD:
        return FeedbackCategory.GOOD
    if accuracy >= FAIR_THRESHOLD:
        return FeedbackCategory.FAIR
    return FeedbackCategory.NEEDS_IMPROVEMENT


def generate_feedback(category: FeedbackCategory) -> str:
    return f"{category.encouragement_message} {category.emoji}"
