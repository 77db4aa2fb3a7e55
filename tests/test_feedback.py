"""Tests for feedback category selection."""

import pytest

from text_compare.models.comparison_result import FeedbackCategory
from text_compare.scorer.feedback import generate_feedback, select_category


@pytest.mark.parametrize(
    "accuracy, category",
    [
        (1.0, FeedbackCategory.EXCELLENT),
        (0.9, FeedbackCategory.EXCELLENT),
        (0.8999, FeedbackCategory.GOOD),
        (0.7, FeedbackCategory.GOOD),
        (0.6999, FeedbackCategory.FAIR),
        (0.5, FeedbackCategory.FAIR),
        (0.4999, FeedbackCategory.NEEDS_IMPROVEMENT),
        (0.0, FeedbackCategory.NEEDS_IMPROVEMENT),
    ],
)
def test_category_boundaries(accuracy, category):
    assert select_category(accuracy) is category


def test_feedback_message_has_emoji():
    message = generate_feedback(FeedbackCategory.EXCELLENT)
    assert message == "Tuyệt vời! Bé đọc hoàn hảo! 🌟"


def test_every_category_has_text():
    for category in FeedbackCategory:
        assert category.localized_name
        assert category.emoji
        assert generate_feedback(category).endswith(category.emoji)
