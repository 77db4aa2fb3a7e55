"""Mistake classification, accuracy scoring and feedback selection."""
from .accuracy import score
from .feedback import generate_feedback, select_category
from .mistake_classifier import classify, classify_substitution

__all__ = [
    "classify",
    "classify_substitution",
    "generate_feedback",
    "score",
    "select_category",
]
