"""Text comparison and mistake classification for reading/writing practice."""
from .config import ComparisonConfig, SeverityWeights, vocabulary_policy
from .engine import TextComparisonEngine, compare_texts, compare_words
from .errors import InputTooLarge, TextComparisonError
from .models import (
    ComparisonResult,
    EditOp,
    EditOperation,
    FeedbackCategory,
    Mistake,
    MistakeKind,
    Severity,
    Token,
)

__all__ = [
    "ComparisonConfig",
    "ComparisonResult",
    "EditOp",
    "EditOperation",
    "FeedbackCategory",
    "InputTooLarge",
    "Mistake",
    "MistakeKind",
    "Severity",
    "SeverityWeights",
    "TextComparisonEngine",
    "TextComparisonError",
    "Token",
    "compare_texts",
    "compare_words",
    "vocabulary_policy",
]
