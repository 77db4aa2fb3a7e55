"""Data models shared by the comparison pipeline."""
from .comparison_result import ComparisonResult, FeedbackCategory
from .edit_operation import EditOp, EditOperation
from .mistake import Mistake, MistakeKind, Severity
from .token import Token

__all__ = [
    "ComparisonResult",
    "EditOp",
    "EditOperation",
    "FeedbackCategory",
    "Mistake",
    "MistakeKind",
    "Severity",
    "Token",
]
