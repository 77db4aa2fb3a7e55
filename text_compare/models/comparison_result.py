"""Data model for the outcome of one text comparison."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from .mistake import Mistake, MistakeKind


class FeedbackCategory(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    NEEDS_IMPROVEMENT = "needsImprovement"

    @property
    def localized_name(self) -> str:
        return _CATEGORY_TEXT[self][0]

    @property
    def emoji(self) -> str:
        return _CATEGORY_TEXT[self][1]

    @property
    def encouragement_message(self) -> str:
        return _CATEGORY_TEXT[self][2]


# category -> (localized name, emoji, encouragement)
_CATEGORY_TEXT: Dict[FeedbackCategory, Tuple[str, str, str]] = {
    FeedbackCategory.EXCELLENT: ("Xuất sắc", "🌟", "Tuyệt vời! Bé đọc hoàn hảo!"),
    FeedbackCategory.GOOD: ("Tốt", "👏", "Rất tốt! Chỉ có vài lỗi nhỏ thôi!"),
    FeedbackCategory.FAIR: ("Khá", "😊", "Khá tốt! Hãy cố gắng đọc chậm và rõ hơn nhé!"),
    FeedbackCategory.NEEDS_IMPROVEMENT: (
        "Cần cải thiện",
        "💪",
        "Hãy thử đọc lại nhé! Đọc chậm và rõ ràng sẽ giúp bé đọc tốt hơn!",
    ),
}


@dataclass(frozen=True)
class ComparisonResult:
    """Diagnosis of one attempt against its target text.

    Fully determined by ``original_text`` and ``spoken_text`` (plus the
    configuration the engine was bound to).

    Attributes:
        original_text: Target text as given by the caller
        spoken_text: Attempt text as given by the caller
        accuracy: Severity-weighted accuracy in [0, 1]
        mistakes: Mistakes ordered by target position
        matched_words: Target words read correctly, in reading order
        feedback_category: Accuracy bucket
        feedback: Encouragement message with emoji for the category
        target_length: Number of target tokens after normalization
    """
    original_text: str
    spoken_text: str
    accuracy: float
    mistakes: Tuple[Mistake, ...]
    matched_words: Tuple[str, ...]
    feedback_category: FeedbackCategory
    feedback: str
    target_length: int

    @property
    def total_words(self) -> int:
        return self.target_length

    @property
    def correct_words(self) -> int:
        return len(self.matched_words)

    @property
    def is_perfect(self) -> bool:
        return self.accuracy >= 1.0

    @property
    def is_excellent(self) -> bool:
        return self.feedback_category is FeedbackCategory.EXCELLENT

    def mistakes_by_kind(self) -> Dict[MistakeKind, List[Mistake]]:
        """Group mistakes by kind, keeping position order inside each group."""
        grouped: Dict[MistakeKind, List[Mistake]] = {kind: [] for kind in MistakeKind}
        for mistake in self.mistakes:
            grouped[mistake.kind].append(mistake)
        return grouped
