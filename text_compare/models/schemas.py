"""Serializable output schemas for presentation and scoring collaborators."""
from __future__ import annotations

from typing import List

from pydantic import BaseModel

from .comparison_result import ComparisonResult, FeedbackCategory
from .mistake import Mistake, MistakeKind, Severity


class MistakeSchema(BaseModel):
    position: int
    expected_word: str
    actual_word: str
    kind: MistakeKind
    severity: Severity
    description: str
    suggestion: str

    @classmethod
    def from_mistake(cls, mistake: Mistake) -> "MistakeSchema":
        return cls(
            position=mistake.position,
            expected_word=mistake.expected_word,
            actual_word=mistake.actual_word,
            kind=mistake.kind,
            severity=mistake.severity,
            description=mistake.description,
            suggestion=mistake.suggestion,
        )


class ComparisonResultSchema(BaseModel):
    original_text: str
    spoken_text: str
    accuracy: float
    mistakes: List[MistakeSchema]
    matched_words: List[str]
    feedback_category: FeedbackCategory
    feedback: str
    total_words: int
    correct_words: int

    @classmethod
    def from_result(cls, result: ComparisonResult) -> "ComparisonResultSchema":
        return cls(
            original_text=result.original_text,
            spoken_text=result.spoken_text,
            accuracy=result.accuracy,
            mistakes=[MistakeSchema.from_mistake(m) for m in result.mistakes],
            matched_words=list(result.matched_words),
            feedback_category=result.feedback_category,
            feedback=result.feedback,
            total_words=result.total_words,
            correct_words=result.correct_words,
        )
