"""Summaries of a comparison result for presentation and scoring collaborators."""
from __future__ import annotations

from typing import Any, Dict, List

from .alignment.normalizer import normalize
from .models.comparison_result import ComparisonResult
from .models.mistake import MistakeKind
from .models.schemas import ComparisonResultSchema
from .scorer.error_rate import word_error_rate


def mistake_details(result: ComparisonResult) -> List[Dict[str, Any]]:
    """Per-mistake rows with child-facing description and suggestion."""
    return [
        {
            "position": m.position,
            "expected": m.expected_word,
            "actual": m.actual_word,
            "kind": m.kind.value,
            "kind_name": m.kind.localized_name,
            "severity": m.severity.value,
            "severity_name": m.severity.localized_name,
            "description": m.description,
            "suggestion": m.suggestion,
        }
        for m in result.mistakes
    ]


def build_summary(result: ComparisonResult) -> Dict[str, Any]:
    """Counts, accuracy percentage, word error rate and feedback for one result.

    Returns:
        Dictionary with:
        - total_words / correct: target size and words read correctly
        - mispronounced / substituted / missed / inserted: mistake counts per kind
        - accuracy: weighted accuracy as a percentage (0-100, one decimal)
        - word_error_rate: unweighted WER of the normalized words (0.0-1.0)
        - category / category_name / feedback: feedback bucket and message
        - mistakes: see mistake_details
    """
    grouped = result.mistakes_by_kind()
    wer_value = word_error_rate(normalize(result.original_text), normalize(result.spoken_text))

    return {
        "total_words": result.total_words,
        "correct": result.correct_words,
        "mispronounced": len(grouped[MistakeKind.MISPRONUNCIATION]),
        "substituted": len(grouped[MistakeKind.SUBSTITUTION]),
        "missed": len(grouped[MistakeKind.OMISSION]),
        "inserted": len(grouped[MistakeKind.INSERTION]),
        "accuracy": round(result.accuracy * 100, 1),
        "word_error_rate": wer_value,
        "category": result.feedback_category.value,
        "category_name": result.feedback_category.localized_name,
        "feedback": result.feedback,
        "mistakes": mistake_details(result),
    }


def result_to_json(result: ComparisonResult) -> str:
    """Serialize a result for clients outside the process."""
    return ComparisonResultSchema.from_result(result).model_dump_json()
