"""Text comparison pipeline: normalize -> align -> classify -> score -> feedback.

The engine is stateless. Configuration is bound once at construction and
every call works on its own tokens and alignment table, so a single engine
can serve concurrent callers without locking.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .alignment.aligner import align
from .alignment.normalizer import normalize, normalize_words
from .config import DEFAULT_CONFIG, ComparisonConfig
from .errors import InputTooLarge
from .models.comparison_result import ComparisonResult
from .models.edit_operation import EditOp
from .models.mistake import Mistake
from .models.token import Token
from .scorer.accuracy import score
from .scorer.feedback import generate_feedback, select_category
from .scorer.mistake_classifier import classify

logger = logging.getLogger(__name__)


class TextComparisonEngine:
    """Compares a learner's attempt against a target text.

    Input may come from speech recognition, handwriting recognition or the
    keyboard; the engine only sees words.
    """

    def __init__(self, config: Optional[ComparisonConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def compare_texts(self, original: str, spoken: str) -> ComparisonResult:
        """Full diagnosis of ``spoken`` against ``original``.

        Raises:
            InputTooLarge: If either text exceeds config.max_token_count
        """
        return self._compare(original, spoken, normalize(original), normalize(spoken))

    def compare_words(
        self, target_words: Sequence[str], attempt_words: Sequence[str]
    ) -> ComparisonResult:
        """Same as compare_texts for callers holding recognized word lists."""
        return self._compare(
            " ".join(target_words),
            " ".join(attempt_words),
            normalize_words(target_words),
            normalize_words(attempt_words),
        )

    def identify_mistakes(self, original: str, spoken: str) -> List[Mistake]:
        return list(self.compare_texts(original, spoken).mistakes)

    def calculate_accuracy(self, original: str, spoken: str) -> float:
        return self.compare_texts(original, spoken).accuracy

    @staticmethod
    def generate_feedback(result: ComparisonResult) -> str:
        return generate_feedback(result.feedback_category)

    def _compare(
        self,
        original: str,
        spoken: str,
        target: List[Token],
        attempt: List[Token],
    ) -> ComparisonResult:
        try:
            script = align(target, attempt, max_token_count=self.config.max_token_count)
        except InputTooLarge as e:
            logger.warning("Comparison rejected: %s", e)
            raise

        mistakes = classify(script, target, attempt, self.config)
        accuracy = score(len(target), mistakes, self.config.severity_weights)
        category = select_category(accuracy)
        matched = tuple(
            target[step.target_index].raw_text for step in script if step.op is EditOp.MATCH
        )

        logger.debug(
            "Compared %d target / %d attempt tokens: accuracy=%.3f mistakes=%d category=%s",
            len(target),
            len(attempt),
            accuracy,
            len(mistakes),
            category.value,
        )

        return ComparisonResult(
            original_text=original,
            spoken_text=spoken,
            accuracy=accuracy,
            mistakes=tuple(mistakes),
            matched_words=matched,
            feedback_category=category,
            feedback=generate_feedback(category),
            target_length=len(target),
        )


_default_engine = TextComparisonEngine()


def compare_texts(
    original: str, spoken: str, config: Optional[ComparisonConfig] = None
) -> ComparisonResult:
    """Compare two texts with the default configuration or ``config``."""
    engine = _default_engine if config is None else TextComparisonEngine(config)
    return engine.compare_texts(original, spoken)


def compare_words(
    target_words: Sequence[str],
    attempt_words: Sequence[str],
    config: Optional[ComparisonConfig] = None,
) -> ComparisonResult:
    """Compare two word sequences with the default configuration or ``config``."""
    engine = _default_engine if config is None else TextComparisonEngine(config)
    return engine.compare_words(target_words, attempt_words)
