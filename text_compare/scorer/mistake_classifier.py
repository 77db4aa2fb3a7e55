"""Conversion of an edit script into classified, positioned mistakes."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from text_compare.alignment.edit_distance import levenshtein_distance
from text_compare.config import DEFAULT_CONFIG, MINOR_SUBSTITUTION_DISTANCE, ComparisonConfig
from text_compare.models.edit_operation import EditOp, EditOperation
from text_compare.models.mistake import Mistake, MistakeKind, Severity
from text_compare.models.token import Token
from text_compare.phonetics.similarity import word_similarity


def classify_substitution(
    expected: Token, actual: Token, similarity_threshold: float
) -> Tuple[MistakeKind, Severity]:
    """Decide between mispronunciation and substitution for one word pair.

    Words at least ``similarity_threshold`` similar are
    mispronunciations (minor). Otherwise it is a substitution: minor when
    the normalized words differ by a single character, moderate beyond that.
    """
    similarity = word_similarity(expected, actual)
    if similarity >= similarity_threshold:
        return MistakeKind.MISPRONUNCIATION, Severity.MINOR

    distance = levenshtein_distance(expected.normalized_text, actual.normalized_text)
    if distance <= MINOR_SUBSTITUTION_DISTANCE:
        return MistakeKind.SUBSTITUTION, Severity.MINOR
    return MistakeKind.SUBSTITUTION, Severity.MODERATE


def _apply_policy(config: ComparisonConfig, token: Token, severity: Severity) -> Severity:
    if config.severity_policy is None:
        return severity
    override: Optional[Severity] = config.severity_policy(token)
    return severity if override is None else override


def classify(
    script: Sequence[EditOperation],
    target: Sequence[Token],
    attempt: Sequence[Token],
    config: ComparisonConfig = DEFAULT_CONFIG,
) -> List[Mistake]:
    """Walk the edit script and emit one mistake per non-match operation.

    Notes:
      - DELETE -> omission at the target index, actual word ""
      - INSERT -> insertion anchored to the target word read just before it
        (index 0 when nothing was read yet)
      - SUBSTITUTE -> mispronunciation or substitution, see classify_substitution
      - the severity policy may override severity for any mistake that has a
        target word; insertions keep MINOR

    Args:
        script: Edit script from the aligner
        target: Target tokens the script indexes into
        attempt: Attempt tokens the script indexes into
        config: Similarity threshold and severity policy

    Returns:
        Mistakes ordered by target position (insertions interleaved)
    """
    mistakes: List[Mistake] = []
    consumed = 0

    for step in script:
        if step.op is EditOp.MATCH:
            consumed += 1
        elif step.op is EditOp.DELETE:
            expected = target[step.target_index]
            mistakes.append(
                Mistake(
                    position=expected.index,
                    expected_word=expected.raw_text,
                    actual_word="",
                    kind=MistakeKind.OMISSION,
                    severity=_apply_policy(config, expected, Severity.MODERATE),
                )
            )
            consumed += 1
        elif step.op is EditOp.SUBSTITUTE:
            expected = target[step.target_index]
            actual = attempt[step.attempt_index]
            kind, severity = classify_substitution(expected, actual, config.similarity_threshold)
            mistakes.append(
                Mistake(
                    position=expected.index,
                    expected_word=expected.raw_text,
                    actual_word=actual.raw_text,
                    kind=kind,
                    severity=_apply_policy(config, expected, severity),
                )
            )
            consumed += 1
        elif step.op is EditOp.INSERT:
            actual = attempt[step.attempt_index]
            mistakes.append(
                Mistake(
                    position=max(consumed - 1, 0),
                    expected_word="",
                    actual_word=actual.raw_text,
                    kind=MistakeKind.INSERTION,
                    severity=Severity.MINOR,
                )
            )

    # sorted() is stable, so insertions keep their place relative to same-position mistakes
    return sorted(mistakes, key=lambda m: m.position)
