"""Alignment of a target token sequence against an attempt."""
from __future__ import annotations

from typing import List, Optional, Sequence

from text_compare.errors import InputTooLarge
from text_compare.models.edit_operation import EditOperation
from text_compare.models.token import Token
from .edit_distance import align_sequences


def check_token_count(side: str, tokens: Sequence[Token], limit: Optional[int]) -> None:
    """Raise InputTooLarge if tokens exceed limit (None disables the check)."""
    if limit is not None and len(tokens) > limit:
        raise InputTooLarge(side, len(tokens), limit)


def align(
    target: Sequence[Token],
    attempt: Sequence[Token],
    max_token_count: Optional[int] = None,
) -> List[EditOperation]:
    """Align target tokens to attempt tokens by normalized word equality.

    Args:
        target: Tokens of the text the learner should produce
        attempt: Tokens recognized from the learner's reading/writing
        max_token_count: Optional cap on either sequence length

    Returns:
        Edit script covering every target and attempt token exactly once.
        Empty target gives all INSERT, empty attempt all DELETE, both empty
        an empty script.

    Raises:
        InputTooLarge: If either side exceeds max_token_count
    """
    check_token_count("target", target, max_token_count)
    check_token_count("attempt", attempt, max_token_count)

    ops = align_sequences(
        [t.normalized_text for t in target],
        [a.normalized_text for a in attempt],
    )
    return [EditOperation(op=op, target_index=ti, attempt_index=ai) for op, ti, ai in ops]
