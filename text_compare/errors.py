"""Errors raised by the comparison pipeline."""
from __future__ import annotations


class TextComparisonError(Exception):
    """Base class for comparison errors."""


class InputTooLarge(TextComparisonError):
    """A sequence exceeds the configured maximum token count.

    Raised before the alignment table is allocated. Callers should truncate
    or chunk the text upstream.
    """

    def __init__(self, side: str, token_count: int, limit: int) -> None:
        self.side = side
        self.token_count = token_count
        self.limit = limit
        super().__init__(
            f"{side} has {token_count} tokens, exceeding the limit of {limit}"
        )
