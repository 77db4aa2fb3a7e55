"""Data model for a single comparison token."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """One word of a target or attempt sequence.

    Attributes:
        index: 0-based position in the token sequence (reading order)
        raw_text: The word as typed/recognized, outer punctuation removed
        normalized_text: Case-folded NFC form, tone marks kept (word equality)
        folded_text: normalized_text with combining marks removed (similarity only)
    """
    index: int
    raw_text: str
    normalized_text: str
    folded_text: str
