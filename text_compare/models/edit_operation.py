"""Data model for one step of an edit script."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EditOp(str, Enum):
    MATCH = "match"
    SUBSTITUTE = "sub"
    DELETE = "del"
    INSERT = "ins"


@dataclass(frozen=True)
class EditOperation:
    """Represents one aligned step between target and attempt.

    Attributes:
        op: Operation type
        target_index: Index into the target sequence (None for INSERT)
        attempt_index: Index into the attempt sequence (None for DELETE)
    """
    op: EditOp
    target_index: Optional[int]
    attempt_index: Optional[int]

    @property
    def consumes_target(self) -> bool:
        return self.target_index is not None

    @property
    def consumes_attempt(self) -> bool:
        return self.attempt_index is not None
