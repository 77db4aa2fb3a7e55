"""Data model for a classified reading/writing mistake."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MistakeKind(str, Enum):
    SUBSTITUTION = "substitution"
    OMISSION = "omission"
    INSERTION = "insertion"
    MISPRONUNCIATION = "mispronunciation"

    @property
    def localized_name(self) -> str:
        return _KIND_NAMES[self]

    @property
    def covers_target(self) -> bool:
        """Whether this kind accounts for a target word (insertions do not)."""
        return self is not MistakeKind.INSERTION


class Severity(str, Enum):
    MINOR = "minor"
    MODERATE = "moderate"
    MAJOR = "major"

    @property
    def localized_name(self) -> str:
        return _SEVERITY_NAMES[self]


_KIND_NAMES = {
    MistakeKind.MISPRONUNCIATION: "Phát âm sai",
    MistakeKind.OMISSION: "Bỏ sót",
    MistakeKind.INSERTION: "Thêm từ",
    MistakeKind.SUBSTITUTION: "Thay thế",
}

_SEVERITY_NAMES = {
    Severity.MINOR: "Nhẹ",
    Severity.MODERATE: "Vừa",
    Severity.MAJOR: "Nặng",
}


@dataclass(frozen=True)
class Mistake:
    """A positioned divergence between target and attempt.

    Attributes:
        position: Target-relative index (insertions anchor to the preceding target word)
        expected_word: Target word as displayed ("" for insertions)
        actual_word: Attempt word as recognized ("" for omissions)
        kind: Mistake classification
        severity: Weight class used by the accuracy penalty
    """
    position: int
    expected_word: str
    actual_word: str
    kind: MistakeKind
    severity: Severity

    @property
    def description(self) -> str:
        if self.kind is MistakeKind.MISPRONUNCIATION:
            return f"Phát âm '{self.expected_word}' thành '{self.actual_word}'"
        if self.kind is MistakeKind.OMISSION:
            return f"Bỏ sót từ '{self.expected_word}'"
        if self.kind is MistakeKind.INSERTION:
            return f"Thêm từ '{self.actual_word}'"
        return f"Đọc '{self.expected_word}' thành '{self.actual_word}'"

    @property
    def suggestion(self) -> str:
        if self.kind is MistakeKind.MISPRONUNCIATION:
            return f"Hãy phát âm rõ ràng từ '{self.expected_word}'"
        if self.kind is MistakeKind.OMISSION:
            return f"Đừng quên đọc từ '{self.expected_word}'"
        if self.kind is MistakeKind.INSERTION:
            return f"Không cần đọc thêm từ '{self.actual_word}'"
        return f"Từ đúng là '{self.expected_word}', không phải '{self.actual_word}'"
