"""Configuration for the comparison pipeline."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from .alignment.normalizer import normalize_token
from .alignment.tokenizer import split_word_list
from .models.mistake import Severity
from .models.token import Token

# Substitutions whose folded similarity reaches this are mispronunciations
DEFAULT_SIMILARITY_THRESHOLD = 0.6

# Accuracy penalty per mistake, divided by target length
DEFAULT_SEVERITY_WEIGHTS = {
    Severity.MINOR: 0.1,
    Severity.MODERATE: 0.3,
    Severity.MAJOR: 0.5,
}

# Lower bounds (inclusive) of the feedback categories
EXCELLENT_THRESHOLD = 0.9
GOOD_THRESHOLD = 0.7
FAIR_THRESHOLD = 0.5

# Accuracy is rounded to this many decimal places
ACCURACY_DIGITS = 9

# Substitutions within this many characters are minor
MINOR_SUBSTITUTION_DISTANCE = 1

SeverityPolicy = Callable[[Token], Optional[Severity]]


@dataclass(frozen=True)
class SeverityWeights:
    minor: float = DEFAULT_SEVERITY_WEIGHTS[Severity.MINOR]
    moderate: float = DEFAULT_SEVERITY_WEIGHTS[Severity.MODERATE]
    major: float = DEFAULT_SEVERITY_WEIGHTS[Severity.MAJOR]

    def __post_init__(self) -> None:
        for name in ("minor", "moderate", "major"):
            if getattr(self, name) < 0:
                raise ValueError(f"severity weight '{name}' must be non-negative")

    def weight(self, severity: Severity) -> float:
        if severity is Severity.MINOR:
            return self.minor
        if severity is Severity.MODERATE:
            return self.moderate
        return self.major


@dataclass(frozen=True)
class ComparisonConfig:
    """Caller-tunable comparison settings, bound once and never mutated.

    Attributes:
        similarity_threshold: Minimum similarity for a substitution to count
            as a mispronunciation (0.0-1.0)
        severity_weights: Accuracy penalty per severity class
        severity_policy: Optional override mapping a target token to a
            severity (e.g. domain-critical vocabulary -> MAJOR); returning
            None keeps the computed severity
        max_token_count: Fail-fast guard on either sequence length (None = no cap)
    """
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    severity_weights: SeverityWeights = field(default_factory=SeverityWeights)
    severity_policy: Optional[SeverityPolicy] = None
    max_token_count: Optional[int] = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.similarity_threshold <= 1.0:
            raise ValueError("similarity_threshold must be between 0.0 and 1.0")
        if self.max_token_count is not None and self.max_token_count < 1:
            raise ValueError("max_token_count must be a positive integer")


DEFAULT_CONFIG = ComparisonConfig()


def vocabulary_policy(
    words: Iterable[str], severity: Severity = Severity.MAJOR
) -> SeverityPolicy:
    """Build a severity policy that flags the given words.

    Words are matched by normalized form, so case and punctuation in the
    list do not matter. An entry holding several words flags each of them.
    """
    flagged = frozenset(normalize_token(w) for w in split_word_list(words))

    def policy(token: Token) -> Optional[Severity]:
        return severity if token.normalized_text in flagged else None

    return policy
