"""Word similarity used to separate mispronunciations from substitutions."""
from __future__ import annotations

from typing import Dict, Tuple

from text_compare.alignment.edit_distance import levenshtein_distance
from text_compare.models.token import Token

# Onset confusion table for Vietnamese learners
# Values: (expected onset, actual onset) -> similarity score (0.0-1.0)
# Applied to normalized words (diacritics kept, so "đ" never reads as "d"):
# the pair matches when swapping the expected onset for the actual one turns
# the expected word into the actual word.
ONSET_SIMILARITY: Dict[Tuple[str, str], float] = {
    # d/gi merge in northern speech
    ("d", "gi"): 0.8,
    ("gi", "d"): 0.8,
    # tr/ch merge
    ("tr", "ch"): 0.8,
    ("ch", "tr"): 0.8,
    # s/x merge
    ("s", "x"): 0.8,
    ("x", "s"): 0.8,
    # same sound, different spelling
    ("ph", "f"): 0.8,
    ("f", "ph"): 0.8,
    ("c", "k"): 0.8,
    ("k", "c"): 0.8,
    ("qu", "kw"): 0.8,
    ("kw", "qu"): 0.8,
    # aspiration dropped: "thảm" -> "tảm"
    ("th", "t"): 0.7,
}


def edit_similarity(expected: str, actual: str) -> float:
    """Character edit-distance ratio: 1 - distance / longer length.

    Two empty strings are identical (1.0).
    """
    longest = max(len(expected), len(actual))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(expected, actual) / longest


def onset_similarity(expected: str, actual: str) -> float:
    """Similarity from the onset confusion table, 0.0 if no pair applies."""
    best = 0.0
    for (exp_onset, act_onset), score in ONSET_SIMILARITY.items():
        if not expected.startswith(exp_onset):
            continue
        if act_onset + expected[len(exp_onset):] == actual:
            best = max(best, score)
    return best


def word_similarity(expected: Token, actual: Token) -> float:
    """Similarity between two tokens (0.0-1.0).

    The larger of the character edit ratio of the folded words and the
    onset-confusion score of the normalized words. Deterministic and
    symmetric in edit ratio; the onset table is directional.

    Args:
        expected: Target token
        actual: Attempt token

    Returns:
        1.0 for words equal after folding, 0.0 for words with nothing in common
    """
    if expected.folded_text == actual.folded_text:
        return 1.0
    return max(
        edit_similarity(expected.folded_text, actual.folded_text),
        onset_similarity(expected.normalized_text, actual.normalized_text),
    )
