"""Alignment utilities for matching target text to an attempt."""
from .aligner import align
from .edit_distance import align_sequences, levenshtein_distance
from .normalizer import fold_diacritics, normalize, normalize_token, normalize_words
from .tokenizer import split_words

__all__ = [
    "align",
    "align_sequences",
    "fold_diacritics",
    "levenshtein_distance",
    "normalize",
    "normalize_token",
    "normalize_words",
    "split_words",
]
