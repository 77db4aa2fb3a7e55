"""Phonetic and orthographic word similarity."""
from .similarity import ONSET_SIMILARITY, edit_similarity, onset_similarity, word_similarity

__all__ = [
    "ONSET_SIMILARITY",
    "edit_similarity",
    "onset_similarity",
    "word_similarity",
]
