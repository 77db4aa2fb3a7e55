"""Word splitting for target and attempt text."""
from __future__ import annotations

import unicodedata
from typing import Iterable, List


def is_punctuation(char: str) -> bool:
    """Check if a single character is Unicode punctuation (category P*)."""
    return unicodedata.category(char).startswith("P")


def strip_outer_punctuation(word: str) -> str:
    """Remove leading and trailing punctuation, keeping internal marks.

    Example: '"well-known,"' -> 'well-known'
    """
    start, end = 0, len(word)
    while start < end and is_punctuation(word[start]):
        start += 1
    while end > start and is_punctuation(word[end - 1]):
        end -= 1
    return word[start:end]


def split_words(text: str) -> List[str]:
    """Split text on Unicode whitespace and strip outer punctuation.

    Pieces made only of punctuation are dropped.

    Example: "Con mèo, ngồi - trên thảm." -> ["Con", "mèo", "ngồi", "trên", "thảm"]
    """
    return split_word_list(text.split())


def split_word_list(words: Iterable[str]) -> List[str]:
    """Same as split_words but for a list of recognized words.

    An entry holding several whitespace-separated words is split further.
    """
    pieces: List[str] = []
    for entry in words:
        for raw in entry.split():
            word = strip_outer_punctuation(raw)
            if word:
                pieces.append(word)
    return pieces
