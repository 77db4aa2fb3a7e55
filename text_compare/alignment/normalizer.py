"""Token normalization for alignment and similarity."""
from __future__ import annotations

import unicodedata
from typing import Iterable, List

from text_compare.models.token import Token
from .tokenizer import split_word_list, split_words, strip_outer_punctuation

# Letters that carry no combining mark in NFD but still have a Latin base
_BASE_LETTER_MAP = str.maketrans({"đ": "d", "ð": "d", "ø": "o", "ł": "l"})


def normalize_token(word: str) -> str:
    """Canonical form used for word equality.

    Case-folded and NFC-composed. Tone marks and vowel diacritics are kept, so
    "mèo" and "mẻo" are different words.
    """
    word = strip_outer_punctuation(word.strip())
    return unicodedata.normalize("NFC", word.casefold())


def fold_diacritics(text: str) -> str:
    """Remove combining marks via canonical decomposition.

    Accented Vietnamese letters fold to their Latin base letter:
    "thảm" -> "tham", "đường" -> "duong".
    """
    decomposed = unicodedata.normalize("NFD", text.casefold())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return unicodedata.normalize("NFC", stripped.translate(_BASE_LETTER_MAP))


def make_token(index: int, raw_word: str) -> Token:
    normalized = unicodedata.normalize("NFC", raw_word.casefold())
    return Token(
        index=index,
        raw_text=raw_word,
        normalized_text=normalized,
        folded_text=fold_diacritics(normalized),
    )


def normalize(text: str) -> List[Token]:
    """Convert raw text into an ordered token sequence.

    Empty or punctuation-only input yields an empty list.

    Args:
        text: Target or attempt text

    Returns:
        Tokens indexed 0..n-1 in reading order
    """
    return [make_token(i, w) for i, w in enumerate(split_words(text))]


def normalize_words(words: Iterable[str]) -> List[Token]:
    """Same as normalize but for a pre-split word sequence (e.g. ASR output)."""
    return [make_token(i, w) for i, w in enumerate(split_word_list(words))]
