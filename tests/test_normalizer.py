"""Tests for word splitting and token normalization."""

import unicodedata

from text_compare.alignment.normalizer import (
    fold_diacritics,
    normalize,
    normalize_token,
    normalize_words,
)
from text_compare.alignment.tokenizer import split_words, strip_outer_punctuation


def test_splits_on_whitespace_and_strips_punctuation():
    tokens = normalize("Con mèo,  ngồi\ttrên\nthảm.")
    assert [t.raw_text for t in tokens] == ["Con", "mèo", "ngồi", "trên", "thảm"]
    assert [t.index for t in tokens] == [0, 1, 2, 3, 4]


def test_normalized_text_is_case_folded():
    tokens = normalize("CON MÈO")
    assert [t.normalized_text for t in tokens] == ["con", "mèo"]
    assert [t.raw_text for t in tokens] == ["CON", "MÈO"]


def test_internal_punctuation_is_kept():
    assert split_words('"well-known," she said.') == ["well-known", "she", "said"]
    assert strip_outer_punctuation("«xin-chào»!") == "xin-chào"


def test_empty_and_punctuation_only_input():
    assert normalize("") == []
    assert normalize("   ") == []
    assert normalize(" ... !! — ") == []


def test_tone_marks_kept_for_equality():
    assert normalize_token("mèo") != normalize_token("mẻo")
    assert normalize_token("Mèo,") == "mèo"


def test_decomposed_input_matches_composed():
    decomposed = unicodedata.normalize("NFD", "mèo")
    assert normalize_token(decomposed) == normalize_token("mèo")


def test_fold_diacritics_to_base_letter():
    assert fold_diacritics("thảm") == "tham"
    assert fold_diacritics("ĐƯỜNG") == "duong"
    assert fold_diacritics("ngồi") == "ngoi"


def test_folded_text_on_tokens():
    token = normalize("Mẻo")[0]
    assert token.folded_text == "meo"
    assert token.normalized_text == "mẻo"


def test_normalize_words_splits_multiword_entries():
    tokens = normalize_words(["xin chào", "bạn!", "..."])
    assert [t.raw_text for t in tokens] == ["xin", "chào", "bạn"]
    assert [t.index for t in tokens] == [0, 1, 2]
