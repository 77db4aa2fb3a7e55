"""Tests for the word similarity heuristic."""

import pytest

from text_compare.phonetics.similarity import edit_similarity, onset_similarity, word_similarity
from text_compare.scorer.mistake_classifier import classify_substitution
from text_compare.models.mistake import MistakeKind


def pair(tokens, expected, actual):
    return tokens(expected)[0], tokens(actual)[0]


def test_identical_words(tokens):
    assert word_similarity(*pair(tokens, "mèo", "mèo")) == 1.0
    assert word_similarity(*pair(tokens, "mèo", "mẻo")) == 1.0
    assert edit_similarity("", "") == 1.0


def test_edit_ratio():
    assert edit_similarity("tham", "tam") == pytest.approx(0.75)
    assert edit_similarity("meo", "cho") == pytest.approx(1 / 3)
    assert edit_similarity("a", "o") == 0.0


@pytest.mark.parametrize(
    "expected, actual",
    [
        ("trâu", "châu"),
        ("dây", "giây"),
        ("sách", "xách"),
        ("phải", "fải"),
        ("con", "kon"),
    ],
)
def test_onset_confusions(tokens, expected, actual):
    assert onset_similarity(expected, actual) == pytest.approx(0.8)
    assert word_similarity(*pair(tokens, expected, actual)) >= 0.6


def test_onset_table_is_directional():
    assert onset_similarity("thảm", "tảm") == pytest.approx(0.7)
    assert onset_similarity("tảm", "thảm") == 0.0


def test_d_with_stroke_is_not_d():
    assert onset_similarity("dây", "giây") == pytest.approx(0.8)
    assert onset_similarity("đây", "giây") == 0.0


def test_d_with_stroke_gets_no_onset_credit(tokens):
    assert word_similarity(*pair(tokens, "dây", "giây")) == pytest.approx(0.8)
    assert word_similarity(*pair(tokens, "đây", "giây")) == pytest.approx(0.75)

    expected, actual = pair(tokens, "đi", "gi")
    assert word_similarity(expected, actual) == pytest.approx(0.5)
    kind, _ = classify_substitution(expected, actual, 0.6)
    assert kind is MistakeKind.SUBSTITUTION


def test_unrelated_words_below_default_threshold(tokens):
    assert word_similarity(*pair(tokens, "mèo", "chó")) < 0.6
    assert word_similarity(*pair(tokens, "thảm", "ghế")) < 0.6
