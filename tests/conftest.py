"""Shared test fixtures for the text comparison tests."""

import pytest

from text_compare import TextComparisonEngine
from text_compare.alignment.normalizer import normalize_words


@pytest.fixture
def engine():
    return TextComparisonEngine()


@pytest.fixture
def tokens():
    """Build a token list from words."""
    return lambda *words: normalize_words(words)


# Five-word sentence reused by the reading scenarios.
CAT_SENTENCE = ["Con", "mèo", "ngồi", "trên", "thảm"]


@pytest.fixture
def cat_sentence():
    return list(CAT_SENTENCE)
