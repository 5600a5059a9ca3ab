"""Shared test fixtures for StronglyTyped tests."""

import random

import pytest

from core.corpus import Corpus
from core.session_config import SessionConfig, SessionMode
from core.word_generator import WordGenerator


@pytest.fixture
def animal_corpus():
    """Small corpus with mixed lengths and casing."""
    return Corpus(["cat", "Dog", "fish", "elephant", "ox", "GIRAFFE"])


@pytest.fixture
def config():
    """Timed session: 3 lines of 4 words."""
    return SessionConfig(
        words_per_line=4,
        lines_per_page=3,
        min_word_length=3,
        max_word_length=3,
        duration_sec=60,
    )


@pytest.fixture
def words_config():
    """Words mode session with 6 words on 2 lines of 2."""
    return SessionConfig(
        words_per_line=2,
        lines_per_page=2,
        min_word_length=3,
        max_word_length=3,
        mode=SessionMode.WORDS,
        word_count=6,
    )


@pytest.fixture
def cat_generator():
    """Generator that only ever yields 'cat'."""
    return WordGenerator(Corpus(["cat"]), 3, 3, rng=random.Random(0))
