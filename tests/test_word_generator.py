"""Tests for WordGenerator class."""

import random

import pytest

from core.corpus import Corpus
from core.errors import ConfigurationError, EmptyCorpusError
from core.word_generator import WordGenerator


class TestWordGenerator:
    """Tests for WordGenerator class."""

    @pytest.mark.parametrize(
        ("min_length", "max_length"),
        [(2, 2), (3, 3), (3, 4), (2, 8), (7, 8), (1, 20)],
    )
    def test_generate_respects_bounds(self, animal_corpus, min_length, max_length):
        """Test generated words fit the bounds and come from the corpus."""
        generator = WordGenerator(
            animal_corpus, min_length, max_length, rng=random.Random(1)
        )
        lowered = {word.lower() for word in animal_corpus}

        words = generator.generate(50)

        assert len(words) == 50
        for word in words:
            assert min_length <= len(word) <= max_length
            assert word in lowered

    def test_example_cat_dog_fish(self):
        """Test that all three words qualify for bounds [3, 4]."""
        generator = WordGenerator(
            Corpus(["cat", "dog", "fish"]), 3, 4, rng=random.Random(7)
        )
        words = generator.generate(5)

        assert len(words) == 5
        assert set(words) <= {"cat", "dog", "fish"}
        assert set(generator.working_set) == {"cat", "dog", "fish"}

    def test_generate_lowercases(self, animal_corpus):
        """Test uppercase corpus words are lowercased."""
        generator = WordGenerator(animal_corpus, 7, 7)
        assert generator.generate(3) == ["giraffe", "giraffe", "giraffe"]

    def test_generate_zero(self, animal_corpus):
        """Test generating zero words returns an empty list."""
        generator = WordGenerator(animal_corpus, 3, 3)
        assert generator.generate(0) == []

    def test_generate_negative_raises(self, animal_corpus):
        """Test a negative count is rejected."""
        generator = WordGenerator(animal_corpus, 3, 3)
        with pytest.raises(ValueError):
            generator.generate(-1)

    def test_same_seed_same_words(self, animal_corpus):
        """Test the random source fully determines the output."""
        first = WordGenerator(animal_corpus, 2, 8, rng=random.Random(42))
        second = WordGenerator(animal_corpus, 2, 8, rng=random.Random(42))
        assert first.generate(20) == second.generate(20)

    def test_does_not_mutate_corpus(self, animal_corpus):
        """Test generation leaves the corpus untouched."""
        before = animal_corpus.words
        WordGenerator(animal_corpus, 2, 8).generate(10)
        assert animal_corpus.words == before


class TestWordGeneratorErrors:
    """Tests for configuration errors."""

    def test_empty_working_set_at_construction(self, animal_corpus):
        """Test no matching words fails immediately."""
        with pytest.raises(EmptyCorpusError) as exc_info:
            WordGenerator(animal_corpus, 5, 6)

        assert exc_info.value.min_length == 5
        assert exc_info.value.max_length == 6

    def test_empty_corpus(self):
        """Test an empty corpus fails."""
        with pytest.raises(EmptyCorpusError):
            WordGenerator(Corpus([]), 1, 10)

    def test_min_length_below_one(self, animal_corpus):
        """Test min_length must be positive."""
        with pytest.raises(ConfigurationError):
            WordGenerator(animal_corpus, 0, 3)

    def test_max_below_min(self, animal_corpus):
        """Test inverted bounds are rejected."""
        with pytest.raises(ConfigurationError):
            WordGenerator(animal_corpus, 5, 3)

    def test_empty_corpus_error_is_configuration_error(self):
        """Test EmptyCorpusError can be caught as a configuration error."""
        assert issubclass(EmptyCorpusError, ConfigurationError)
        assert issubclass(ConfigurationError, ValueError)


class TestWordGeneratorUpdates:
    """Tests for changing bounds and corpus at runtime."""

    def test_set_bounds_applies_to_next_generate(self, animal_corpus):
        """Test new bounds are used on the next call."""
        generator = WordGenerator(animal_corpus, 3, 3)
        generator.set_bounds(8, 8)

        assert generator.generate(4) == ["elephant"] * 4
        assert generator.min_length == 8
        assert generator.max_length == 8

    def test_set_corpus_applies_to_next_generate(self, animal_corpus):
        """Test a replaced corpus is used on the next call."""
        generator = WordGenerator(animal_corpus, 3, 3)
        generator.set_corpus(Corpus(["Bee"]))

        assert generator.generate(2) == ["bee", "bee"]
        assert generator.corpus == Corpus(["Bee"])

    def test_earlier_words_unchanged(self, animal_corpus):
        """Test already generated words are not altered by later changes."""
        generator = WordGenerator(animal_corpus, 2, 2)
        stream = generator.generate(3)
        generator.set_bounds(3, 3)

        assert stream == ["ox", "ox", "ox"]

    def test_set_bounds_without_match_fails_on_generate(self, animal_corpus):
        """Test an empty working set surfaces on the next generate."""
        generator = WordGenerator(animal_corpus, 3, 3)
        generator.set_bounds(5, 6)

        with pytest.raises(EmptyCorpusError):
            generator.generate(1)

    def test_set_bounds_invalid_raises_immediately(self, animal_corpus):
        """Test inverted bounds are rejected without touching the state."""
        generator = WordGenerator(animal_corpus, 3, 3)
        with pytest.raises(ConfigurationError):
            generator.set_bounds(4, 2)

        assert generator.min_length == 3
        assert set(generator.generate(5)) <= {"cat", "dog"}
