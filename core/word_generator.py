"""Random target word generation from a filtered corpus."""

import logging
import random
from typing import Optional

from core.corpus import Corpus, filter_words
from core.errors import ConfigurationError, EmptyCorpusError

log = logging.getLogger("stronglytyped.word_generator")


class WordGenerator:
    """Samples target words uniformly from the length-filtered corpus.

    The filtered working set is tied to a version counter. Changing the
    bounds or the corpus bumps the version, and the working set is rebuilt
    before the next call to generate().
    """

    def __init__(
        self,
        corpus: Corpus,
        min_length: int,
        max_length: int,
        rng: Optional[random.Random] = None,
    ):
        """Initialize word generator.

        Args:
            corpus: Loaded corpus to draw words from
            min_length: Minimum word length (inclusive)
            max_length: Maximum word length (inclusive)
            rng: Random source (defaults to a fresh random.Random)

        Raises:
            ConfigurationError: If the bounds are invalid
            EmptyCorpusError: If no corpus word fits the bounds
        """
        _validate_bounds(min_length, max_length)
        self._corpus = corpus
        self._min_length = min_length
        self._max_length = max_length
        self._rng = rng if rng is not None else random.Random()

        self._version = 0
        self._words_version = -1
        self._words: list[str] = []
        self._refresh()

    @property
    def corpus(self) -> Corpus:
        return self._corpus

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def max_length(self) -> int:
        return self._max_length

    @property
    def working_set(self) -> tuple[str, ...]:
        """Filtered, lowercased words currently eligible for sampling."""
        self._refresh()
        return tuple(self._words)

    def set_bounds(self, min_length: int, max_length: int) -> None:
        """Replace the length bounds.

        Args:
            min_length: New minimum word length (inclusive)
            max_length: New maximum word length (inclusive)
        """
        _validate_bounds(min_length, max_length)
        self._min_length = min_length
        self._max_length = max_length
        self._version += 1

    def set_corpus(self, corpus: Corpus) -> None:
        """Replace the corpus words are drawn from."""
        self._corpus = corpus
        self._version += 1

    def generate(self, n: int) -> list[str]:
        """Draw n words with replacement.

        Args:
            n: Number of words to generate

        Returns:
            List of n words from the working set

        Raises:
            ValueError: If n is negative
            EmptyCorpusError: If the current bounds match no corpus word
        """
        if n < 0:
            raise ValueError(f"Cannot generate a negative number of words: {n}")
        self._refresh()
        if n == 0:
            return []
        return self._rng.choices(self._words, k=n)

    def _refresh(self) -> None:
        """Rebuild the working set if bounds or corpus changed."""
        if self._words_version == self._version:
            return

        words = filter_words(self._corpus.words, self._min_length, self._max_length)
        if not words:
            raise EmptyCorpusError(self._min_length, self._max_length)

        self._words = words
        self._words_version = self._version
        log.debug(
            f"Working set rebuilt: {len(words)} of {len(self._corpus)} words "
            f"in [{self._min_length}, {self._max_length}]"
        )


def _validate_bounds(min_length: int, max_length: int) -> None:
    if min_length < 1:
        raise ConfigurationError(f"min_length must be at least 1, got {min_length}")
    if max_length < min_length:
        raise ConfigurationError(
            f"max_length ({max_length}) must not be less than "
            f"min_length ({min_length})"
        )


__all__ = ["WordGenerator"]
