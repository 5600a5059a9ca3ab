"""Word corpus value and length filtering."""

from collections.abc import Iterable, Iterator, Sequence


class Corpus:
    """Immutable, ordered word list handed to the word generator."""

    def __init__(self, words: Iterable[str]):
        self._words: tuple[str, ...] = tuple(words)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Corpus":
        """Build a corpus from raw text lines.

        Blank lines and lines starting with '#' are skipped.

        Args:
            lines: Lines of a word list, one word per line

        Returns:
            Corpus with stripped words in file order
        """
        words = []
        for line in lines:
            line = line.strip()
            if line and not line.startswith("#"):
                words.append(line)
        return cls(words)

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Corpus):
            return NotImplemented
        return self._words == other._words

    def __hash__(self) -> int:
        return hash(self._words)

    def __repr__(self) -> str:
        return f"Corpus({len(self._words)} words)"


def filter_words(words: Sequence[str], min_length: int, max_length: int) -> list[str]:
    """Keep words within inclusive length bounds, lowercased.

    Length is measured in code points, so "naïve" has length 5.

    Args:
        words: Raw words
        min_length: Minimum length (inclusive)
        max_length: Maximum length (inclusive)

    Returns:
        Lowercased matching words (may be empty)
    """
    return [word.lower() for word in words if min_length <= len(word) <= max_length]


__all__ = ["Corpus", "filter_words"]
