"""Tests for corpus value and word filtering."""

from core.corpus import Corpus, filter_words


class TestCorpus:
    """Tests for Corpus class."""

    def test_words_are_immutable_tuple(self):
        """Test that the corpus copies words into a tuple."""
        words = ["a", "b"]
        corpus = Corpus(words)
        words.append("c")

        assert corpus.words == ("a", "b")
        assert len(corpus) == 2

    def test_from_lines_strips_and_skips(self):
        """Test blank lines and comments are skipped."""
        corpus = Corpus.from_lines(["# header\n", "cat\n", "  \n", " dog \n", ""])
        assert list(corpus) == ["cat", "dog"]

    def test_equality(self):
        """Test corpora with the same words compare equal."""
        assert Corpus(["a", "b"]) == Corpus(("a", "b"))
        assert Corpus(["a"]) != Corpus(["b"])


class TestFilterWords:
    """Tests for filter_words function."""

    def test_inclusive_bounds(self):
        """Test words at both bounds are kept."""
        words = ["cat", "dog", "fish", "ox", "horse"]
        assert sorted(filter_words(words, 3, 4)) == ["cat", "dog", "fish"]

    def test_lowercases(self):
        """Test matching words are lowercased."""
        assert filter_words(["Dog", "CAT"], 3, 3) == ["dog", "cat"]

    def test_code_point_length(self):
        """Test length is counted in code points."""
        assert filter_words(["naïve", "über"], 4, 4) == ["über"]
        assert filter_words(["naïve"], 5, 5) == ["naïve"]

    def test_no_match_returns_empty(self):
        """Test an empty result when no word fits."""
        assert filter_words(["cat", "dog"], 5, 9) == []
