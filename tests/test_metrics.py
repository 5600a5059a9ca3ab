"""Tests for WPM and accuracy calculation."""

import pytest
from pydantic import ValidationError

from core.metrics import (
    calculate_accuracy,
    calculate_wpm,
    compute_stats,
    correct_word_chars,
)
from core.models import SessionStats


class TestCalculateAccuracy:
    """Test calculate_accuracy function."""

    def test_truncates(self):
        """Test 300 correct and 20 incorrect gives 93%."""
        assert calculate_accuracy(300, 20) == 93

    def test_perfect(self):
        """Test no mistakes gives 100%."""
        assert calculate_accuracy(42, 0) == 100

    def test_all_wrong(self):
        """Test only mistakes gives 0%."""
        assert calculate_accuracy(0, 7) == 0

    def test_zero_keystrokes(self):
        """Test nothing typed gives the 0 sentinel instead of dividing by zero."""
        assert calculate_accuracy(0, 0) == 0


class TestCalculateWPM:
    """Test calculate_wpm function."""

    def test_one_minute(self):
        """Test 300 characters in 60 seconds is 60 WPM."""
        assert calculate_wpm(300, 60) == 60

    def test_half_minute(self):
        """Test 100 characters in 30 seconds.

        - words = 100 / 5 = 20
        - minutes = 0.5
        - WPM = 40
        """
        assert calculate_wpm(100, 30) == 40

    def test_truncates(self):
        """Test fractional WPM is truncated.

        12 characters in 60 seconds = 2.4 words = 2 WPM.
        """
        assert calculate_wpm(12, 60) == 2

    def test_zero_duration(self):
        """Test zero duration returns 0."""
        assert calculate_wpm(100, 0) == 0

    def test_zero_chars(self):
        """Test zero characters returns 0."""
        assert calculate_wpm(0, 30) == 0


class TestCorrectWordChars:
    """Test correct_word_chars function."""

    def test_only_fully_correct_words(self):
        """Test partially correct words earn nothing."""
        words = ["cat", "dgo", "fish"]
        results = [True, False, True]
        assert correct_word_chars(words, results) == 7

    def test_empty(self):
        """Test no committed words."""
        assert correct_word_chars([], []) == 0


class TestComputeStats:
    """Test compute_stats function."""

    def test_stats(self):
        """Test all fields of the final statistics."""
        stats = compute_stats(
            ["cat", "dgo", "fish"], [True, False, True], 12, 3, 60
        )

        assert stats.wpm == 1
        assert stats.accuracy == 80
        assert stats.correct_chars == 12
        assert stats.incorrect_chars == 3
        assert stats.correct_words == 2
        assert stats.incorrect_words == 1
        assert stats.duration_sec == 60
        assert stats.has_keystrokes

    def test_empty_session(self):
        """Test a session without keystrokes."""
        stats = compute_stats([], [], 0, 0, 30)

        assert stats.wpm == 0
        assert stats.accuracy == 0
        assert not stats.has_keystrokes

    def test_identical_inputs_identical_stats(self):
        """Test stats are a pure function of the counters."""
        first = compute_stats(["cat"], [True], 3, 0, 30)
        second = compute_stats(["cat"], [True], 3, 0, 30)
        assert first == second


class TestSessionStatsModel:
    """Test SessionStats model configuration."""

    def test_frozen(self):
        """Test final statistics cannot be modified."""
        stats = compute_stats(["cat"], [True], 3, 0, 30)
        with pytest.raises(ValidationError):
            stats.wpm = 100

    def test_extra_fields_ignored(self):
        """Test unknown fields are dropped."""
        stats = SessionStats(
            wpm=1, accuracy=100, correct_chars=3, incorrect_chars=0,
            correct_words=1, incorrect_words=0, duration_sec=30, theme="dark",
        )
        assert "theme" not in stats.model_dump()

    def test_uses_model_config(self):
        """Test the v2 model_config carries the settings."""
        assert SessionStats.model_config["frozen"] is True
        assert SessionStats.model_config["extra"] == "ignore"
