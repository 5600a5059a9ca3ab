"""WPM and accuracy calculation for finished sessions."""

from collections.abc import Sequence

from core.models import SessionStats

CHARS_PER_WORD = 5


def calculate_accuracy(correct_chars: int, incorrect_chars: int) -> int:
    """Calculate keystroke accuracy.

    Args:
        correct_chars: Keystrokes that matched the target character
        incorrect_chars: Keystrokes that did not match (including overtyping)

    Returns:
        Accuracy percentage truncated to an integer, or 0 if nothing was typed
    """
    total = correct_chars + incorrect_chars
    if total == 0:
        return 0
    return 100 * correct_chars // total


def calculate_wpm(correct_word_chars: int, duration_sec: float) -> int:
    """Calculate words per minute.

    Args:
        correct_word_chars: Characters belonging to fully correct committed words
        duration_sec: Session duration in seconds

    Returns:
        WPM truncated to an integer, or 0 if duration is not positive
    """
    if duration_sec <= 0:
        return 0

    words = correct_word_chars / CHARS_PER_WORD
    return int(words * (60.0 / duration_sec))


def correct_word_chars(prev_words: Sequence[str], word_results: Sequence[bool]) -> int:
    """Count characters of committed words typed entirely correctly.

    Partially correct words contribute nothing.
    """
    return sum(
        len(word) for word, correct in zip(prev_words, word_results) if correct
    )


def compute_stats(
    prev_words: Sequence[str],
    word_results: Sequence[bool],
    correct_chars: int,
    incorrect_chars: int,
    duration_sec: float,
) -> SessionStats:
    """Derive final statistics from the accumulated session counters.

    Args:
        prev_words: Committed words
        word_results: Exact-match flag for each committed word
        correct_chars: Correct keystroke count
        incorrect_chars: Incorrect keystroke count
        duration_sec: Session duration in seconds

    Returns:
        SessionStats for display
    """
    correct_words = sum(1 for correct in word_results if correct)
    return SessionStats(
        wpm=calculate_wpm(correct_word_chars(prev_words, word_results), duration_sec),
        accuracy=calculate_accuracy(correct_chars, incorrect_chars),
        correct_chars=correct_chars,
        incorrect_chars=incorrect_chars,
        correct_words=correct_words,
        incorrect_words=len(word_results) - correct_words,
        duration_sec=duration_sec,
    )
