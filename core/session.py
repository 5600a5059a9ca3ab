"""Keystroke-driven typing session state machine.

State transitions are pure: apply_event() takes a SessionState and an event
and returns the next SessionState. TypingSession wraps the current state
for front ends that want a single mutable handle.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from core.errors import SessionInvariantError
from core.events import (
    Backspace,
    CharTyped,
    Commit,
    Interrupt,
    SessionEvent,
    Tick,
    Timeout,
)
from core.metrics import compute_stats
from core.models import SessionStats
from core.pagination import VisibleWindow, needs_replenishment, visible_window
from core.session_config import SessionConfig
from core.word_generator import WordGenerator

log = logging.getLogger("stronglytyped.session")


@dataclass(frozen=True)
class SessionState:
    """Snapshot of a typing session.

    The word being typed always corresponds to target_words[active_index],
    where active_index == len(prev_words).
    """

    target_words: tuple[str, ...] = field(default=())
    prev_words: tuple[str, ...] = field(default=())
    word_results: tuple[bool, ...] = field(default=())
    current_word: str = field(default="")
    correct_chars: int = field(default=0)
    incorrect_chars: int = field(default=0)
    elapsed_sec: float = field(default=0.0)
    done: bool = field(default=False)
    stats: Optional[SessionStats] = field(default=None)

    @property
    def active_index(self) -> int:
        return len(self.prev_words)

    @property
    def target_word(self) -> str:
        """Target for the word being typed, empty once the stream is used up."""
        if self.active_index < len(self.target_words):
            return self.target_words[self.active_index]
        return ""


def new_session(config: SessionConfig, generator: WordGenerator) -> SessionState:
    """Create a session with the initial page of target words.

    Args:
        config: Session configuration
        generator: Word source

    Returns:
        Fresh active SessionState
    """
    count = config.page_size
    if not config.is_timed:
        count = min(count, config.word_count)

    state = SessionState(target_words=tuple(generator.generate(count)))
    log.info(
        f"Session started: mode={config.mode.value}, "
        f"{len(state.target_words)} initial words"
    )
    return state


def apply_event(
    state: SessionState,
    event: SessionEvent,
    config: SessionConfig,
    generator: WordGenerator,
) -> SessionState:
    """Apply one event and return the resulting state.

    Events received after the session is done are ignored. Interrupt is
    handled by the caller and leaves the state untouched here.

    Args:
        state: Current state
        event: Inbound event
        config: Session configuration
        generator: Word source used for replenishment

    Returns:
        Next state (the same object for no-op transitions)

    Raises:
        SessionInvariantError: If the transition produced an invalid state
    """
    if state.done:
        return state

    if isinstance(event, CharTyped):
        new_state = _type_char(state, event.char)
    elif isinstance(event, Commit):
        new_state = _commit(state, config, generator)
    elif isinstance(event, Backspace):
        new_state = _backspace(state, config)
    elif isinstance(event, Tick):
        new_state = replace(state, elapsed_sec=event.elapsed_sec)
    elif isinstance(event, Timeout):
        new_state = finalize(state, session_duration(state, config))
    elif isinstance(event, Interrupt):
        return state
    else:
        raise TypeError(f"Unknown session event: {event!r}")

    check_invariants(new_state, config)
    return new_state


def _type_char(state: SessionState, char: str) -> SessionState:
    """Append a character and score it against the target."""
    offset = len(state.current_word)
    target = state.target_word

    if offset < len(target) and target[offset] == char:
        return replace(
            state,
            current_word=state.current_word + char,
            correct_chars=state.correct_chars + 1,
        )

    return replace(
        state,
        current_word=state.current_word + char,
        incorrect_chars=state.incorrect_chars + 1,
    )


def _commit(
    state: SessionState, config: SessionConfig, generator: WordGenerator
) -> SessionState:
    """Finish the current word and advance to the next target."""
    if not state.current_word:
        return state

    correct = state.current_word == state.target_word
    new_state = replace(
        state,
        prev_words=state.prev_words + (state.current_word,),
        word_results=state.word_results + (correct,),
        current_word="",
    )
    log.debug(
        f"Committed word {state.active_index}: {state.current_word!r} "
        f"({'correct' if correct else 'incorrect'})"
    )

    if not config.is_timed and new_state.active_index >= config.word_count:
        return finalize(new_state, session_duration(new_state, config))

    if needs_replenishment(
        new_state.active_index, len(new_state.target_words), config
    ):
        count = config.words_per_line
        if not config.is_timed:
            count = min(count, config.word_count - len(new_state.target_words))
        if count > 0:
            new_state = replace(
                new_state,
                target_words=new_state.target_words
                + tuple(generator.generate(count)),
            )
            log.debug(
                f"Replenished {count} words, stream length "
                f"{len(new_state.target_words)}"
            )

    return new_state


def _backspace(state: SessionState, config: SessionConfig) -> SessionState:
    """Delete a character, or recall an incorrect previous word."""
    if state.current_word:
        return replace(state, current_word=state.current_word[:-1])

    if not state.prev_words:
        return state

    prev_index = state.active_index - 1
    if state.word_results[prev_index]:
        return state

    if prev_index < visible_window(len(state.target_words), config).start:
        return state

    return replace(
        state,
        prev_words=state.prev_words[:-1],
        word_results=state.word_results[:-1],
        current_word=state.prev_words[-1],
    )


def session_duration(state: SessionState, config: SessionConfig) -> float:
    """Duration used for WPM: the time budget, or elapsed time in words mode."""
    if config.is_timed:
        return float(config.duration_sec)
    return state.elapsed_sec


def finalize(state: SessionState, duration_sec: float) -> SessionState:
    """Move the session to the done state and compute its statistics.

    Calling this on an already finalized state returns it unchanged.

    Args:
        state: Session state
        duration_sec: Session duration in seconds

    Returns:
        Done state carrying SessionStats
    """
    if state.done:
        return state

    stats = compute_stats(
        state.prev_words,
        state.word_results,
        state.correct_chars,
        state.incorrect_chars,
        duration_sec,
    )
    log.info(
        f"Session finished: {stats.wpm} WPM, {stats.accuracy}% accuracy "
        f"({stats.correct_words} correct / {stats.incorrect_words} incorrect words)"
    )
    return replace(state, done=True, stats=stats)


def check_invariants(state: SessionState, config: SessionConfig) -> None:
    """Raise SessionInvariantError if the state is inconsistent.

    Args:
        state: State to check
        config: Session configuration
    """
    if len(state.prev_words) > len(state.target_words):
        raise SessionInvariantError(
            f"{len(state.prev_words)} committed words exceed "
            f"{len(state.target_words)} target words"
        )
    if len(state.word_results) != len(state.prev_words):
        raise SessionInvariantError(
            f"{len(state.word_results)} word results for "
            f"{len(state.prev_words)} committed words"
        )
    if state.done:
        return

    window = visible_window(len(state.target_words), config)
    if state.active_index not in window:
        raise SessionInvariantError(
            f"Active word {state.active_index} outside visible window "
            f"[{window.start}, {window.end})"
        )


class TypingSession:
    """Stateful wrapper feeding events through apply_event()."""

    def __init__(self, config: SessionConfig, generator: WordGenerator):
        """Initialize typing session.

        Args:
            config: Session configuration
            generator: Word source

        Raises:
            EmptyCorpusError: If the generator cannot produce words
        """
        self.config = config
        self.generator = generator
        self.cancelled = False
        self._state = new_session(config, generator)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def done(self) -> bool:
        return self._state.done

    @property
    def stats(self) -> Optional[SessionStats]:
        return self._state.stats

    @property
    def window(self) -> VisibleWindow:
        return visible_window(len(self._state.target_words), self.config)

    @property
    def remaining_sec(self) -> Optional[float]:
        """Seconds left in a timed session, None in words mode."""
        if not self.config.is_timed:
            return None
        return max(0.0, self.config.duration_sec - self._state.elapsed_sec)

    def process_event(self, event: SessionEvent) -> SessionState:
        """Apply an event to the session.

        Args:
            event: Inbound event

        Returns:
            The new session state
        """
        if isinstance(event, Interrupt):
            if not self.cancelled:
                log.info("Session interrupted")
            self.cancelled = True
            return self._state

        if self.cancelled:
            return self._state

        self._state = apply_event(self._state, event, self.config, self.generator)
        return self._state


__all__ = [
    "SessionState",
    "TypingSession",
    "apply_event",
    "check_invariants",
    "finalize",
    "new_session",
    "session_duration",
]
