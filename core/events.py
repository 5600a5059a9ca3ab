"""Inbound session events."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class CharTyped:
    """A printable, non-whitespace character, one code point.

    Space is a Commit, never a character of a word.
    """

    char: str

    def __post_init__(self):
        if len(self.char) != 1:
            raise ValueError(f"CharTyped expects one code point, got {self.char!r}")
        if self.char.isspace() or not self.char.isprintable():
            raise ValueError(f"CharTyped expects a printable character, got {self.char!r}")


@dataclass(frozen=True)
class Commit:
    """Space pressed: finish the current word."""


@dataclass(frozen=True)
class Backspace:
    """Remove the last character or recall the previous word."""


@dataclass(frozen=True)
class Tick:
    """Periodic timer notification.

    Only updates the elapsed time shown to the user.
    """

    elapsed_sec: float


@dataclass(frozen=True)
class Timeout:
    """The session time budget has elapsed."""


@dataclass(frozen=True)
class Interrupt:
    """External cancellation (Ctrl+C, window closed)."""


SessionEvent = Union[CharTyped, Commit, Backspace, Tick, Timeout, Interrupt]


__all__ = [
    "Backspace",
    "CharTyped",
    "Commit",
    "Interrupt",
    "SessionEvent",
    "Tick",
    "Timeout",
]
