"""Per-character render model of the visible target words."""

from dataclasses import dataclass
from enum import Enum

from core.pagination import visible_window, window_lines
from core.session import SessionState
from core.session_config import SessionConfig


class CharKind(str, Enum):
    """Highlighting class of a rendered character."""

    CORRECT = "correct"
    WRONG = "wrong"
    OVERTYPED = "overtyped"
    UNREACHED = "unreached"
    CURSOR = "cursor"


@dataclass(frozen=True)
class CharSpan:
    """Run of characters sharing one highlighting class."""

    text: str
    kind: CharKind


ViewLine = list[CharSpan]


def word_spans(target: str, typed: str, cursor: bool = False) -> list[CharSpan]:
    """Classify each character of one word.

    Typed characters are compared with the target at the same offset. Extra
    typed characters past the target length are OVERTYPED, untyped target
    characters are UNREACHED. With cursor set, the first untyped target
    character (or a trailing space once the target is complete) is marked
    CURSOR.

    Args:
        target: Target word
        typed: What the user typed for this word
        cursor: Whether this is the active word

    Returns:
        Spans with adjacent characters of the same kind merged
    """
    kinds: list[tuple[str, CharKind]] = []
    for i, char in enumerate(target):
        if i < len(typed):
            kind = CharKind.CORRECT if typed[i] == char else CharKind.WRONG
            kinds.append((char, kind))
        elif cursor and i == len(typed):
            kinds.append((char, CharKind.CURSOR))
        else:
            kinds.append((char, CharKind.UNREACHED))

    for char in typed[len(target):]:
        kinds.append((char, CharKind.OVERTYPED))

    if cursor and len(typed) >= len(target):
        kinds.append((" ", CharKind.CURSOR))

    return _merge(kinds)


def build_view(state: SessionState, config: SessionConfig) -> list[ViewLine]:
    """Build the render model for the visible window.

    Args:
        state: Current session state
        config: Session configuration

    Returns:
        One list of spans per visible line; words are separated by
        UNREACHED spaces
    """
    window = visible_window(len(state.target_words), config)
    lines = []

    for line_range in window_lines(window, config):
        spans: list[CharSpan] = []
        for index in line_range:
            if spans and spans[-1] != CharSpan(" ", CharKind.CURSOR):
                spans.append(CharSpan(" ", CharKind.UNREACHED))
            target = state.target_words[index]
            if index < state.active_index:
                spans.extend(word_spans(target, state.prev_words[index]))
            elif index == state.active_index and not state.done:
                spans.extend(word_spans(target, state.current_word, cursor=True))
            else:
                spans.append(CharSpan(target, CharKind.UNREACHED))
        lines.append(spans)

    return lines


def _merge(kinds: list[tuple[str, CharKind]]) -> list[CharSpan]:
    spans: list[CharSpan] = []
    for char, kind in kinds:
        if spans and spans[-1].kind == kind:
            spans[-1] = CharSpan(spans[-1].text + char, kind)
        else:
            spans.append(CharSpan(char, kind))
    return spans


__all__ = ["CharKind", "CharSpan", "ViewLine", "build_view", "word_spans"]
