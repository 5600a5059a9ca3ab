"""Visible window calculation over the target word stream."""

from dataclasses import dataclass

from core.session_config import SessionConfig


@dataclass(frozen=True)
class VisibleWindow:
    """Half-open range [start, end) of target word indices on screen."""

    start: int
    end: int

    def __contains__(self, index: int) -> bool:
        return self.start <= index < self.end

    def __len__(self) -> int:
        return self.end - self.start


def visible_window(stream_length: int, config: SessionConfig) -> VisibleWindow:
    """Return the last page_size words of the stream.

    Args:
        stream_length: Current number of target words
        config: Session configuration

    Returns:
        VisibleWindow clamped to the start of the stream
    """
    return VisibleWindow(max(0, stream_length - config.page_size), stream_length)


def needs_replenishment(
    active_index: int, stream_length: int, config: SessionConfig
) -> bool:
    """Check whether the typist reached the center line of the window.

    Words are requested once the active word leaves the center line, which
    keeps at least replenish_offset words ahead of the cursor.

    Args:
        active_index: Index of the word being typed
        stream_length: Current number of target words
        config: Session configuration

    Returns:
        True if words_per_line more words should be appended
    """
    return active_index >= stream_length - config.replenish_offset


def window_lines(window: VisibleWindow, config: SessionConfig) -> list[range]:
    """Split a window into per-line index ranges for rendering."""
    return [
        range(start, min(start + config.words_per_line, window.end))
        for start in range(window.start, window.end, config.words_per_line)
    ]


__all__ = ["VisibleWindow", "needs_replenishment", "visible_window", "window_lines"]
