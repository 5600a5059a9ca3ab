"""Typing test window for StronglyTyped."""

import html
import logging

from PySide6.QtCore import QElapsedTimer, Qt, QTimer
from PySide6.QtGui import QFont, QKeyEvent
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from core.events import Backspace, CharTyped, Commit, Interrupt, SessionEvent, Tick, Timeout
from core.models import SessionStats
from core.session import TypingSession
from core.view import CharKind, build_view

log = logging.getLogger("stronglytyped.typing_window")

CHAR_COLORS = {
    CharKind.CORRECT: "#FFFFFF",
    CharKind.WRONG: "#FF0000",
    CharKind.OVERTYPED: "#ba2222",
    CharKind.UNREACHED: "#808080",
    CharKind.CURSOR: "#f5e614",
}

TICK_INTERVAL_MS = 1000


class TypingWindow(QWidget):
    """Window presenting target words and forwarding key presses."""

    def __init__(self, session: TypingSession, parent=None):
        """Initialize typing window.

        Args:
            session: Session receiving the key events
            parent: Parent widget
        """
        super().__init__(parent)
        self.session = session
        self.clock = QElapsedTimer()

        self.tick_timer = QTimer(self)
        self.tick_timer.setInterval(TICK_INTERVAL_MS)
        self.tick_timer.timeout.connect(self.on_tick)

        self.timeout_timer = QTimer(self)
        self.timeout_timer.setSingleShot(True)
        self.timeout_timer.timeout.connect(lambda: self.deliver(Timeout()))

        self.init_ui()
        self.refresh()

    def init_ui(self) -> None:
        """Initialize user interface."""
        self.setWindowTitle("StronglyTyped")
        self.setMinimumWidth(720)
        self.setStyleSheet("background-color: #1e1e1e;")

        layout = QVBoxLayout()

        self.status_label = QLabel()
        self.status_label.setStyleSheet("color: #f5e614; font-size: 14px;")
        layout.addWidget(self.status_label)

        self.words_label = QLabel()
        self.words_label.setTextFormat(Qt.TextFormat.RichText)
        font = QFont("Monospace")
        font.setStyleHint(QFont.StyleHint.TypeWriter)
        font.setPointSize(16)
        self.words_label.setFont(font)
        layout.addWidget(self.words_label)

        self.stats_label = QLabel()
        self.stats_label.setStyleSheet("color: #FFFFFF; font-size: 16px;")
        self.stats_label.hide()
        layout.addWidget(self.stats_label)

        hint_label = QLabel("Start typing to begin. Esc to quit.")
        hint_label.setStyleSheet("color: #808080; font-size: 10px;")
        layout.addWidget(hint_label)

        self.setLayout(layout)

    def keyPressEvent(self, event: QKeyEvent):
        """Translate key presses into session events."""
        key = event.key()
        ctrl = event.modifiers() & Qt.KeyboardModifier.ControlModifier

        if key == Qt.Key.Key_Escape or (ctrl and key == Qt.Key.Key_C):
            self.deliver(Interrupt())
        elif self.session.done:
            return
        elif key == Qt.Key.Key_Space:
            self.deliver(Commit())
        elif key == Qt.Key.Key_Backspace:
            self.deliver(Backspace())
        else:
            text = event.text()
            if len(text) == 1 and text.isprintable() and not text.isspace() and not ctrl:
                self.start_clock()
                self.deliver(CharTyped(text))
            else:
                super().keyPressEvent(event)

    def start_clock(self) -> None:
        """Start the timers on the first typed character."""
        if self.clock.isValid():
            return

        self.clock.start()
        self.tick_timer.start()
        if self.session.config.is_timed:
            self.timeout_timer.start(self.session.config.duration_sec * 1000)
        log.debug("Session clock started")

    def on_tick(self) -> None:
        """Forward elapsed time to the session."""
        self.deliver(Tick(self.clock.elapsed() / 1000.0))

    def deliver(self, event: SessionEvent) -> None:
        """Apply an event and update the display.

        Args:
            event: Event for the session
        """
        if isinstance(event, Commit) and self.clock.isValid():
            # words mode finishes on commit; give it an up-to-date duration
            self.session.process_event(Tick(self.clock.elapsed() / 1000.0))

        self.session.process_event(event)

        if self.session.cancelled:
            self.stop_timers()
            self.close()
            return

        if self.session.done:
            self.stop_timers()
            self.show_stats(self.session.stats)

        self.refresh()

    def stop_timers(self) -> None:
        self.tick_timer.stop()
        self.timeout_timer.stop()

    def refresh(self) -> None:
        """Redraw status line and visible words."""
        remaining = self.session.remaining_sec
        if remaining is not None:
            self.status_label.setText(f"{int(round(remaining))}s")
        else:
            state = self.session.state
            self.status_label.setText(
                f"{state.active_index}/{self.session.config.word_count}"
            )

        lines = build_view(self.session.state, self.session.config)
        self.words_label.setText("<br>".join(self._line_html(line) for line in lines))

    def show_stats(self, stats: SessionStats) -> None:
        """Show the final statistics.

        Args:
            stats: SessionStats of the finished session
        """
        if stats.has_keystrokes:
            accuracy = f"{stats.accuracy}%"
        else:
            accuracy = "no data"
        self.stats_label.setText(
            f"WPM: {stats.wpm}    Accuracy: {accuracy}\n"
            f"Words: {stats.correct_words} correct, {stats.incorrect_words} incorrect    "
            f"Keystrokes: {stats.correct_chars} correct, {stats.incorrect_chars} incorrect"
        )
        self.stats_label.show()

    @staticmethod
    def _line_html(line) -> str:
        parts = []
        for span in line:
            text = html.escape(span.text).replace(" ", "&nbsp;")
            if span.kind == CharKind.CURSOR:
                parts.append(
                    f'<span style="color: #1e1e1e; background-color: '
                    f'{CHAR_COLORS[span.kind]};">{text}</span>'
                )
            else:
                parts.append(
                    f'<span style="color: {CHAR_COLORS[span.kind]};">{text}</span>'
                )
        return "".join(parts)
