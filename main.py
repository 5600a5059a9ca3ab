#!/usr/bin/env python3
"""StronglyTyped - typing test for the desktop."""

import argparse
import logging
import random
import signal
import sys
from pathlib import Path
from typing import Callable, Optional

from pydantic import ValidationError

from core.common_words import default_corpus
from core.corpus import Corpus
from core.errors import ConfigurationError
from core.events import Interrupt, SessionEvent
from core.session import TypingSession
from core.session_config import SessionConfig, SessionMode
from core.word_generator import WordGenerator
from utils.corpus_loader import detect_system_wordlist, load_corpus
from utils.logging_setup import setup_logging

log = logging.getLogger("stronglytyped")

SIGNAL_POLL_INTERVAL_MS = 200


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="stronglytyped",
        description="Typing test",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    tt = subparsers.add_parser("tt", help="Start typing test")
    tt.add_argument(
        "--length",
        type=int,
        default=30,
        help="Length of the test in seconds (default: 30)",
    )
    tt.add_argument(
        "--words",
        type=int,
        default=None,
        metavar="N",
        help="Type N words instead of a timed test",
    )
    tt.add_argument(
        "--words-per-line", type=int, default=10, help="Words per line (default: 10)"
    )
    tt.add_argument(
        "--lines", type=int, default=3, help="Visible lines (default: 3)"
    )
    tt.add_argument(
        "--min-length", type=int, default=2, help="Shortest word (default: 2)"
    )
    tt.add_argument(
        "--max-length", type=int, default=8, help="Longest word (default: 8)"
    )
    source = tt.add_mutually_exclusive_group()
    source.add_argument(
        "--wordlist", type=Path, help="Newline-separated word list to draw from"
    )
    source.add_argument(
        "--system-dict",
        action="store_true",
        help="Draw from the system word list (/usr/share/dict/words)",
    )
    tt.add_argument("--seed", type=int, help="Random seed for reproducible tests")
    return parser


def config_from_args(args: argparse.Namespace) -> SessionConfig:
    """Build a SessionConfig from parsed arguments.

    Raises:
        ValidationError: If an option is out of range
    """
    settings = {
        "words_per_line": args.words_per_line,
        "lines_per_page": args.lines,
        "min_word_length": args.min_length,
        "max_word_length": args.max_length,
        "duration_sec": args.length,
    }
    if args.words is not None:
        settings["mode"] = SessionMode.WORDS
        settings["word_count"] = args.words
    return SessionConfig(**settings)


def corpus_from_args(args: argparse.Namespace) -> Corpus:
    """Select the corpus requested on the command line.

    Raises:
        ConfigurationError: If no system word list is installed
        OSError: If the word list cannot be read
    """
    if args.wordlist is not None:
        return load_corpus(args.wordlist)
    if args.system_dict:
        path = detect_system_wordlist()
        if path is None:
            raise ConfigurationError("No system word list found")
        return load_corpus(path, alpha_only=True)
    return default_corpus()


def create_session(args: argparse.Namespace) -> TypingSession:
    """Create a typing session from parsed arguments.

    Raises:
        ValidationError: If an option is out of range
        ConfigurationError: If the corpus cannot supply words
        OSError: If the word list cannot be read
    """
    config = config_from_args(args)
    corpus = corpus_from_args(args)
    rng: Optional[random.Random] = None
    if args.seed is not None:
        rng = random.Random(args.seed)
    generator = WordGenerator(
        corpus, config.min_word_length, config.max_word_length, rng=rng
    )
    return TypingSession(config, generator)


def install_signal_handlers(deliver: Callable[[SessionEvent], None]) -> None:
    """Deliver Interrupt to the session on SIGINT and SIGTERM."""
    for signum in (signal.SIGINT, signal.SIGTERM):
        signal.signal(signum, lambda s, f: deliver(Interrupt()))


def start_signal_poll_timer(parent=None):
    """Start a repeating timer so Python signal handlers run inside the Qt loop.

    Python handlers only run when the interpreter gets control, which does
    not happen while Qt waits for window events.

    Args:
        parent: QObject owning the timer

    Returns:
        The running QTimer
    """
    from PySide6.QtCore import QTimer

    timer = QTimer(parent)
    timer.timeout.connect(lambda: None)
    timer.start(SIGNAL_POLL_INTERVAL_MS)
    return timer


def run_test(session: TypingSession) -> int:
    """Run the typing window until it is closed."""
    from PySide6.QtWidgets import QApplication

    from ui.typing_window import TypingWindow

    app = QApplication(sys.argv)
    window = TypingWindow(session)

    install_signal_handlers(window.deliver)
    signal_timer = start_signal_poll_timer(app)

    window.show()
    log.info("Starting Qt event loop...")
    ret = app.exec()
    log.info(f"Qt event loop exited with code: {ret}")
    signal_timer.stop()
    return ret


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    log_file = setup_logging(
        level=logging.DEBUG if args.verbose else logging.INFO, console=args.verbose
    )
    log.debug(f"Logging to {log_file}")

    try:
        session = create_session(args)
    except (ValidationError, ConfigurationError, OSError) as e:
        log.error(f"Cannot start typing test: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return run_test(session)


if __name__ == "__main__":
    sys.exit(main())
