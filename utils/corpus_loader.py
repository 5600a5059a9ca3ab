"""Word list loading and system word list detection."""

import logging
from pathlib import Path
from typing import Optional

from core.corpus import Corpus
from core.errors import ConfigurationError

log = logging.getLogger("stronglytyped.corpus_loader")

COMMON_SYSTEM_PATHS = [
    "/usr/share/dict",
    "/usr/dict",
    str(Path.home() / ".local" / "share" / "dict"),
]

# Preferred English word list names, most common first
WORDLIST_NAMES = ["words", "american-english", "british-english", "english"]


def load_corpus(path: Path, alpha_only: bool = False) -> Corpus:
    """Load a newline-separated word list.

    Args:
        path: Path to the word list (UTF-8)
        alpha_only: Drop entries containing non-letters (e.g. "aaron's")

    Returns:
        Corpus in file order

    Raises:
        ConfigurationError: If the file is not valid UTF-8
        OSError: If the file cannot be read
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            corpus = Corpus.from_lines(f)
    except UnicodeDecodeError as e:
        raise ConfigurationError(
            f"Word list {path} is not valid UTF-8: {e.reason} at byte {e.start}"
        ) from e

    if alpha_only:
        corpus = Corpus(word for word in corpus if word.isalpha())

    log.info(f"Loaded {len(corpus)} words from {path}")
    return corpus


def validate_wordlist(path: Path) -> bool:
    """Check if file looks like a word list (one word per line).

    Args:
        path: Path to file to validate

    Returns:
        True if the file is readable and has content in its first lines
    """
    if not path.is_file():
        return False

    try:
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            for line_count, line in enumerate(f):
                if line.strip():
                    return True
                if line_count >= 10:
                    break
        return False
    except PermissionError:
        return False


def detect_system_wordlist() -> Optional[Path]:
    """Find an English system word list.

    Returns:
        Path of the first usable list, or None if none is installed
    """
    for base_path_str in COMMON_SYSTEM_PATHS:
        base_path = Path(base_path_str)
        if not base_path.is_dir():
            continue

        for name in WORDLIST_NAMES:
            candidate = base_path / name
            if validate_wordlist(candidate):
                log.debug(f"Found system word list: {candidate}")
                return candidate

    log.info("No system word list found")
    return None


__all__ = ["detect_system_wordlist", "load_corpus", "validate_wordlist"]
