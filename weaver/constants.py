"""Weaver solver constants: word list location and output formatting."""

from pathlib import Path

# Default word list, one word per line
DEFAULT_WORDS_PATH: Path = Path(__file__).resolve().parent.parent / "data" / "words.txt"

MIN_WORD_LENGTH: int = 1

# Separator between words when a path is rendered on one line
PATH_SEPARATOR: str = ", "

# Weaver boards use four-letter words
DEFAULT_WORD_LENGTH: int = 4
