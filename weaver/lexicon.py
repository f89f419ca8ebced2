"""Sorted word list with binary-search lookup, and word list file loading."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator
from pathlib import Path

from weaver.constants import DEFAULT_WORDS_PATH, MIN_WORD_LENGTH


class InvalidInputError(ValueError):
    """The word list is empty or mixes word lengths."""

    def __init__(self, message: str, expected: int | None = None,
                 found: int | None = None) -> None:
        super().__init__(message)
        self.expected = expected
        self.found = found


class WordNotFoundError(LookupError):
    """A queried word is not in the word list."""

    def __init__(self, word: str) -> None:
        super().__init__(f"'{word}' does not exist in the word list")
        self.word = word


class Lexicon:
    """Immutable, sorted sequence of equal-length words.

    A word's index in the sorted sequence is its vertex id in the graph.
    """

    __slots__ = ("_words",)

    def __init__(self, words: tuple[str, ...]) -> None:
        self._words = words

    @classmethod
    def prepare(cls, words: Iterable[str]) -> Lexicon:
        """Validate, copy and sort *words*. The caller's data is left untouched."""
        clone = list(words)
        if not clone:
            raise InvalidInputError("word list must contain at least one word")
        length = len(clone[0])
        if length < MIN_WORD_LENGTH:
            raise InvalidInputError(
                f"words must be at least {MIN_WORD_LENGTH} character(s) long"
            )
        for word in clone[1:]:
            if len(word) != length:
                raise InvalidInputError(
                    f"word list contains words with lengths of {length} and "
                    f"{len(word)}. All words must be the same length.",
                    expected=length,
                    found=len(word),
                )
        clone.sort()
        return cls(tuple(clone))

    def lookup(self, word: str) -> int:
        """Return the index of *word*, raising WordNotFoundError if absent."""
        i = bisect_left(self._words, word)
        if i < len(self._words) and self._words[i] == word:
            return i
        raise WordNotFoundError(word)

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    @property
    def word_length(self) -> int:
        return len(self._words[0])

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, vertex: int) -> str:
        return self._words[vertex]

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        i = bisect_left(self._words, word)
        return i < len(self._words) and self._words[i] == word


def load_words(path: str | Path, length: int | None = None) -> list[str]:
    """Load words from a file (one word per line).

    Lines are trimmed and lowercased; blank lines are skipped. When *length*
    is given, only words of exactly that length are kept.
    """
    words: list[str] = []
    with open(path) as f:
        for line in f:
            word = line.strip().lower()
            if not word:
                continue
            if length is not None and len(word) != length:
                continue
            words.append(word)
    return words


def load_default_words(length: int | None = None) -> list[str]:
    """Load the word list from the data/ directory."""
    path = DEFAULT_WORDS_PATH
    if not path.exists():
        raise FileNotFoundError(
            f"Word list not found at {path}. "
            "Place a word list (one word per line) at data/words.txt"
        )
    return load_words(path, length=length)
