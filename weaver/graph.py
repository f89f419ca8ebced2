"""Adjacency graph of words that differ in exactly one letter."""

from __future__ import annotations

from collections.abc import Iterable

from weaver.lexicon import Lexicon


def is_adjacent(word1: str, word2: str) -> bool:
    """True if the words have equal length and differ in exactly one position."""
    if len(word1) != len(word2):
        return False
    differences = 0
    for a, b in zip(word1, word2):
        if a != b:
            differences += 1
            if differences > 1:
                return False
    return differences == 1


class Graph:
    """Undirected graph over a Lexicon; vertex ids are lexicon indices."""

    def __init__(self, words: Iterable[str]) -> None:
        self.lexicon = Lexicon.prepare(words)
        self._neighbors = self._build(self.lexicon)

    @staticmethod
    def _build(lexicon: Lexicon) -> tuple[tuple[int, ...], ...]:
        """Compare the lower triangle only; each hit updates both vertices."""
        adjacency: list[list[int]] = [[] for _ in range(len(lexicon))]
        words = lexicon.words
        for i, current in enumerate(words):
            for j in range(i):
                if is_adjacent(current, words[j]):
                    adjacency[i].append(j)
                    adjacency[j].append(i)
        return tuple(tuple(n) for n in adjacency)

    def neighbors(self, vertex: int) -> tuple[int, ...]:
        return self._neighbors[vertex]

    def word(self, vertex: int) -> str:
        return self.lexicon[vertex]

    def vertex(self, word: str) -> int:
        """Look up the vertex id of *word* (raises WordNotFoundError)."""
        return self.lexicon.lookup(word)

    def neighbor_words(self, word: str) -> list[str]:
        """Dictionary words one letter away from *word*, in sorted order."""
        return sorted(self.lexicon[n] for n in self._neighbors[self.vertex(word)])

    @property
    def words(self) -> tuple[str, ...]:
        return self.lexicon.words

    @property
    def word_count(self) -> int:
        return len(self.lexicon)

    @property
    def word_length(self) -> int:
        return self.lexicon.word_length

    @property
    def edge_count(self) -> int:
        return sum(len(n) for n in self._neighbors) // 2


def new_graph(words: Iterable[str]) -> Graph:
    """Build a Graph from a word list (raises InvalidInputError)."""
    return Graph(words)
