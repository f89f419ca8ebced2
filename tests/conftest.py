"""Shared fixtures for Weaver solver tests."""

from __future__ import annotations

import pytest

from weaver.graph import Graph, new_graph


@pytest.fixture
def animal_words() -> list[str]:
    """cat/dog ladder with a dead-end branch (cut)."""
    return ["cat", "cot", "cog", "dog", "dot", "cut"]


@pytest.fixture
def animal_graph(animal_words: list[str]) -> Graph:
    return new_graph(animal_words)


@pytest.fixture
def chain_graph() -> Graph:
    """Single path aaa -> aab -> abb -> bbb."""
    return new_graph(["bbb", "aab", "aaa", "abb"])


@pytest.fixture
def diamond_graph() -> Graph:
    """Four shortest ladders from cold to warm that split after cord.

    cold -> cord -> card -> ward -> warm
    cold -> cord -> word -> ward -> warm
    cold -> cord -> word -> worm -> warm
    cold -> cord -> corm -> worm -> warm
    """
    return new_graph([
        "cold", "cord", "card", "word", "ward", "warm",
        "corm", "worm", "wore",
    ])


@pytest.fixture
def four_letter_words() -> list[str]:
    """~40 four-letter words forming a connected neighbourhood around east/west."""
    return [
        "east", "bast", "base", "bass", "best", "beat", "belt", "bent",
        "cast", "cost", "fast", "fest", "fist", "last", "lest", "list",
        "lost", "mast", "most", "must", "nest", "past", "pest", "post",
        "rest", "rust", "test", "vast", "vest", "wast", "west", "wist",
        "zest", "oust", "just", "gust", "bust", "dust", "lust", "jest",
    ]
