"""All-shortest-paths search over the word graph."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from weaver.graph import Graph


def solve(graph: Graph, start: int, end: int) -> list[tuple[int, ...]]:
    """Return every shortest path from *start* to *end* as a tuple of vertices.

    An unreachable *end* yields an empty list. ``start == end`` yields the
    single one-vertex path.
    """
    predecessors = _level_search(graph, start, end)
    if predecessors is None:
        return []
    tree = _build_backtrack_tree(predecessors, end)
    return _paths_from_tree(tree)


def play_weaver(graph: Graph, start_word: str, end_word: str) -> list[list[str]]:
    """Solve a Weaver puzzle by word. Unknown words raise WordNotFoundError."""
    start = graph.vertex(start_word)
    end = graph.vertex(end_word)
    return [[graph.word(v) for v in path] for path in solve(graph, start, end)]


# ---------------------------------------------------------------------------
# Breadth-first search
# ---------------------------------------------------------------------------

def _level_search(graph: Graph, start: int, end: int) -> dict[int, list[int]] | None:
    """Level-synchronized BFS from *start*.

    Returns the predecessor map (vertex -> every vertex one level closer to
    *start* that reaches it), or None if *end* is unreachable.
    """
    predecessors: dict[int, list[int]] = {}
    visited: set[int] = {start}
    pending: set[int] = set()
    frontier: deque[int] = deque([start])
    found = False

    while frontier and not found:
        current, frontier = frontier, deque()

        # Drain the whole level, even after end shows up in it
        while current:
            vertex = current.popleft()
            if vertex == end:
                found = True
                continue
            for nxt in graph.neighbors(vertex):
                if nxt in visited:
                    continue
                predecessors.setdefault(nxt, []).append(vertex)
                if nxt not in pending:
                    pending.add(nxt)
                    frontier.append(nxt)

        # Finalize only at the level boundary so that every vertex of this
        # level is recorded as a predecessor of the next level's vertices.
        visited |= pending
        pending.clear()

    return predecessors if found else None


# ---------------------------------------------------------------------------
# Backtrack tree
# ---------------------------------------------------------------------------

class _TreeNode:
    __slots__ = ("vertex", "children")

    def __init__(self, vertex: int) -> None:
        self.vertex = vertex
        self.children: list[int] = []  # indices into the tree arena


def _build_backtrack_tree(predecessors: dict[int, list[int]], end: int) -> list[_TreeNode]:
    """Expand predecessors breadth-first from *end*; node 0 is the root.

    Nodes without predecessors are leaves and always hold the start vertex.
    """
    tree = [_TreeNode(end)]
    queue: deque[int] = deque([0])
    while queue:
        index = queue.popleft()
        for prev in predecessors.get(tree[index].vertex, ()):
            tree.append(_TreeNode(prev))
            child = len(tree) - 1
            tree[index].children.append(child)
            queue.append(child)
    return tree


def _paths_from_tree(tree: list[_TreeNode]) -> list[tuple[int, ...]]:
    """Collect one start-to-end path per root-to-leaf walk of the tree."""
    paths: list[tuple[int, ...]] = []
    trail: list[int] = []

    def _walk(index: int) -> None:
        node = tree[index]
        trail.append(node.vertex)
        if not node.children:
            paths.append(tuple(reversed(trail)))
        for child in node.children:
            _walk(child)
        trail.pop()

    _walk(0)
    return paths
