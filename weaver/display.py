"""Terminal rendering of Weaver solutions."""

from __future__ import annotations

from collections.abc import Sequence

from weaver.constants import PATH_SEPARATOR


def format_path(path: Sequence[str]) -> str:
    return PATH_SEPARATOR.join(path)


def render_paths(paths: Sequence[Sequence[str]]) -> str:
    """Render each path on its own numbered line."""
    return "\n".join(
        f"Optimal path {i}: {format_path(path)}" for i, path in enumerate(paths, start=1)
    )


def print_paths(paths: Sequence[Sequence[str]], start: str, end: str) -> None:
    """Print the solutions, or a notice when *end* cannot be reached."""
    if not paths:
        print(f"No path from {start} to {end}.")
        return
    steps = len(paths[0]) - 1
    print(f"Found {len(paths)} optimal path(s) of {steps} step(s):")
    print(render_paths(paths))
