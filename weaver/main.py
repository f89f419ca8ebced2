"""CLI entry point for the Weaver solver."""

from __future__ import annotations

import argparse
import sys

from weaver.constants import DEFAULT_WORDS_PATH
from weaver.display import print_paths
from weaver.graph import new_graph
from weaver.lexicon import InvalidInputError, WordNotFoundError, load_words
from weaver.solver import play_weaver


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Weaver Solver: find every shortest word ladder between two words",
    )
    parser.add_argument("start", type=str, help="Starting word, e.g. east")
    parser.add_argument("end", type=str, help="Target word, e.g. west")
    parser.add_argument(
        "--words", "-w",
        type=str,
        default=str(DEFAULT_WORDS_PATH),
        help=f"Word list file, one word per line (default: {DEFAULT_WORDS_PATH})",
    )
    args = parser.parse_args(argv)
    args.start = args.start.strip().lower()
    args.end = args.end.strip().lower()
    if not args.start or not args.end:
        parser.error("start and end words must not be empty")
    return args


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    start, end = args.start, args.end

    # 1. Load words of the puzzle's length
    try:
        words = load_words(args.words, length=len(start))
    except FileNotFoundError:
        print(f"Word list not found: {args.words}")
        sys.exit(1)

    # 2. Build the graph
    try:
        graph = new_graph(words)
    except InvalidInputError as e:
        print(f"Invalid word list: {e}")
        sys.exit(1)
    print(f"Loaded {graph.word_count} words.")

    # 3. Solve
    try:
        paths = play_weaver(graph, start, end)
    except WordNotFoundError as e:
        print(f"Unknown word: {e.word}")
        sys.exit(1)

    # 4. Display
    print_paths(paths, start, end)
    if not paths:
        sys.exit(1)


if __name__ == "__main__":
    main()
