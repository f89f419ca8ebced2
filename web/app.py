"""Weaver solver web application, Flask backend."""
from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root is on sys.path so `weaver.*` imports work
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from flask import Flask, jsonify, request

from weaver.constants import DEFAULT_WORD_LENGTH
from weaver.graph import Graph, new_graph
from weaver.lexicon import InvalidInputError, WordNotFoundError, load_default_words
from weaver.solver import play_weaver

app = Flask(__name__)

# One graph per word length, built on first use and shared by every request
GRAPHS: dict[int, Graph] = {}


def get_graph(length: int) -> Graph:
    """Return the graph of default-list words of *length*.

    Raises FileNotFoundError if the word list is missing and
    InvalidInputError if it has no words of that length.
    """
    graph = GRAPHS.get(length)
    if graph is None:
        graph = new_graph(load_default_words(length=length))
        GRAPHS[length] = graph
    return graph


def _graph_or_error(length: int):
    """Return ``(graph, None)`` or ``(None, error_response)``."""
    try:
        return get_graph(length), None
    except FileNotFoundError as e:
        return None, (jsonify({"error": f"Word list unavailable: {e}"}), 503)
    except InvalidInputError:
        return None, (jsonify({"error": f"No words of length {length} in the word list"}), 404)


def _normalize(value: object) -> str:
    return value.strip().lower() if isinstance(value, str) else ""


@app.route("/")
def index():
    length = request.args.get("length", DEFAULT_WORD_LENGTH, type=int)
    graph, error = _graph_or_error(length)
    if error is not None:
        return error
    return jsonify({"word_count": graph.word_count, "word_length": graph.word_length})


@app.route("/solve", methods=["POST"])
def solve_route():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    start = _normalize(data.get("start"))
    end = _normalize(data.get("end"))
    if not start or not end:
        return jsonify({"error": "Both 'start' and 'end' words are required"}), 400

    graph, error = _graph_or_error(len(start))
    if error is not None:
        return error
    try:
        paths = play_weaver(graph, start, end)
    except WordNotFoundError as e:
        return jsonify({"error": f"Unknown word: {e.word}", "word": e.word}), 404

    return jsonify({
        "start": start,
        "end": end,
        "paths": paths,
        "count": len(paths),
        "steps": len(paths[0]) - 1 if paths else None,
    })


@app.route("/neighbors/<word>")
def neighbors(word: str):
    word = _normalize(word)
    graph, error = _graph_or_error(len(word))
    if error is not None:
        return error
    try:
        words = graph.neighbor_words(word)
    except WordNotFoundError as e:
        return jsonify({"error": f"Unknown word: {e.word}", "word": e.word}), 404
    return jsonify({"word": word, "neighbors": words})


if __name__ == "__main__":
    graph = get_graph(DEFAULT_WORD_LENGTH)
    print(f"Word list loaded: {graph.word_count} words, {graph.edge_count} links")
    app.run(debug=True, host="0.0.0.0", port=8080)
