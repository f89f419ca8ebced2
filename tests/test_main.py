"""Tests for terminal output and the command-line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from weaver.display import format_path, print_paths, render_paths
from weaver.main import main, parse_args


@pytest.fixture
def words_file(tmp_path: Path, animal_words: list[str]) -> Path:
    path = tmp_path / "words.txt"
    # Mixed lengths and casing: the CLI keeps only the start word's length
    path.write_text("\n".join(w.upper() for w in animal_words) + "\nbird\nfish\n")
    return path


class TestDisplay:
    def test_format_path(self) -> None:
        assert format_path(["cat", "cot", "cog"]) == "cat, cot, cog"

    def test_render_numbers_from_one(self) -> None:
        out = render_paths([["a", "b"], ["a", "c"]])
        assert out.splitlines() == ["Optimal path 1: a, b", "Optimal path 2: a, c"]

    def test_print_no_paths(self, capsys) -> None:
        print_paths([], "aaa", "zzz")
        assert "No path from aaa to zzz." in capsys.readouterr().out

    def test_print_summary(self, capsys) -> None:
        print_paths([["cat", "cot"]], "cat", "cot")
        out = capsys.readouterr().out
        assert "Found 1 optimal path(s) of 1 step(s):" in out
        assert "Optimal path 1: cat, cot" in out


class TestParseArgs:
    def test_positional(self) -> None:
        args = parse_args(["east", "west"])
        assert (args.start, args.end) == ("east", "west")

    def test_missing_arguments_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["east"])
        assert exc_info.value.code == 2

    @pytest.mark.parametrize("argv", [["", "dog"], ["   ", "dog"], ["cat", " "]])
    def test_empty_word_is_usage_error(self, argv: list[str], capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_args(argv)
        assert exc_info.value.code == 2
        assert "must not be empty" in capsys.readouterr().err

    def test_normalizes_words(self) -> None:
        args = parse_args(["  EAST ", "West"])
        assert (args.start, args.end) == ("east", "west")


class TestMain:
    def test_solves(self, words_file: Path, capsys) -> None:
        main(["cat", "dog", "--words", str(words_file)])
        out = capsys.readouterr().out
        assert "Loaded 6 words." in out
        assert "Optimal path 1: cat, cot, cog, dog" in out
        assert "Optimal path 2: cat, cot, dot, dog" in out

    def test_case_and_whitespace_insensitive(self, words_file: Path, capsys) -> None:
        main(["  CAT ", "Dog", "-w", str(words_file)])
        assert "Optimal path 1: cat, cot, cog, dog" in capsys.readouterr().out

    def test_unknown_word_exits(self, words_file: Path, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["cat", "pig", "-w", str(words_file)])
        assert exc_info.value.code == 1
        assert "Unknown word: pig" in capsys.readouterr().out

    def test_unreachable_exits(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "words.txt"
        path.write_text("aaa\nzzz\n")
        with pytest.raises(SystemExit) as exc_info:
            main(["aaa", "zzz", "-w", str(path)])
        assert exc_info.value.code == 1
        assert "No path from aaa to zzz." in capsys.readouterr().out

    def test_no_words_of_length(self, words_file: Path, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["weaver", "beaver", "-w", str(words_file)])
        assert exc_info.value.code == 1
        assert "Invalid word list" in capsys.readouterr().out

    def test_missing_word_list(self, tmp_path: Path, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["cat", "dog", "-w", str(tmp_path / "missing.txt")])
        assert exc_info.value.code == 1
        assert "Word list not found" in capsys.readouterr().out
