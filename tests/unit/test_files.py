#!/usr/bin/env python3

from pathlib import Path

import pytest

from graph_cycles.files import get_outputs_file_paths, parse_edges, read_adjacency


def test_parse_edges() -> None:
    lines = [
        "# comment",
        "a b",
        "",
        "  b\tc  # trailing comment",
        "d",
    ]
    assert list(parse_edges(lines)) == [("a", "b"), ("b", "c"), ("d",)]


def test_parse_edges_malformed_line() -> None:
    with pytest.raises(ValueError, match="edges.txt:2"):
        list(parse_edges(["a b", "a b c"], "edges.txt"))


def test_read_adjacency(tmp_path: Path) -> None:
    first = tmp_path / "first.txt"
    first.write_text("a b\nb c\n")
    second = tmp_path / "second.txt"
    second.write_text("c a\na c\nd\n")

    assert read_adjacency([first, second]) == {
        "a": ["b", "c"],
        "b": ["c"],
        "c": ["a"],
        "d": [],
    }


def test_get_outputs_file_paths(outputs_folder: Path) -> None:
    paths = get_outputs_file_paths(outputs_folder, "run")
    assert paths.log == outputs_folder / "run.log"
    assert paths.graph == outputs_folder / "run.gv"


def test_get_outputs_file_paths_creates_folder(tmp_path: Path) -> None:
    folder = tmp_path / "nested" / "outputs"
    paths = get_outputs_file_paths(folder, "")
    assert folder.is_dir()
    assert paths.log.parent == folder
    assert paths.log.stem.isdigit()
