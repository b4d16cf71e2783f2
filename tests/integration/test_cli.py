#!/usr/bin/env python3

from pathlib import Path

import pytest

from graph_cycles.cli import main


@pytest.fixture(name="edges")
def fixture_edges(tmp_path: Path) -> Path:
    p = tmp_path / "edges.txt"
    p.write_text(
        "\n".join(
            [
                "# two cycles sharing a",
                "a b",
                "b a",
                "a c",
                "c d",
                "d a",
                "e",
            ]
        )
    )
    return p


def test_cycles_found(edges: Path, outputs_folder: Path, capsys: pytest.CaptureFixture) -> None:
    assert main(["--outputs-folder", str(outputs_folder), "-v", str(edges)])
    err = capsys.readouterr().err
    assert "Found 2 cycles" in err
    assert "Cycle 2:" in err


def test_threshold(edges: Path, outputs_folder: Path) -> None:
    assert not main(["--outputs-folder", str(outputs_folder), "--threshold", "2", str(edges)])


def test_limit(edges: Path, outputs_folder: Path, capsys: pytest.CaptureFixture) -> None:
    main(["--outputs-folder", str(outputs_folder), "--limit", "1", str(edges)])
    err = capsys.readouterr().err
    assert "Stopped after 1 cycles" in err
    assert "Found 1 cycles" in err


def test_graph(edges: Path, outputs_folder: Path) -> None:
    main(
        [
            "--outputs-folder",
            str(outputs_folder),
            "--outputs-filename",
            "run",
            "--graph",
            str(edges),
        ]
    )
    assert "a -> b" in (outputs_folder / "run.gv").read_text()


def test_debug_log(edges: Path, outputs_folder: Path) -> None:
    main(["--outputs-folder", str(outputs_folder), "--outputs-filename", "run", "-d", str(edges)])
    assert "strongly connected components" in (outputs_folder / "run.log").read_text()


def test_malformed_edges(tmp_path: Path, outputs_folder: Path) -> None:
    p = tmp_path / "bad.txt"
    p.write_text("a b c\n")
    assert main(["--outputs-folder", str(outputs_folder), str(p)]) == 2
