#!/usr/bin/env python3

import sys
import time
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from .log import logger


def parse_edges(lines: Iterable[str], source: str = "<stdin>") -> Iterator[tuple[str, ...]]:
    """Yield `(node,)` or `(source, target)` for each non-empty line

    Everything after `#` is a comment.
    """
    for nr, line in enumerate(lines, start=1):
        if not (tokens := tuple(line.split("#", 1)[0].split())):
            continue
        if len(tokens) > 2:
            raise ValueError(f"{source}:{nr}: expected 'source target' or 'node', got {line!r}")
        yield tokens


def read_adjacency(paths: Sequence[Path]) -> dict[str, list[str]]:
    adjacency: dict[str, list[str]] = {}
    for path in paths:
        if str(path) == "-":
            tokens = list(parse_edges(sys.stdin))
        else:
            logger.debug("Read edges from %s", path)
            with path.open("r") as fp:
                tokens = list(parse_edges(fp, str(path)))

        for node, *successors in tokens:
            adjacency.setdefault(node, []).extend(successors)
    return adjacency


@dataclass(frozen=True, kw_only=True)
class OutputsFilePaths:
    log: Path
    graph: Path


def get_outputs_file_paths(outputs_folder: Path | None, outputs_filename: str) -> OutputsFilePaths:
    if not outputs_folder:
        outputs_folder = Path.home() / Path(".local", "graph-cycles", "outputs")
    outputs_folder.mkdir(parents=True, exist_ok=True)
    if not outputs_filename:
        outputs_filename = str(int(time.time()))
    return OutputsFilePaths(
        log=(outputs_folder / outputs_filename).with_suffix(".log"),
        graph=(outputs_folder / outputs_filename).with_suffix(".gv"),
    )
