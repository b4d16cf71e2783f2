#!/usr/bin/env python3
"""Find all elementary cycles of a directed graph given as edge lists

Each line of an edge list holds one edge 'source target' or a single node.
Everything after '#' is ignored.
"""

import argparse
import logging
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Optional

from . import __version__
from .cycles import visit_cycles
from .digraphs import AdjacencyGraph
from .files import get_outputs_file_paths, read_adjacency
from .graphs import make_graph
from .log import logger, setup_logging
from .type_defs import Break, CONTINUE, ControlFlow


def _parse_arguments(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="graph_cycles",
        description=__doc__,
        formatter_class=argparse.RawTextHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=__version__,
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="show additional information for debug purposes",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="show cycles if some are found",
    )
    parser.add_argument(
        "--outputs-folder",
        help="path to outputs folder. If not set $HOME/.local/graph-cycles/outputs/ is used",
    )
    parser.add_argument(
        "--outputs-filename",
        help="outputs filename. If not set the current timestamp is used",
    )
    parser.add_argument(
        "--graph",
        action="store_true",
        help="create graphical representation",
    )
    parser.add_argument(
        "--view",
        action="store_true",
        help="render and open the graphical representation, implies --graph",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=0,
        help="Stop after this number of cycles. If not set all cycles are searched.",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=0,
        help="Tolerate a certain number of cycles, ie. an upper threshold.",
    )
    parser.add_argument(
        "edges",
        nargs="+",
        type=Path,
        help="edge list files, '-' reads from stdin",
    )

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_arguments(argv)

    outputs_filepaths = get_outputs_file_paths(
        Path(args.outputs_folder) if args.outputs_folder else None,
        args.outputs_filename or "",
    )

    setup_logging(outputs_filepaths.log, args.debug)

    logger.info("Read edge lists")
    try:
        adjacency = read_adjacency(args.edges)
    except (OSError, ValueError) as e:
        sys.stderr.write(f"{e}\n")
        return 2

    graph = AdjacencyGraph(adjacency)

    logger.info("Detect cycles")
    found_cycles: list[tuple[str, ...]] = []

    def _collect(_graph: AdjacencyGraph[str], cycle: tuple[str, ...]) -> ControlFlow[int]:
        found_cycles.append(cycle)
        if args.limit and len(found_cycles) >= args.limit:
            return Break(len(found_cycles))
        return CONTINUE

    if (limit := visit_cycles(graph, _collect)) is not None:
        sys.stderr.write(f"Stopped after {limit} cycles\n")

    sys.stderr.write(f"Found {len(found_cycles)} cycles\n")
    _log_or_show_cycles(args.verbose, found_cycles)

    if args.graph or args.view:
        logger.info("Make graph")
        make_graph(outputs_filepaths.graph, found_cycles, view=args.view)

    return len(found_cycles) > args.threshold


#   .--helper--------------------------------------------------------------.
#   |                    _          _                                      |
#   |                   | |__   ___| |_ __   ___ _ __                      |
#   |                   | '_ \ / _ \ | '_ \ / _ \ '__|                     |
#   |                   | | | |  __/ | |_) |  __/ |                        |
#   |                   |_| |_|\___|_| .__/ \___|_|                        |
#   |                                |_|                                   |
#   '----------------------------------------------------------------------'


def _make_readable_cycles(cycles: Sequence[tuple[str, ...]]) -> Iterator[str]:
    for nr, cycle in enumerate(cycles, start=1):
        if cycle:
            yield f"  Cycle {nr}:"
            yield f"    {cycle[0]}"
            yield from (f"    > {node}" for node in cycle[1:])
            yield f"    > {cycle[0]}"


def _log_or_show_cycles(verbose: bool, cycles: Sequence[tuple[str, ...]]) -> None:
    if verbose:
        for line in _make_readable_cycles(cycles):
            sys.stderr.write(f"{line}\n")

    if _debug():
        logger.debug("Cycles:\n%s", "\n".join(_make_readable_cycles(cycles)))


def _debug() -> bool:
    return logger.level == logging.DEBUG
