#!/usr/bin/env python3

import itertools
import random
import sys
from collections.abc import Hashable, Iterable, Iterator, Sequence
from pathlib import Path
from typing import NamedTuple, TypeVar

from graphviz import Digraph

from .log import logger


class CycleEdge(NamedTuple):
    title: str
    from_node: str
    to_node: str
    edge_color: str


T = TypeVar("T")
TH = TypeVar("TH", bound=Hashable)


def make_graph(filepath: Path, cycles: Sequence[tuple[TH, ...]], view: bool = False) -> None:
    sys.stderr.write(f"Write graph data to {filepath}\n")

    if not (edges := make_cycle_edges(cycles)):
        logger.debug("No such edges for graph")
        return

    d = make_digraph(filepath, edges)
    d.save()
    if view:
        d.view()


def make_digraph(filepath: Path, edges: Iterable[CycleEdge]) -> Digraph:
    d = Digraph("cycles", filename=str(filepath))

    with d.subgraph() as ds:
        for edge in edges:
            ds.node(edge.from_node)
            ds.node(edge.to_node)
            ds.attr("edge", color=edge.edge_color)
            ds.edge(edge.from_node, edge.to_node, edge.title)

    return d


def pairwise(iterable: Iterable[T]) -> Iterator[tuple[T, T]]:
    # pairwise('ABCDEFG') --> AB BC CD DE EF FG
    a, b = itertools.tee(iterable)
    next(b, None)
    return zip(a, b)


def closed_pairwise(cycle: Sequence[T]) -> Iterator[tuple[T, T]]:
    # closed_pairwise('ABC') --> AB BC CA
    return pairwise(itertools.chain(cycle, cycle[:1]))


def make_cycle_edges(cycles: Sequence[tuple[TH, ...]]) -> Sequence[CycleEdge]:
    edges: set[CycleEdge] = set()
    for nr, cycle in enumerate(cycles, start=1):
        color = "#{:02x}{:02x}{:02x}".format(  # pylint: disable=consider-using-f-string
            random.randint(50, 200),
            random.randint(50, 200),
            random.randint(50, 200),
        )

        for from_node, to_node in closed_pairwise(cycle):
            edges.add(
                CycleEdge(
                    f"{str(nr)} ({len(cycle)})",
                    str(from_node),
                    str(to_node),
                    color,
                )
            )
    return sorted(edges)
