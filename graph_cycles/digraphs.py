#!/usr/bin/env python3

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import Any, Final, Generic, TypeVar

import networkx as nx

from .type_defs import DirectedGraph

T = TypeVar("T", bound=Hashable)


class AdjacencyGraph(Generic[T]):
    """Directed graph given as a mapping from each node to its successors

    Nodes which only occur as successors are part of the graph, too.
    """

    def __init__(self, adjacency: Mapping[T, Iterable[T]]) -> None:
        self._successors: Final[dict[T, tuple[T, ...]]] = {
            node: tuple(successors) for node, successors in adjacency.items()
        }
        self._indices: Final[dict[T, int]] = {
            node: idx for idx, node in enumerate(self._successors)
        }
        for successors in self._successors.values():
            for successor in successors:
                self._indices.setdefault(successor, len(self._indices))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._successors!r})"

    def node_identifiers(self) -> Iterator[T]:
        return iter(self._indices)

    def neighbors(self, node: T) -> tuple[T, ...]:
        return self._successors.get(node, ())

    def node_bound(self) -> int:
        return len(self._indices)

    def to_index(self, node: T) -> int:
        return self._indices[node]


class NetworkXGraph(Generic[T]):
    def __init__(self, graph: nx.DiGraph) -> None:
        if not graph.is_directed():
            raise TypeError(f"Expected a directed graph, got {type(graph).__name__}")
        self._graph: Final = graph
        self._indices: Final[dict[T, int]] = {node: idx for idx, node in enumerate(graph)}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._graph!r})"

    def node_identifiers(self) -> Iterator[T]:
        return iter(self._graph)

    def neighbors(self, node: T) -> Iterator[T]:
        return self._graph.successors(node)

    def node_bound(self) -> int:
        return len(self._indices)

    def to_index(self, node: T) -> int:
        return self._indices[node]


def _implements_protocol(graph: object) -> bool:
    return all(
        callable(getattr(graph, name, None))
        for name in ("node_identifiers", "neighbors", "node_bound", "to_index")
    )


def as_directed_graph(graph: Any) -> DirectedGraph:
    if isinstance(graph, nx.Graph):
        return NetworkXGraph(graph)
    if _implements_protocol(graph):
        return graph
    if isinstance(graph, Mapping):
        return AdjacencyGraph(graph)
    raise TypeError(f"Cannot find cycles in a value of type {type(graph).__name__}")
