#!/usr/bin/env python3
"""Johnson's search for the elementary circuits of one strongly connected component

Donald B. Johnson,
Finding all the elementary circuits of a directed graph,
SIAM Journal on Computing, 1975.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from dataclasses import dataclass
from typing import Final, Generic, TypeVar

from .type_defs import Break, ControlFlow, DirectedGraph

T = TypeVar("T", bound=Hashable)
B = TypeVar("B")

CycleVisitor = Callable[[tuple[T, ...]], ControlFlow[B]]


@dataclass
class _Frame:
    vertex: int
    position: int = 0
    found: bool = False


class CycleFinder(Generic[T]):
    """Finds every elementary cycle of a single strongly connected component

    Vertices are addressed by their position in the component (local index).
    Successors outside of the component are ignored. Each cycle is reported
    exactly once, starting at its vertex with the lowest local index.

    Neither `circuit` nor `unblock` recurse; both keep an explicit stack so
    that large components do not exhaust the interpreter's call stack.
    """

    def __init__(self, graph: DirectedGraph[T], component: Sequence[T]) -> None:
        self._graph: Final = graph
        self._component: Final[tuple[T, ...]] = tuple(component)
        self._local_indices: Final[dict[T, int]] = {
            node: idx for idx, node in enumerate(self._component)
        }
        num_vertices = len(self._component)
        self._adjacency: list[tuple[int, ...] | None] = [None] * num_vertices
        self._blocked: list[bool] = [False] * num_vertices
        self._b: list[set[int]] = [set() for _ in range(num_vertices)]
        self._stack: list[T] = []
        self._s = 0

    def visit(self, visitor: CycleVisitor[T, B]) -> Break[B] | None:
        for s in range(len(self._component)):
            self._s = s
            for v in range(s, len(self._component)):
                self._blocked[v] = False
            for v in range(s + 1, len(self._component)):
                self._b[v].clear()

            if (stop := self._circuit(s, visitor)) is not None:
                return stop

            # A former root never becomes part of a path again
            self._blocked[s] = True
        return None

    def _circuit(self, root: int, visitor: CycleVisitor[T, B]) -> Break[B] | None:
        frames: list[_Frame] = []
        self._enter(root, frames)

        while frames:
            frame = frames[-1]
            adjacent_vertices = self._adjacent_vertices(frame.vertex)

            # L1
            if frame.position < len(adjacent_vertices):
                w = adjacent_vertices[frame.position]
                frame.position += 1
                if w == self._s:
                    if isinstance(stop := visitor(tuple(self._stack)), Break):
                        return stop
                    frame.found = True
                elif not self._blocked[w]:
                    self._enter(w, frames)
                continue

            # L2
            frames.pop()
            if frame.found:
                self._unblock(frame.vertex)
            else:
                for w in adjacent_vertices:
                    self._b[w].add(frame.vertex)
            self._stack.pop()

            if frames and frame.found:
                frames[-1].found = True

        return None

    def _enter(self, v: int, frames: list[_Frame]) -> None:
        self._stack.append(self._component[v])
        self._blocked[v] = True
        frames.append(_Frame(v))

    def _unblock(self, v: int) -> None:
        self._blocked[v] = False
        pending = [v]
        while pending:
            u = pending.pop()
            waiting, self._b[u] = self._b[u], set()
            for w in waiting:
                # Former roots and the current root stay blocked
                if self._blocked[w] and w > self._s:
                    self._blocked[w] = False
                    pending.append(w)

    def _adjacent_vertices(self, v: int) -> tuple[int, ...]:
        if (adjacent_vertices := self._adjacency[v]) is None:
            # dict.fromkeys drops parallel edges but keeps the order
            adjacent_vertices = tuple(
                dict.fromkeys(
                    self._local_indices[n]
                    for n in self._graph.neighbors(self._component[v])
                    if n in self._local_indices
                )
            )
            self._adjacency[v] = adjacent_vertices
        return adjacent_vertices

