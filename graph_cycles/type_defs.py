#!/usr/bin/env python3

from __future__ import annotations

import abc
from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, Union

T = TypeVar("T", bound=Hashable)
B = TypeVar("B")


class DirectedGraph(Protocol[T]):
    """The capabilities the cycle search needs from a graph"""

    @abc.abstractmethod
    def node_identifiers(self) -> Iterable[T]:
        ...

    @abc.abstractmethod
    def neighbors(self, node: T) -> Iterable[T]:
        ...

    @abc.abstractmethod
    def node_bound(self) -> int:
        ...

    @abc.abstractmethod
    def to_index(self, node: T) -> int:
        ...


@dataclass(frozen=True)
class Continue:
    pass


@dataclass(frozen=True)
class Break(Generic[B]):
    value: B


CONTINUE = Continue()

ControlFlow = Union[Continue, Break[B], None]
