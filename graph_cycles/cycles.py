#!/usr/bin/env python3

from collections.abc import Callable, Hashable
from typing import Any, List, Optional, Tuple, TypeVar

from .digraphs import as_directed_graph
from .johnson import CycleFinder
from .log import logger
from .tarjan import strongly_connected_components
from .type_defs import ControlFlow

T = TypeVar("T", bound=Hashable)
B = TypeVar("B")
G = TypeVar("G")


def visit_cycles(
    graph: G,
    visitor: Callable[[G, Tuple[T, ...]], ControlFlow[B]],
) -> Optional[B]:
    """Apply the `visitor` to each cycle until we are told to stop

    The first argument passed to the visitor is the graph and the second one
    a tuple with all nodes that form the cycle. If at any point the visitor
    returns `Break(value)` no further cycles are visited and `value` is
    returned. Otherwise the return value is `None`.
    """
    directed_graph = as_directed_graph(graph)
    components = strongly_connected_components(directed_graph)
    logger.debug("Found %d strongly connected components", len(components))

    for nr, component in enumerate(components, start=1):
        found = 0

        def _visit(cycle: Tuple[T, ...]) -> ControlFlow[B]:
            nonlocal found
            found += 1
            return visitor(graph, cycle)

        logger.debug("Search component %d with %d vertices", nr, len(component))
        if (stop := CycleFinder(directed_graph, component).visit(_visit)) is not None:
            logger.debug("Stopped by visitor in component %d after %d cycles", nr, found)
            return stop.value
        logger.debug("Found %d cycles in component %d", found, nr)

    return None


def visit_all_cycles(graph: G, visitor: Callable[[G, Tuple[T, ...]], Any]) -> None:
    """Apply the `visitor` to each cycle

    The first argument passed to the visitor is the graph and the second one
    a tuple with all nodes that form the cycle. The return value of the
    visitor is ignored.
    """

    def _visit_all(g: G, cycle: Tuple[T, ...]) -> None:
        visitor(g, cycle)

    visit_cycles(graph, _visit_all)


def cycles(graph: Any) -> List[Tuple[Any, ...]]:
    """Find all cycles

    Each element of the returned list is a tuple of all nodes in one cycle.
    """
    found: List[Tuple[Any, ...]] = []
    visit_all_cycles(graph, lambda _g, cycle: found.append(cycle))
    return found
