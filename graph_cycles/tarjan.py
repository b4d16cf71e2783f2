#!/usr/bin/env python3

from collections.abc import Hashable, Iterator
from typing import List, Optional, Tuple, TypeVar

from .type_defs import DirectedGraph

T = TypeVar("T", bound=Hashable)


def strongly_connected_components(graph: DirectedGraph[T]) -> List[Tuple[T, ...]]:
    """
    Tarjan's Algorithm (named for its discoverer, Robert Tarjan) is a graph theory algorithm
    for finding the strongly connected components of a graph.

    Components are returned in the order in which Tarjan's algorithm completes them, ie. a
    component comes before every component it can be reached from. The nodes of a component
    are listed in the order they were discovered.

    The depth first search keeps its own stack of successor iterators instead of recursing,
    so the size of a component is not limited by the interpreter's recursion limit.

    Based on: http://en.wikipedia.org/wiki/Tarjan%27s_strongly_connected_components_algorithm
    """

    bound = graph.node_bound()
    index: List[Optional[int]] = [None] * bound
    lowlinks: List[int] = [0] * bound
    on_stack: List[bool] = [False] * bound
    index_counter = 0
    stack: List[T] = []
    result: List[Tuple[T, ...]] = []

    def discover(node: T) -> Tuple[T, int, Iterator[T]]:
        nonlocal index_counter
        # set the depth index for this node to the smallest unused index
        node_idx = graph.to_index(node)
        index[node_idx] = index_counter
        lowlinks[node_idx] = index_counter
        index_counter += 1
        stack.append(node)
        on_stack[node_idx] = True
        return node, node_idx, iter(graph.neighbors(node))

    for root in graph.node_identifiers():
        if index[graph.to_index(root)] is not None:
            continue

        work = [discover(root)]
        while work:
            node, node_idx, successors = work[-1]

            # Consider successors of `node`
            for successor in successors:
                successor_idx = graph.to_index(successor)
                if index[successor_idx] is None:
                    # Successor has not yet been visited; descend into it and
                    # come back to the remaining successors later
                    work.append(discover(successor))
                    break
                if on_stack[successor_idx]:
                    # the successor is in the stack and hence in the current
                    # strongly connected component (SCC)
                    lowlinks[node_idx] = min(lowlinks[node_idx], index[successor_idx])
            else:
                work.pop()
                if work:
                    parent_idx = work[-1][1]
                    lowlinks[parent_idx] = min(lowlinks[parent_idx], lowlinks[node_idx])

                # If `node` is a root node, pop the stack and generate an SCC
                if lowlinks[node_idx] == index[node_idx]:
                    connected_component = []
                    while True:
                        successor = stack.pop()
                        on_stack[graph.to_index(successor)] = False
                        connected_component.append(successor)
                        if successor == node:
                            break
                    connected_component.reverse()
                    # storing the result
                    result.append(tuple(connected_component))

    return result
