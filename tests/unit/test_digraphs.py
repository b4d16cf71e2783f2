#!/usr/bin/env python3

import networkx as nx
import pytest

from graph_cycles.digraphs import AdjacencyGraph, as_directed_graph, NetworkXGraph


def test_adjacency_graph_nodes() -> None:
    graph = AdjacencyGraph({"a": ["c", "b"], "b": ["a"]})
    assert list(graph.node_identifiers()) == ["a", "b", "c"]
    assert [graph.to_index(n) for n in "abc"] == [0, 1, 2]
    assert graph.node_bound() == 3


def test_adjacency_graph_successor_only_node() -> None:
    graph = AdjacencyGraph({"a": ["b"]})
    assert graph.neighbors("a") == ("b",)
    assert graph.neighbors("b") == ()


def test_adjacency_graph_unknown_node() -> None:
    with pytest.raises(KeyError):
        AdjacencyGraph({"a": ["b"]}).to_index("x")


def test_networkx_graph() -> None:
    graph = NetworkXGraph(nx.DiGraph([(1, 2), (2, 3), (1, 3)]))
    assert list(graph.node_identifiers()) == [1, 2, 3]
    assert list(graph.neighbors(1)) == [2, 3]
    assert graph.node_bound() == 3
    assert graph.to_index(3) == 2


def test_networkx_undirected_graph() -> None:
    with pytest.raises(TypeError):
        NetworkXGraph(nx.Graph([(1, 2)]))


def test_as_directed_graph() -> None:
    graph = AdjacencyGraph({})
    assert as_directed_graph(graph) is graph
    assert isinstance(as_directed_graph({1: [2]}), AdjacencyGraph)
    assert isinstance(as_directed_graph(nx.DiGraph()), NetworkXGraph)


@pytest.mark.parametrize("value", [None, 42, [(1, 2)], nx.Graph()])
def test_as_directed_graph_unsupported(value: object) -> None:
    with pytest.raises(TypeError):
        as_directed_graph(value)
