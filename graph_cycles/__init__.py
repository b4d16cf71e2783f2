#!/usr/bin/env python3
"""Find all elementary cycles of a directed graph with Johnson's algorithm"""

from .cycles import cycles, visit_all_cycles, visit_cycles
from .digraphs import AdjacencyGraph, as_directed_graph, NetworkXGraph
from .type_defs import Break, Continue, CONTINUE, DirectedGraph

__version__ = "0.1.0"

__all__ = [
    "AdjacencyGraph",
    "as_directed_graph",
    "Break",
    "Continue",
    "CONTINUE",
    "cycles",
    "DirectedGraph",
    "NetworkXGraph",
    "visit_all_cycles",
    "visit_cycles",
]
