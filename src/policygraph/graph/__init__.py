"""
Graph subsystem for policygraph.

Defines the probability-weighted graph that underlies a policy graph,
its validation rules, and the linear and Markovian builders.
"""

from policygraph.graph.graph_schema import Noise, State
from policygraph.graph.graph_store import Graph, build_graph, validate_graph
from policygraph.graph.graph_builder import (
    LinearGraph,
    MarkovianGraph,
    linear_graph,
    markovian_graph,
)

__all__ = [
    "Noise",
    "State",
    "Graph",
    "build_graph",
    "validate_graph",
    "LinearGraph",
    "MarkovianGraph",
    "linear_graph",
    "markovian_graph",
]
