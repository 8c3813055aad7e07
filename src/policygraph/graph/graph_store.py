from __future__ import annotations

import logging
import numbers
from typing import Dict, Hashable, Iterable, List, Optional, Tuple

import networkx as nx

from policygraph.config.settings import GraphConfig
from policygraph.errors import (
    DuplicateNodeError,
    NodeTypeError,
    ProbabilityRangeError,
    RootAsChildError,
    UnknownNodeError,
)
from policygraph.utils.helpers import in_unit_interval, probability_sum

Edge = Tuple[Tuple[Hashable, Hashable], float]


class Graph:
    """
    Probability-weighted directed graph with an implicit root node.

    Every node except the root must be added before an edge can refer
    to it, and no edge may enter the root. Parallel edges between the
    same pair of nodes are kept as separate entries.

    Nodes must share the root's type. Integer roots also accept any
    integral index, such as numpy.int64.
    """

    def __init__(self, root: Hashable) -> None:
        self._graph = nx.MultiDiGraph()
        self._graph.add_node(root)
        self._root = root
        self._node_type = type(root)
        self._edge_counter = 0

    # -------------------- Nodes --------------------

    @property
    def root(self) -> Hashable:
        return self._root

    def _accepts(self, node: Hashable) -> bool:
        if self._node_type is int:
            return isinstance(node, numbers.Integral)
        return isinstance(node, self._node_type)

    def add_node(self, node: Hashable) -> None:
        if node in self._graph or node == self._root:
            raise DuplicateNodeError(node)
        if not self._accepts(node):
            raise NodeTypeError(node, self._node_type)
        self._graph.add_node(node)

    def __contains__(self, node: Hashable) -> bool:
        return node in self._graph

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    # -------------------- Edges --------------------

    def add_edge(self, parent: Hashable, child: Hashable, probability: float) -> None:
        if not (parent == self._root or parent in self._graph):
            raise UnknownNodeError(parent)
        if child not in self._graph:
            raise UnknownNodeError(child)
        if child == self._root:
            raise RootAsChildError(parent, self._root)

        self._graph.add_edge(
            parent,
            child,
            probability=float(probability),
            order=self._edge_counter,
        )
        self._edge_counter += 1

    def children(self, node: Hashable) -> List[Tuple[Hashable, float]]:
        """
        Outgoing (child, probability) pairs of node, in insertion order.
        """
        if node not in self._graph:
            raise UnknownNodeError(node)
        edges = sorted(
            self._graph.out_edges(node, data=True),
            key=lambda edge: edge[2]["order"],
        )
        return [(child, data["probability"]) for _, child, data in edges]

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    # -------------------- Views --------------------

    @property
    def nodes(self) -> Dict[Hashable, List[Tuple[Hashable, float]]]:
        """
        Mapping node -> [(child, probability), ...], root included.
        """
        return {node: self.children(node) for node in self._graph.nodes}

    def to_networkx(self) -> nx.MultiDiGraph:
        return self._graph.copy()

    def __repr__(self) -> str:
        return (
            f"Graph(root={self._root!r}, nodes={self.node_count()}, "
            f"edges={self.edge_count()})"
        )


def validate_graph(graph: Graph, config: Optional[GraphConfig] = None) -> None:
    """
    Check that the outgoing probabilities of every node sum to a value
    in [0.0, 1.0].
    """
    tolerance = (config or GraphConfig()).probability_tolerance

    for node, children in graph.nodes.items():
        total = probability_sum(probability for _, probability in children)
        if not in_unit_interval(total, tolerance):
            raise ProbabilityRangeError(node, total)

    logging.getLogger("policygraph.graph").debug(
        "validated graph root=%r nodes=%d edges=%d",
        graph.root,
        graph.node_count(),
        graph.edge_count(),
    )


def build_graph(
    root: Hashable,
    nodes: Iterable[Hashable],
    edges: Iterable[Edge],
) -> Graph:
    """
    Create a graph from a root, a list of nodes and a list of
    ((parent, child), probability) edges.
    """
    graph = Graph(root)
    for node in nodes:
        graph.add_node(node)
    for (parent, child), probability in edges:
        graph.add_edge(parent, child, probability)
    return graph
