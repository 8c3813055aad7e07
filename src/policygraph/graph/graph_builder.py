from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from policygraph.config.settings import GraphConfig
from policygraph.errors import (
    DimensionMismatchError,
    NegativeProbabilityError,
    ProbabilityRangeError,
    RootTransitionShapeError,
)
from policygraph.graph.graph_store import Edge, Graph, build_graph
from policygraph.utils.helpers import in_unit_interval

MarkovNode = Tuple[int, int]


def linear_graph(stages: int) -> Graph:
    """
    Chain 0 -> 1 -> ... -> stages, every edge with probability 1.0.

    Node 0 is the root.
    """
    if stages < 0:
        raise ValueError(f"Number of stages must be non-negative, got {stages}.")

    edges: List[Edge] = [((t - 1, t), 1.0) for t in range(1, stages + 1)]
    return build_graph(0, list(range(1, stages + 1)), edges)


def markovian_graph(
    transition_matrices: Optional[Sequence[Sequence[Sequence[float]]]] = None,
    *,
    stages: Optional[int] = None,
    transition_matrix: Optional[Sequence[Sequence[float]]] = None,
    root_node_transition: Optional[Sequence[float]] = None,
    config: Optional[GraphConfig] = None,
) -> Graph:
    """
    Build a Markov-chain policy graph.

    Either pass a sequence of transition matrices, where matrix t has
    entry [i][j] = probability of moving from Markov state i in stage
    t-1 to Markov state j in stage t, or use the keyword form, which
    describes a homogeneous chain:

        markovian_graph(
            stages=3,
            transition_matrix=[[0.8, 0.2], [0.3, 0.7]],
            root_node_transition=[0.5, 0.5],
        )

    Nodes are (stage, markov_state) pairs, both 1-based; the root is
    (0, 1). Zero-probability transitions are not added as edges.

    The keyword form defaults to stages=1, transition_matrix=[[1.0]] and
    root_node_transition=[1.0]. Mixing both forms raises ValueError.
    """
    keywords = (stages, transition_matrix, root_node_transition)
    if transition_matrices is None:
        transition_matrices = _homogeneous_matrices(
            1 if stages is None else stages,
            [[1.0]] if transition_matrix is None else transition_matrix,
            [1.0] if root_node_transition is None else root_node_transition,
        )
    elif any(value is not None for value in keywords):
        raise ValueError(
            "Pass either transition_matrices or the stages, "
            "transition_matrix and root_node_transition keywords, not both."
        )

    tolerance = (config or GraphConfig()).probability_tolerance
    matrices = [np.asarray(m, dtype=float) for m in transition_matrices]

    if not matrices or matrices[0].ndim != 2 or matrices[0].shape[0] != 1:
        shape = matrices[0].shape if matrices else (0,)
        raise RootTransitionShapeError(tuple(shape))

    root: MarkovNode = (0, 1)
    nodes: List[MarkovNode] = []
    edges: List[Edge] = []

    for stage, transition in enumerate(matrices, start=1):
        if transition.ndim != 2:
            raise DimensionMismatchError(stage, None, tuple(transition.shape))

        negative = np.argwhere(transition < 0.0)
        if negative.size:
            row, column = (int(i) for i in negative[0])
            raise NegativeProbabilityError(
                stage, row + 1, column + 1, float(transition[row, column])
            )

        for row, total in enumerate(transition.sum(axis=1), start=1):
            if not in_unit_interval(float(total), tolerance):
                raise ProbabilityRangeError((stage - 1, row), float(total))

        if stage > 1:
            expected = matrices[stage - 2].shape[1]
            if transition.shape[0] != expected:
                raise DimensionMismatchError(
                    stage, expected, tuple(transition.shape)
                )

        rows, columns = transition.shape
        for markov_state in range(1, columns + 1):
            nodes.append((stage, markov_state))

        for markov_state in range(1, columns + 1):
            for last_markov_state in range(1, rows + 1):
                probability = float(
                    transition[last_markov_state - 1, markov_state - 1]
                )
                if probability > 0.0:
                    edges.append(
                        (
                            ((stage - 1, last_markov_state), (stage, markov_state)),
                            probability,
                        )
                    )

    logging.getLogger("policygraph.graph").debug(
        "markovian graph: stages=%d nodes=%d edges=%d",
        len(matrices),
        len(nodes),
        len(edges),
    )
    return build_graph(root, nodes, edges)


def _homogeneous_matrices(
    stages: int,
    transition_matrix: Sequence[Sequence[float]],
    root_node_transition: Sequence[float],
) -> List[np.ndarray]:
    root_row = np.asarray(root_node_transition, dtype=float).reshape(1, -1)
    matrix = np.asarray(transition_matrix, dtype=float)
    return [root_row] + [matrix for _ in range(stages - 1)]


# Aliases matching the graph names used in the modelling literature.
LinearGraph = linear_graph
MarkovianGraph = markovian_graph
