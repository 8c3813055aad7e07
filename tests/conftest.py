from __future__ import annotations

import pytest

from policygraph.graph.graph_store import Graph
from policygraph.policy.mutators import (
    add_state_variable,
    parameterize,
    set_stage_objective,
)


class DummyOptimizer:
    def __init__(self, *args, **kwargs) -> None:
        self.args = args
        self.kwargs = kwargs


class RecordingBellman:
    """
    Bellman initializer that records what it saw.
    """

    def __init__(self) -> None:
        self.calls = []

    def __call__(self, policy_graph, node):
        self.calls.append(
            (node.index, len(node.children), len(node.noise_terms))
        )
        return ("bellman", node.index)


def storage_builder(subproblem, index) -> None:
    volume = subproblem.add_variable("volume")
    volume_out = subproblem.add_variable("volume_out", lower_bound=0.0)
    add_state_variable(subproblem, "volume", volume, volume_out)
    parameterize(subproblem, [0.0, 50.0, 100.0], modify=lambda inflow: None)
    set_stage_objective(subproblem, "Min", ("cost", index))


@pytest.fixture()
def parallel_edge_graph() -> Graph:
    graph = Graph(0)
    graph.add_node(1)
    graph.add_edge(0, 1, 0.3)
    graph.add_edge(0, 1, 0.4)
    return graph


@pytest.fixture()
def recording_bellman() -> RecordingBellman:
    return RecordingBellman()
