"""
Policy graph assembly for policygraph.

Binds every node of a validated Graph to a subproblem and collects the
metadata (states, noise, objective, Bellman function) a solver needs.
"""

from policygraph.policy.node import Node, ObjectiveSense
from policygraph.policy.registry import SubproblemRegistry
from policygraph.policy.policy_graph import PolicyGraph, build_policy_graph
from policygraph.policy.mutators import (
    add_state_variable,
    get_node,
    get_policy_graph,
    parameterize,
    set_stage_objective,
)

__all__ = [
    "Node",
    "ObjectiveSense",
    "SubproblemRegistry",
    "PolicyGraph",
    "build_policy_graph",
    "add_state_variable",
    "get_node",
    "get_policy_graph",
    "parameterize",
    "set_stage_objective",
]
