"""
policygraph
===========

Builds and validates the policy graph of a multistage stochastic
decision process: a probability-weighted directed graph over stages or
Markov states, with every node bound to an optimization subproblem.

Nothing is solved here; the assembled PolicyGraph is the structure a
stochastic dual dynamic programming solver traverses.

Public API:
- Graph, LinearGraph, MarkovianGraph
- PolicyGraph, build_policy_graph
- add_state_variable, parameterize, set_stage_objective
"""

from policygraph.graph import (
    Graph,
    LinearGraph,
    MarkovianGraph,
    Noise,
    State,
    build_graph,
    linear_graph,
    markovian_graph,
    validate_graph,
)
from policygraph.policy import (
    Node,
    ObjectiveSense,
    PolicyGraph,
    add_state_variable,
    build_policy_graph,
    get_node,
    get_policy_graph,
    parameterize,
    set_stage_objective,
)
from policygraph.bellman import AverageCut, BellmanFunction
from policygraph.subproblem import Subproblem, with_optimizer
from policygraph.config import PolicyGraphConfig, load_config

__all__ = [
    "Graph",
    "LinearGraph",
    "MarkovianGraph",
    "Noise",
    "State",
    "build_graph",
    "linear_graph",
    "markovian_graph",
    "validate_graph",
    "Node",
    "ObjectiveSense",
    "PolicyGraph",
    "add_state_variable",
    "build_policy_graph",
    "get_node",
    "get_policy_graph",
    "parameterize",
    "set_stage_objective",
    "AverageCut",
    "BellmanFunction",
    "Subproblem",
    "with_optimizer",
    "PolicyGraphConfig",
    "load_config",
]

__version__ = "0.1.0"
