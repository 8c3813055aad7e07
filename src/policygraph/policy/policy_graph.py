from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Hashable, Iterator, List, Optional

from policygraph.bellman.bellman_function import AverageCut, initialize_bellman_function
from policygraph.config.settings import PolicyGraphConfig
from policygraph.graph.graph_schema import Noise
from policygraph.graph.graph_store import Graph, validate_graph
from policygraph.policy.node import Node
from policygraph.policy.registry import SubproblemRegistry, activate
from policygraph.subproblem.provider import (
    OptimizerFactory,
    SubproblemConfig,
    SubproblemFactory,
    SubproblemProvider,
)

Builder = Callable[[Any, Hashable], None]


class PolicyGraph:
    """
    Nodes of a policy graph bound to their subproblems.

    Children of each node are stored as indices into `nodes`, so cyclic
    index graphs do not create ownership cycles.
    """

    def __init__(self) -> None:
        self.root_children: List[Noise] = []
        self.nodes: Dict[Hashable, Node] = {}
        self.registry = SubproblemRegistry(self)

    def __getitem__(self, index: Hashable) -> Node:
        return self.nodes[index]

    def __contains__(self, index: Hashable) -> bool:
        return index in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.nodes)

    def get_subproblem(self, index: Hashable) -> Any:
        return self.nodes[index].subproblem

    def node_for(self, subproblem: Any) -> Node:
        return self.registry.lookup(subproblem)

    def __repr__(self) -> str:
        return (
            f"PolicyGraph(nodes={len(self.nodes)}, "
            f"root_children={len(self.root_children)})"
        )


def build_policy_graph(
    builder: Builder,
    graph: Graph,
    *,
    bellman_function: Any = None,
    optimizer: Optional[OptimizerFactory] = None,
    direct_mode: Optional[bool] = None,
    provider: Optional[SubproblemFactory] = None,
    config: Optional[PolicyGraphConfig] = None,
) -> PolicyGraph:
    """
    Construct a policy graph over the structure of `graph`.

    builder(subproblem, index) is called once per non-root node and is
    expected to describe the subproblem and call the node mutators
    (add_state_variable, parameterize, set_stage_objective). Nodes are
    visited in no guaranteed order.

    Example:

        def builder(subproblem, stage):
            x = subproblem.add_variable("x")
            x_next = subproblem.add_variable("x_next")
            add_state_variable(subproblem, "x", x, x_next)
            set_stage_objective(subproblem, "Min", x_next)

        model = build_policy_graph(builder, linear_graph(3))

    Arguments left as None fall back to `config` (or PolicyGraphConfig()).
    """
    config = config or PolicyGraphConfig()
    logger = logging.getLogger("policygraph.assembly")

    if bellman_function is None:
        bellman_function = AverageCut()
    if optimizer is None:
        optimizer = config.assembly.optimizer
    if direct_mode is None:
        direct_mode = config.assembly.direct_mode
    provider = provider or SubproblemProvider()
    subproblem_config = SubproblemConfig(optimizer=optimizer, direct_mode=direct_mode)

    validate_graph(graph, config.graph)

    policy_graph = PolicyGraph()
    edges = graph.nodes
    root = graph.root

    logger.info(
        "[assembly] start root=%r nodes=%d direct_mode=%s",
        root,
        len(edges) - 1,
        direct_mode,
    )

    # ---------------- Pass 1: create nodes ----------------

    with activate(policy_graph.registry):
        try:
            for index in edges:
                if index == root:
                    continue
                subproblem = provider.create(subproblem_config)
                # The Bellman function is initialized in pass 2, once the
                # node's children and noise terms are known.
                node = Node(index=index, subproblem=subproblem)
                policy_graph.nodes[index] = node
                policy_graph.registry.register(subproblem, node)

                try:
                    builder(subproblem, index)
                except Exception:
                    logger.warning("[assembly] builder failed on node %r", index)
                    raise

                if not node.noise_terms:
                    node.noise_terms.append(Noise(None, 1.0))
                logger.debug(
                    "[assembly] built node %r states=%d noise_terms=%d",
                    index,
                    len(node.states),
                    len(node.noise_terms),
                )
        except Exception:
            policy_graph.registry.clear()
            raise

    # ---------------- Pass 2: children and Bellman functions ----------------

    for index, children in edges.items():
        if index == root:
            continue
        node = policy_graph.nodes[index]
        for child, probability in children:
            node.children.append(Noise(child, probability))
        node.bellman_function = initialize_bellman_function(
            bellman_function, policy_graph, node
        )

    # ---------------- Root ----------------

    for child, probability in edges[root]:
        policy_graph.root_children.append(Noise(child, probability))

    logger.info(
        "[assembly] done nodes=%d root_children=%d",
        len(policy_graph.nodes),
        len(policy_graph.root_children),
    )
    return policy_graph
