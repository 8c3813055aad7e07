from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Hashable, List


class BellmanFunction(ABC):
    """
    Factory for the value-function approximation attached to each node.

    initialize() is called exactly once per node, after the node's
    children and noise terms are final.
    """

    @abstractmethod
    def initialize(self, policy_graph: Any, node: Any) -> Any:
        raise NotImplementedError


@dataclass
class ValueFunction:
    """
    Empty outer approximation of a node's cost-to-go.
    """

    index: Hashable
    sense: Any
    num_children: int
    num_noise_terms: int
    cuts: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class AverageCut(BellmanFunction):
    """
    Single-cut approximation: cuts are averaged over children and noise.
    """

    def initialize(self, policy_graph: Any, node: Any) -> ValueFunction:
        return ValueFunction(
            index=node.index,
            sense=node.optimization_sense,
            num_children=len(node.children),
            num_noise_terms=len(node.noise_terms),
        )


def initialize_bellman_function(bellman_function: Any, policy_graph: Any, node: Any) -> Any:
    if isinstance(bellman_function, BellmanFunction):
        return bellman_function.initialize(policy_graph, node)
    if callable(bellman_function):
        return bellman_function(policy_graph, node)
    raise TypeError(
        "bellman_function must be a BellmanFunction or a callable "
        f"(policy_graph, node) -> value, got {type(bellman_function).__name__}."
    )
