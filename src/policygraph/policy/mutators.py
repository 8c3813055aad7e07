"""
Node mutators.

Called from inside a construction callback to describe the node that
owns a subproblem. Each one resolves the node through the registry of
the policy graph currently being assembled.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from policygraph.errors import (
    DuplicateParameterizeError,
    DuplicateStateError,
    LengthMismatchError,
    UnknownSubproblemError,
)
from policygraph.graph.graph_schema import Noise, State
from policygraph.policy.node import Node, ObjectiveSense
from policygraph.policy.registry import active_registry, resolve_node
from policygraph.utils.helpers import uniform_probabilities


def get_node(subproblem: Any) -> Node:
    return resolve_node(subproblem)


def get_policy_graph(subproblem: Any) -> Any:
    """
    The policy graph under construction that owns `subproblem`.
    """
    registry = active_registry()
    if registry is None or subproblem not in registry:
        raise UnknownSubproblemError(subproblem)
    return registry.owner


def add_state_variable(subproblem: Any, name: str, incoming: Any, outgoing: Any) -> None:
    """
    Register `incoming` and `outgoing` as the state variable `name`.

    The incoming variable is fixed to 0.0 as a placeholder; its value is
    supplied when the subproblem is solved. Names must be unique per node.

    Example:

        x = subproblem.add_variable("x")
        x_next = subproblem.add_variable("x_next")
        add_state_variable(subproblem, "x", x, x_next)
    """
    node = get_node(subproblem)
    if name in node.states:
        raise DuplicateStateError(name)
    incoming.fix(0.0)
    node.states[name] = State(incoming, outgoing)


def parameterize(
    subproblem: Any,
    realizations: Sequence[Any],
    probabilities: Optional[Sequence[float]] = None,
    modify: Optional[Callable[[Any], Any]] = None,
) -> Any:
    """
    Attach stagewise-independent noise to a subproblem.

    `modify(realization)` is stored on the node and called later with
    one sampled realization. It should also accept values outside
    `realizations` so out-of-sample simulation works. Probabilities
    default to uniform. Can be used as a decorator:

        @parameterize(subproblem, [1, 2, 3], [0.4, 0.3, 0.3])
        def _(noise):
            x.upper_bound = noise
    """
    node = get_node(subproblem)
    if node.noise_terms:
        raise DuplicateParameterizeError(node.index)

    realizations = list(realizations)
    if probabilities is None:
        probabilities = uniform_probabilities(len(realizations))
    probabilities = [float(p) for p in probabilities]
    if len(realizations) != len(probabilities):
        raise LengthMismatchError(len(realizations), len(probabilities))

    for realization, probability in zip(realizations, probabilities):
        node.noise_terms.append(Noise(realization, probability))

    if modify is not None:
        node.parameterize = modify
        return None

    def decorator(function: Callable[[Any], Any]) -> Callable[[Any], Any]:
        node.parameterize = function
        return function

    return decorator


def set_stage_objective(subproblem: Any, sense: Any, stage_objective: Any) -> None:
    """
    Set the stage objective and optimization sense (Min or Max).

    Repeated calls replace the previous objective.
    """
    parsed = ObjectiveSense.parse(sense)
    node = get_node(subproblem)
    node.stage_objective = stage_objective
    node.optimization_sense = parsed
