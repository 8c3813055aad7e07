from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Hashable, List, Optional

from policygraph.errors import InvalidSenseError
from policygraph.graph.graph_schema import Noise, State


class ObjectiveSense(str, Enum):
    MIN = "Min"
    MAX = "Max"

    @classmethod
    def parse(cls, sense: Any) -> "ObjectiveSense":
        if isinstance(sense, cls):
            return sense
        if isinstance(sense, str):
            key = sense.strip().lower()
            if key in {"min", "minimize", "minimise"}:
                return cls.MIN
            if key in {"max", "maximize", "maximise"}:
                return cls.MAX
        raise InvalidSenseError(sense)


def _no_op(noise: Any) -> None:
    return None


@dataclass
class Node:
    """
    Runtime record for one policy graph node.

    Created with empty metadata during the first assembly pass, filled in
    by the construction callback through the node mutators, then wired
    to its children and Bellman function in the second pass.
    """

    index: Hashable
    subproblem: Any
    children: List[Noise] = field(default_factory=list)
    noise_terms: List[Noise] = field(default_factory=list)
    # parameterize(noise) modifies the subproblem for one realization.
    parameterize: Callable[[Any], Any] = _no_op
    states: Dict[str, State] = field(default_factory=dict)
    stage_objective: Any = None
    optimization_sense: ObjectiveSense = ObjectiveSense.MIN
    bellman_function: Optional[Any] = None

    def __repr__(self) -> str:
        return (
            f"Node(index={self.index!r}, children={len(self.children)}, "
            f"noise_terms={len(self.noise_terms)}, states={list(self.states)})"
        )
