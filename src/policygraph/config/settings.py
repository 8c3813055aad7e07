from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from policygraph.subproblem.provider import OptimizerFactory

# ---------------------------------------------------------------------
# Graph validation
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Controls how probability-weighted graphs are validated.
    """

    # Opt-in slack around [0.0, 1.0] when summing outgoing probabilities.
    probability_tolerance: float = 0.0


# ---------------------------------------------------------------------
# Policy graph assembly
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class AssemblyConfig:
    """
    Controls how subproblems are created while assembling a policy graph.
    """

    direct_mode: bool = False
    optimizer: Optional[OptimizerFactory] = None


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class PolicyGraphConfig:
    """
    Root configuration object for policygraph.

    This object is intended to be:
    - constructed explicitly
    - passed to the builders and the assembly step
    - treated as immutable policy
    """

    graph: GraphConfig = field(default_factory=GraphConfig)
    assembly: AssemblyConfig = field(default_factory=AssemblyConfig)
