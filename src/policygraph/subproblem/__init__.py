"""
Subproblem subsystem for policygraph.

Creates the optimization model bound to each policy graph node. The
model itself is opaque to the rest of the package.
"""

from policygraph.subproblem.model import Subproblem, Variable
from policygraph.subproblem.provider import (
    OptimizerFactory,
    SubproblemConfig,
    SubproblemProvider,
    construct_subproblem,
    with_optimizer,
)

__all__ = [
    "Subproblem",
    "Variable",
    "OptimizerFactory",
    "SubproblemConfig",
    "SubproblemProvider",
    "construct_subproblem",
    "with_optimizer",
]
