"""
Bellman-function hook for policygraph.

Only the initialization hook lives here; cut generation belongs to the
training subsystem.
"""

from policygraph.bellman.bellman_function import (
    AverageCut,
    BellmanFunction,
    ValueFunction,
    initialize_bellman_function,
)

__all__ = [
    "AverageCut",
    "BellmanFunction",
    "ValueFunction",
    "initialize_bellman_function",
]
