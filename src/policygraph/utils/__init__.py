"""
Utility functions for policygraph.

Low-level numeric helpers used across the system.
No domain logic should live here.
"""

from policygraph.utils.helpers import (
    probability_sum,
    in_unit_interval,
    uniform_probabilities,
)

__all__ = [
    "probability_sum",
    "in_unit_interval",
    "uniform_probabilities",
]
