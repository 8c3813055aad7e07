from __future__ import annotations

from typing import Iterable, List
import numpy as np


def probability_sum(values: Iterable[float]) -> float:
    vals = list(values)
    if not vals:
        return 0.0
    return float(np.sum(vals))


def in_unit_interval(value: float, tolerance: float = 0.0) -> bool:
    return -tolerance <= value <= 1.0 + tolerance


def uniform_probabilities(n: int) -> List[float]:
    if n == 0:
        return []
    return [1.0 / n] * n
