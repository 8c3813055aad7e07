from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Noise(Generic[T]):
    """
    An outcome paired with the probability of observing it.

    Used both for child transitions (term is a node index) and for
    stagewise-independent realizations (term is a noise value).
    """

    term: T
    probability: float


@dataclass(frozen=True)
class State:
    """
    The same physical decision variable observed at the start (incoming)
    and end (outgoing) of a stage.
    """

    incoming: Any
    outgoing: Any
