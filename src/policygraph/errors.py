"""
Exception hierarchy for policygraph.

Every failure raised while describing a graph or assembling a policy
graph is a subclass of PolicyGraphError. Errors carry the offending
values as attributes so callers can diagnose without inspecting
internals.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple


class PolicyGraphError(ValueError):
    """
    Base class for all policygraph errors.
    """


# ---------------------------------------------------------------------
# Graph structure
# ---------------------------------------------------------------------


class DuplicateNodeError(PolicyGraphError):
    def __init__(self, node: Any) -> None:
        super().__init__(f"Node {node!r} already exists.")
        self.node = node


class UnknownNodeError(PolicyGraphError):
    def __init__(self, node: Any) -> None:
        super().__init__(f"Node {node!r} does not exist.")
        self.node = node


class NodeTypeError(PolicyGraphError):
    def __init__(self, node: Any, expected: type) -> None:
        super().__init__(
            f"Unable to add node {node!r}. Nodes must be of type "
            f"{expected.__name__}."
        )
        self.node = node
        self.expected = expected


class RootAsChildError(PolicyGraphError):
    def __init__(self, parent: Any, root: Any) -> None:
        super().__init__(
            f"Cannot have an edge entering the root node {root!r} "
            f"(from {parent!r})."
        )
        self.parent = parent
        self.root = root


class ProbabilityRangeError(PolicyGraphError):
    def __init__(self, node: Any, total: float) -> None:
        super().__init__(
            f"Probability on edges leaving node {node!r} sum to {total}, "
            "but this must be in [0.0, 1.0]."
        )
        self.node = node
        self.total = total


# ---------------------------------------------------------------------
# Transition matrices
# ---------------------------------------------------------------------


class RootTransitionShapeError(PolicyGraphError):
    def __init__(self, shape: Tuple[int, ...]) -> None:
        super().__init__(
            "Expected the first transition matrix to be of size (1, N). "
            f"It is of size {shape}."
        )
        self.shape = shape


class NegativeProbabilityError(PolicyGraphError):
    def __init__(self, stage: int, row: int, column: int, value: float) -> None:
        super().__init__(
            f"Entries in the transition matrix must be non-negative. Stage "
            f"{stage} has {value} at ({row}, {column})."
        )
        self.stage = stage
        self.row = row
        self.column = column
        self.value = value


class DimensionMismatchError(PolicyGraphError):
    def __init__(
        self,
        stage: int,
        expected: Optional[int],
        actual: Tuple[int, ...],
    ) -> None:
        if expected is None:
            message = (
                f"Transition matrix for stage {stage} must be two-dimensional. "
                f"It is of size {actual}."
            )
        else:
            message = (
                f"Transition matrix for stage {stage} is the wrong size. "
                f"Expected {expected} rows, got size {actual}."
            )
        super().__init__(message)
        self.stage = stage
        self.expected = expected
        self.actual = actual


# ---------------------------------------------------------------------
# Node construction
# ---------------------------------------------------------------------


class DuplicateStateError(PolicyGraphError):
    def __init__(self, name: Any) -> None:
        super().__init__(f"The state {name!r} already exists.")
        self.name = name


class DuplicateParameterizeError(PolicyGraphError):
    def __init__(self, node: Any) -> None:
        super().__init__(
            "Duplicate calls to parameterize detected on node "
            f"{node!r}. Only parameterize a subproblem at most one time."
        )
        self.node = node


class LengthMismatchError(PolicyGraphError):
    def __init__(self, realizations: int, probabilities: int) -> None:
        super().__init__(
            f"Got {realizations} realizations but {probabilities} "
            "probabilities."
        )
        self.realizations = realizations
        self.probabilities = probabilities


class InvalidSenseError(PolicyGraphError):
    def __init__(self, sense: Any) -> None:
        super().__init__(
            f"The optimization sense must be Min or Max. It is {sense!r}."
        )
        self.sense = sense


class UnknownSubproblemError(PolicyGraphError):
    def __init__(self, subproblem: Any) -> None:
        super().__init__(
            f"Subproblem {subproblem!r} is not attached to a policy graph "
            "under construction."
        )
        self.subproblem = subproblem


# ---------------------------------------------------------------------
# Subproblem provider
# ---------------------------------------------------------------------


class MissingOptimizerError(PolicyGraphError):
    def __init__(self) -> None:
        super().__init__(
            "You must specify an optimizer in the form "
            "with_optimizer(Optimizer, *args, **kwargs) if direct_mode=True."
        )
