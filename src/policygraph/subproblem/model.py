from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Variable:
    """
    Handle to a decision variable owned by a Subproblem.
    """

    name: str
    lower_bound: Optional[float] = None
    upper_bound: Optional[float] = None
    fixed_value: Optional[float] = None

    @property
    def is_fixed(self) -> bool:
        return self.fixed_value is not None

    def fix(self, value: float) -> None:
        self.fixed_value = float(value)

    def unfix(self) -> None:
        self.fixed_value = None


class Subproblem:
    """
    Minimal optimization model container bound to one policy graph node.

    policygraph never inspects a subproblem; it only threads it through
    the construction callback. Any object can stand in for this class as
    long as the variables handed to add_state_variable support fix().
    """

    def __init__(
        self,
        *,
        optimizer: Any = None,
        optimizer_factory: Any = None,
        direct_mode: bool = False,
    ) -> None:
        self.optimizer = optimizer
        self.optimizer_factory = optimizer_factory
        self.direct_mode = direct_mode
        self.ext: Dict[str, Any] = {}
        self._variables: Dict[str, Variable] = {}

    # -------------------- Variables --------------------

    def add_variable(
        self,
        name: str,
        *,
        lower_bound: Optional[float] = None,
        upper_bound: Optional[float] = None,
    ) -> Variable:
        if name in self._variables:
            raise ValueError(f"Variable {name!r} already exists.")
        variable = Variable(
            name=name,
            lower_bound=lower_bound,
            upper_bound=upper_bound,
        )
        self._variables[name] = variable
        return variable

    def variable(self, name: str) -> Variable:
        return self._variables[name]

    @property
    def variables(self) -> List[Variable]:
        return list(self._variables.values())

    def __repr__(self) -> str:
        mode = "direct" if self.direct_mode else "deferred"
        return f"Subproblem({mode}, variables={len(self._variables)})"
