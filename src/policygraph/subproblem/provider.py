from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Protocol, Tuple

from policygraph.errors import MissingOptimizerError
from policygraph.subproblem.model import Subproblem


@dataclass(frozen=True)
class OptimizerFactory:
    """
    Deferred optimizer constructor: constructor(*args, **kwargs).
    """

    constructor: Callable[..., Any]
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)

    def __call__(self) -> Any:
        return self.constructor(*self.args, **self.kwargs)


def with_optimizer(constructor: Callable[..., Any], *args: Any, **kwargs: Any) -> OptimizerFactory:
    return OptimizerFactory(constructor=constructor, args=args, kwargs=kwargs)


@dataclass(frozen=True)
class SubproblemConfig:
    """
    Solver selection for one subproblem.

    In direct mode the subproblem is bound to a live optimizer instance
    on creation; otherwise the factory is stored and bound lazily.
    """

    optimizer: Optional[OptimizerFactory] = None
    direct_mode: bool = False


class SubproblemFactory(Protocol):
    def create(self, config: SubproblemConfig) -> Any:
        ...


class SubproblemProvider:
    """
    Default provider creating policygraph.subproblem.Subproblem instances.
    """

    def create(self, config: SubproblemConfig) -> Subproblem:
        return construct_subproblem(config.optimizer, config.direct_mode)


def construct_subproblem(
    optimizer: Optional[OptimizerFactory],
    direct_mode: bool,
) -> Subproblem:
    if optimizer is None:
        if direct_mode:
            raise MissingOptimizerError()
        return Subproblem()

    if direct_mode:
        instance = optimizer()
        logging.getLogger("policygraph.subproblem").debug(
            "bound subproblem to optimizer instance %r", instance
        )
        return Subproblem(optimizer=instance, direct_mode=True)

    return Subproblem(optimizer_factory=optimizer)
