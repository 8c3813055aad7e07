from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator, Optional, Tuple

from policygraph.errors import UnknownSubproblemError
from policygraph.policy.node import Node


class SubproblemRegistry:
    """
    Side table mapping a subproblem (by identity) to the node that owns it.

    The subproblem is stored alongside its node so its id cannot be
    reused while the entry is alive.
    """

    def __init__(self, owner: Any) -> None:
        self.owner = owner
        self._entries: Dict[int, Tuple[Any, Node]] = {}

    def register(self, subproblem: Any, node: Node) -> None:
        self._entries[id(subproblem)] = (subproblem, node)

    def lookup(self, subproblem: Any) -> Node:
        entry = self._entries.get(id(subproblem))
        if entry is None or entry[0] is not subproblem:
            raise UnknownSubproblemError(subproblem)
        return entry[1]

    def __contains__(self, subproblem: Any) -> bool:
        entry = self._entries.get(id(subproblem))
        return entry is not None and entry[0] is subproblem

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()


# Registry of the policy graph currently being assembled.
_ACTIVE: ContextVar[Optional[SubproblemRegistry]] = ContextVar(
    "policygraph_active_registry", default=None
)


@contextmanager
def activate(registry: SubproblemRegistry) -> Iterator[SubproblemRegistry]:
    token = _ACTIVE.set(registry)
    try:
        yield registry
    finally:
        _ACTIVE.reset(token)


def active_registry() -> Optional[SubproblemRegistry]:
    return _ACTIVE.get()


def resolve_node(subproblem: Any) -> Node:
    registry = _ACTIVE.get()
    if registry is None:
        raise UnknownSubproblemError(subproblem)
    return registry.lookup(subproblem)
