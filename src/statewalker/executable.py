"""Executable ABC and the immutable templates stamped out per run."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Self, TypeVar

from pydantic import BaseModel


T = TypeVar("T")


class Executable(ABC, Generic[T]):
    """A unit of work run against a single target.

    Implementations are registered by type id and constructed with a single
    integer order. The constructed object serves as a prototype; every run
    works on a copy produced by ``new_bound_copy``.
    """

    def __init__(self, order: int) -> None:
        self._order = order
        self.target: T | None = None

    @property
    def order(self) -> int:
        return self._order

    def new_bound_copy(self) -> Self:
        """Return a fresh instance carrying the same order."""
        return type(self)(self._order)

    def set_target(self, target: T) -> None:
        self.target = target

    @abstractmethod
    def execute(self, params: Any) -> None:
        """Do the work; raise to stop the run."""

    def release(self, succeeded: bool) -> None:
        """Called once after the run for every instance that executed."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(order={self._order})"


class ExecutableTemplate(BaseModel):
    """Declarative executable definition held by the registry."""

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    type_id: str
    order: int
    prototype: Executable[Any]

    def new_bound_copy(self) -> Executable[Any]:
        return self.prototype.new_bound_copy()
