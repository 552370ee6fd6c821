"""Runtime execution context for a single walk."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from .executable import Executable
from .pipeline import finalize_run, has_error, run


T = TypeVar("T")


class ExecutionContext(Generic[T]):
    """One target and its resolved executables for exactly one run."""

    def __init__(self, target: T, executables: list[Executable[Any]]) -> None:
        self.target = target
        self.executables = executables
        self.depth = -1
        self._ran = False

    @property
    def has_error(self) -> bool:
        return has_error(self.executables, self.depth)

    def run(self, params: Any = None) -> int:
        """Execute forward; may only be called once."""
        if self._ran:
            raise RuntimeError("ExecutionContext has already run")
        self._ran = True
        self.depth = run(self.executables, params)
        return self.depth

    def finalize(self) -> None:
        """Release what ran; raises StateExecuteError if the run failed."""
        finalize_run(self.executables, not self.has_error, self.depth)
