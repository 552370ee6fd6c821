"""StateWalker — resolve a target's state to executables and run them."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from .context import ExecutionContext
from .errors import AlreadyInitializedError
from .executable import Executable
from .hcl import ConfigLoader, ConfigSource
from .noop import NoOpExecutable
from .states import Registry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StateWalker(ABC, Generic[T]):
    """Base class that apps subclass to report a target's state labels.

    The registry is built once by ``initialize`` and is read-only afterwards,
    so a single walker may serve runs for different targets on separate
    threads once initialization has finished.
    """

    def __init__(self) -> None:
        self._registry = Registry()
        self._initialized = False
        self._noop_executables: list[Executable[Any]] = [NoOpExecutable()]

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def registry(self) -> Registry:
        return self._registry

    def initialize(
        self,
        source: ConfigSource,
        *,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Load the state configuration. May only be called once."""
        if self._initialized:
            raise AlreadyInitializedError(f"{type(self).__name__} already initialized")
        self._registry = ConfigLoader(context=context).load(source)
        self._initialized = True
        logger.debug("%s initialized with %d state(s)", type(self).__name__, len(self._registry))

    @abstractmethod
    def current_state(self, target: T) -> str:
        """Return the target's current state label."""

    @abstractmethod
    def previous_state(self, target: T) -> str:
        """Return the target's previous state label."""

    def executables_for(self, target: T) -> list[Executable[Any]]:
        """Return fresh executables for the target's current transition."""
        return self.resolve(target, self.current_state(target), self.previous_state(target))

    def resolve(self, target: T, state: str, prev_state: str) -> list[Executable[Any]]:
        """Stamp out bound executables for a state transition.

        Falls back to the shared no-op list when neither the selected state
        nor the default state is configured.
        """
        templates = self._registry.select(state, prev_state)
        if templates is None:
            logger.debug("No executables configured for state '%s'; using no-op", state)
            return self._noop_executables

        executables: list[Executable[Any]] = []
        for template in templates:
            exe = template.new_bound_copy()
            exe.set_target(target)
            executables.append(exe)
        return executables

    def walk(self, target: T, params: Any = None) -> ExecutionContext[T]:
        """Run the target's executables and release them.

        Raises StateExecuteError after cleanup if any executable failed.
        """
        ctx = ExecutionContext(target, self.executables_for(target))
        ctx.run(params)
        ctx.finalize()
        return ctx
