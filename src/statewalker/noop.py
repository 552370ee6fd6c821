"""Sentinel executable used when no configured executables apply."""

from __future__ import annotations

import logging
from typing import Any, Self

from .executable import Executable

logger = logging.getLogger(__name__)


class NoOpExecutable(Executable[Any]):
    """Does nothing and never fails; copies of it are itself."""

    def __init__(self, order: int = 1) -> None:
        super().__init__(order)

    def new_bound_copy(self) -> Self:
        return self

    def set_target(self, target: Any) -> None:
        pass

    def execute(self, params: Any) -> None:
        logger.info("No-op executable executing")

    def release(self, succeeded: bool) -> None:
        pass
