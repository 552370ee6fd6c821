"""Two-phase execution: run executables forward, release them backward."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from .errors import StateExecuteError
from .executable import Executable

logger = logging.getLogger(__name__)


def run(executables: Sequence[Executable[Any]], params: Any = None) -> int:
    """Execute each executable in order, stopping at the first failure.

    Returns the depth: the index of the last executable that completed, or -1
    if none did. A fully successful run returns ``len(executables) - 1``.
    """
    depth = 0
    try:
        while depth < len(executables):
            executables[depth].execute(params)
            depth += 1
    except Exception:
        logger.warning(
            "Executable %r failed at position %d",
            executables[depth],
            depth,
            exc_info=True,
        )
    # depth points one past the last executable that completed
    return depth - 1


def has_error(executables: Sequence[Executable[Any]], depth: int) -> bool:
    """True unless every executable completed."""
    return depth != len(executables) - 1


def finalize_run(
    executables: Sequence[Executable[Any]],
    no_err: bool,
    depth: int,
) -> None:
    """Release completed executables in reverse order, then report failure.

    Every executable up to ``depth`` is released even if an earlier release
    raises. StateExecuteError is raised afterwards if the run failed or any
    release failed.
    """
    release_error: Exception | None = None
    while depth >= 0:
        exe = executables[depth]
        try:
            exe.release(no_err)
        except Exception as exc:
            logger.warning("Releasing %r failed", exe, exc_info=True)
            if release_error is None:
                release_error = exc
        depth -= 1

    if release_error is not None:
        raise StateExecuteError("Issue releasing executables") from release_error
    if not no_err:
        raise StateExecuteError("Issue executing executables")
