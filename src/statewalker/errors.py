"""Exception types raised by the state walker."""

from __future__ import annotations


class StateWalkerError(Exception):
    """Base class for state walker errors."""


class AlreadyInitializedError(StateWalkerError, RuntimeError):
    """Raised when a walker is initialized more than once."""


class StateExecuteError(StateWalkerError):
    """Raised after cleanup when a run did not complete successfully."""
