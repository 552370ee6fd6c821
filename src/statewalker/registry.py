"""Executable plugin registration and template construction."""

from __future__ import annotations

import logging

from .executable import Executable, ExecutableTemplate

logger = logging.getLogger(__name__)

_executable_registry: dict[str, type] = {}


def executable(name: str):
    """Register an Executable class under a configuration type id."""

    def decorator(cls):
        register_executable(name, cls)
        return cls

    return decorator


def register_executable(name: str, cls: type) -> None:
    """Register an Executable class under a configuration type id."""
    if name in _executable_registry:
        logger.warning(
            "Executable type '%s' re-registered: %s -> %s",
            name,
            _executable_registry[name].__name__,
            cls.__name__,
        )
    logger.debug("Registering executable '%s' -> %s", name, cls.__name__)
    _executable_registry[name] = cls


def instantiate(type_id: str, order: int) -> ExecutableTemplate | None:
    """Build a template for a registered type id, or None if that fails.

    Failures are logged and never raised; the caller skips the entry.
    """
    cls = _executable_registry.get(type_id)
    if cls is None:
        logger.warning("Unknown executable type '%s'; ignored", type_id)
        return None
    if not (isinstance(cls, type) and issubclass(cls, Executable)):
        logger.warning("Type '%s' (%r) is not an Executable; ignored", type_id, cls)
        return None

    try:
        prototype = cls(order)
    except Exception:
        logger.warning(
            "Could not construct executable '%s' (%s) with order %d; ignored",
            type_id,
            cls.__name__,
            order,
            exc_info=True,
        )
        return None

    return ExecutableTemplate(type_id=type_id, order=order, prototype=prototype)
