"""Registry — read-only mapping of state names to ordered templates."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from .executable import ExecutableTemplate

DEFAULT_STATE = "default"
NO_TRANSITION_STATE = "no-transition"


def normalize_state(name: str) -> str:
    return name.strip().lower()


class Registry(Mapping[str, tuple[ExecutableTemplate, ...]]):
    """State name to executable templates, sorted by order."""

    def __init__(
        self,
        states: Mapping[str, tuple[ExecutableTemplate, ...]] | None = None,
    ) -> None:
        self._states = dict(states or {})

    def select(
        self,
        state: str,
        prev_state: str,
    ) -> tuple[ExecutableTemplate, ...] | None:
        """Pick the template list for a state transition.

        The no-transition list wins whenever the state did not change; otherwise
        the state's own list, then the default list. None if nothing matches.
        """
        if state == prev_state:
            return self._states.get(NO_TRANSITION_STATE)
        templates = self._states.get(normalize_state(state))
        if templates is None:
            templates = self._states.get(DEFAULT_STATE)
        return templates

    def __getitem__(self, name: str) -> tuple[ExecutableTemplate, ...]:
        return self._states[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def __repr__(self) -> str:
        return f"Registry(states={sorted(self._states)})"
