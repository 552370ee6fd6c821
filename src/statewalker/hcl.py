"""HCL loading engine — parse state configuration into a Registry."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, TypeAlias

import hcl2
import jinja2
from lark.exceptions import LarkError

from .executable import ExecutableTemplate
from .registry import instantiate
from .states import Registry, normalize_state

logger = logging.getLogger(__name__)

ConfigSource: TypeAlias = str | Path | IO[str]


class MalformedConfigError(ValueError):
    """The configuration document as a whole could not be understood."""


def render(text: str, context: dict[str, Any] | None = None) -> str:
    """Render configuration text as a Jinja2 template."""
    env = jinja2.Environment(
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )
    try:
        return env.from_string(text).render(context or {})
    except jinja2.TemplateError as exc:
        raise MalformedConfigError(f"template error: {exc}") from exc


def parse(text: str, context: dict[str, Any] | None = None) -> dict[str, Any]:
    """Render and parse configuration text into a dict."""
    text = render(text, context)
    try:
        data = hcl2.loads(text)
    except LarkError as exc:
        raise MalformedConfigError(f"syntax error: {exc}") from exc
    if not isinstance(data, dict):
        raise MalformedConfigError("document is not a block body")
    return data


def _parse_order(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _read(source: ConfigSource) -> tuple[str, str]:
    if isinstance(source, (str, Path)):
        path = Path(source)
        return path.read_text(), str(path)
    return source.read(), getattr(source, "name", "<stream>")


class ConfigLoader:
    """Builds a Registry from `state` / `exe` blocks.

    Example:

        state {
          name = "submit"

          exe {
            class = "notify"
            order = 1
          }
        }

    Bad state or executable entries are logged and skipped. A document that
    cannot be parsed yields an empty Registry.
    """

    def __init__(self, context: dict[str, Any] | None = None) -> None:
        self._context = context

    def load(self, source: ConfigSource) -> Registry:
        """Load a configuration file (path or open text stream)."""
        text, origin = _read(source)
        logger.debug("Loading state configuration from %s", origin)
        return self.loads(text, origin=origin)

    def loads(self, text: str, *, origin: str = "<string>") -> Registry:
        """Load configuration from text."""
        try:
            return self._build(parse(text, self._context))
        except MalformedConfigError as exc:
            logger.warning(
                "State configuration %s is malformed (%s); no state executables loaded",
                origin,
                exc,
            )
            return Registry()

    def _build(self, data: dict[str, Any]) -> Registry:
        blocks = data.get("state", [])
        if not isinstance(blocks, list):
            raise MalformedConfigError("'state' must be declared as blocks")

        states: dict[str, tuple[ExecutableTemplate, ...]] = {}
        for block in blocks:
            if not isinstance(block, dict):
                raise MalformedConfigError("'state' must be declared as blocks")
            name = block.get("name")
            if not isinstance(name, str) or not name.strip():
                logger.warning("State block without a name; skipped")
                continue
            name = normalize_state(name)
            if name in states:
                logger.debug("State '%s' redefined; replacing", name)
            states[name] = self._load_state(name, block)

        logger.debug("Loaded %d state(s)", len(states))
        return Registry(states)

    def _load_state(self, name: str, block: dict[str, Any]) -> tuple[ExecutableTemplate, ...]:
        exes = block.get("exe", [])
        if not isinstance(exes, list):
            raise MalformedConfigError(f"'exe' in state '{name}' must be declared as blocks")

        templates: list[ExecutableTemplate] = []
        for exe in exes:
            template = self._load_executable(name, exe)
            if template is not None:
                templates.append(template)

        # list.sort is stable, so equal orders keep declaration order
        templates.sort(key=lambda t: t.order)
        return tuple(templates)

    def _load_executable(self, state: str, exe: Any) -> ExecutableTemplate | None:
        if not isinstance(exe, dict):
            logger.warning("Executable for state '%s' is improperly defined; ignored", state)
            return None

        type_id = exe.get("class")
        if not isinstance(type_id, str) or not type_id.strip():
            logger.warning(
                "Executable for state '%s' is improperly defined; ignored (missing 'class')",
                state,
            )
            return None

        order = _parse_order(exe.get("order"))
        if order is None:
            logger.warning(
                "Executable for state '%s' is improperly defined; ignored ('order' must be an integer)",
                state,
            )
            return None

        template = instantiate(type_id.strip(), order)
        if template is not None:
            logger.debug("Executable '%s' added to state '%s'", template.type_id, state)
        return template
