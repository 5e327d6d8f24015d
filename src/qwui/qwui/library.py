"""Component libraries - many components declared in one YAML document.

    name: bootstrap
    components:
      alert:
        tag: div
        class: alert
        variants: [primary, success]
        attributes:
          role: alert
      divider:
        kind: void
        tag: hr
        class: divider
      breadcrumbs:
        tag: ol
        class: breadcrumb
        parent: [nav, {aria-label: breadcrumb}]

Siblings and wrappers written as YAML lists follow the tuple shapes of
``qwui.engine.specs``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator, Mapping

import yaml
from pydantic import BaseModel, Field, ValidationError

from qwui.component import Component
from qwui.engine.attributes import AttributeMerger
from qwui.engine.definition import ComponentDefinition
from qwui.exceptions import ConfigurationError

log = logging.getLogger(__name__)


class LibraryConfig(BaseModel):
    """Raw library document."""

    name: str | None = None
    components: dict[str, dict[str, Any]] = Field(default_factory=dict)


class Library(Mapping[str, Component]):
    """A read-only collection of named components."""

    def __init__(self, components: Mapping[str, Component], name: str | None = None):
        self.name = name
        self._components = dict(components)

    def __getitem__(self, key: str) -> Component:
        return self._components[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def get_component(self, name: str) -> Component:
        """Get a component by name.

        Raises:
            ConfigurationError: If the library has no such component.
        """
        try:
            return self._components[name]
        except KeyError:
            available = ", ".join(sorted(self._components)) or "none"
            raise ConfigurationError(
                f"Component '{name}' not found in library (available: {available})"
            ) from None


def build_library(data: Mapping[str, Any], merger: AttributeMerger | None = None) -> Library:
    """Build a library from already-parsed data."""
    try:
        config = LibraryConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid component library: {e}") from e

    components: dict[str, Component] = {}
    for name, fields in config.components.items():
        try:
            definition = ComponentDefinition.model_validate(fields)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid component '{name}': {e}") from e
        components[name] = Component(name, definition, merger)

    log.debug("Loaded %d components from library %s", len(components), config.name or "<unnamed>")
    return Library(components, name=config.name)


def load_library_from_string(content: str, merger: AttributeMerger | None = None) -> Library:
    """Load a library from a YAML string."""
    data = yaml.safe_load(content) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Component library must be a YAML mapping")
    return build_library(data, merger)


def load_library(path: str | Path, merger: AttributeMerger | None = None) -> Library:
    """Load a library from a YAML file."""
    with open(path) as f:
        return load_library_from_string(f.read(), merger)
