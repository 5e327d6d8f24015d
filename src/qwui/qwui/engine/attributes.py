"""Attribute merger - the attributes that reach the emitted element."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, TYPE_CHECKING

if TYPE_CHECKING:
    from qwui.config import EngineConfig

# Call options that steer rendering and never become attributes
RESERVED_KEYS: tuple[str, ...] = (
    "tag",
    "class",
    "variants",
    "append",
    "prepend",
    "parent",
    "wrap_content",
    "delegate",
)


class AttributeMerger:
    """Merges default and call attributes, dropping reserved keys.

    The reserved table is owned by the instance so it can be replaced per
    engine configuration.
    """

    def __init__(self, reserved_keys: Iterable[str] = RESERVED_KEYS):
        self.reserved_keys = frozenset(reserved_keys)

    @classmethod
    def from_config(cls, config: "EngineConfig") -> "AttributeMerger":
        return cls(config.reserved_keys)

    def is_reserved(self, key: str, option_names: Iterable[str] = ()) -> bool:
        return key in self.reserved_keys or key in option_names

    def merge(
        self,
        options: Mapping[str, Any],
        *defaults: Mapping[str, Any],
        option_names: Iterable[str] = (),
        class_name: str | None = None,
    ) -> dict[str, Any]:
        """Merge attribute maps, later maps winning, call options last.

        Args:
            options: Call options (attributes plus reserved keys).
            *defaults: Default attribute maps, lowest precedence first.
            option_names: Declared option names, also stripped.
            class_name: Composed class, set as the final ``class`` attribute.

        Returns:
            The attributes for the output element.
        """
        option_names = frozenset(option_names)
        merged: dict[str, Any] = {}
        for source in (*defaults, options):
            for key, value in source.items():
                if self.is_reserved(key, option_names):
                    continue
                merged[key] = value

        if class_name is not None:
            merged["class"] = class_name
        return merged


DEFAULT_MERGER = AttributeMerger()
