"""Components - the callable surface of a definition.

    list_group = defcontenttag("list_group", tag="ul", class_="list-group", variants=["flush"])

    list_group("Content")                       # <ul class="list-group">Content</ul>
    list_group("Content", class_="extra")       # <ul class="list-group extra">Content</ul>
    list_group("flush", "Content")              # <ul class="list-group list-group-flush">Content</ul>
    list_group("flush", block=lambda: "...")    # content produced by a block

    divider = deftag("divider", tag="hr", class_="divider", variants=["lg"])

    divider()                                   # <hr class="divider">
    divider("lg", class_="extra")               # <hr class="divider divider-lg extra">

Every call shape is normalized into ``CallArgs`` once, then handed to
``qwui.engine.render``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

from markupsafe import Markup

from qwui.engine.attributes import AttributeMerger
from qwui.engine.classes import active_variants
from qwui.engine.definition import ComponentDefinition, define
from qwui.engine.render import render
from qwui.exceptions import (
    AmbiguousContentError,
    ContentNotAllowedError,
    UnknownVariantError,
    UsageError,
)


@dataclass(frozen=True)
class CallArgs:
    """A normalized component call."""

    content: Any = None
    options: dict[str, Any] = field(default_factory=dict)


def normalize_option_name(name: str) -> str:
    """Strip one trailing underscore: ``class_`` -> ``class``."""
    if len(name) > 1 and name.endswith("_"):
        return name[:-1]
    return name


def normalize_call(
    definition: ComponentDefinition,
    args: Sequence[Any],
    block: Callable[[], Any] | None = None,
    options: Mapping[str, Any] | None = None,
) -> CallArgs:
    """Normalize positional arguments, block and options into ``CallArgs``.

    Content components accept ``(content)`` or ``(variant, content)``, or
    ``()`` / ``(variant)`` together with a block. Void components accept
    ``()`` or ``(variant)``. A trailing mapping is read as options.

    Raises:
        ContentNotAllowedError: Content or a block given to a void component.
        UnknownVariantError: A void component given a name it does not declare.
        AmbiguousContentError: Content given both positionally and as a block.
        UsageError: Too many positional arguments, or a block that is not callable.
    """
    name = definition.class_
    positional = list(args)

    merged: dict[str, Any] = {}
    if positional and isinstance(positional[-1], Mapping):
        merged.update(positional.pop())
    merged.update(options or {})
    merged = {normalize_option_name(key): value for key, value in merged.items()}

    if block is not None and not callable(block):
        raise UsageError(f"Block for '{name}' must be callable, got {block!r}")

    variant = None
    content = None
    if definition.kind == "void":
        if block is not None or len(positional) > 1:
            raise ContentNotAllowedError(name)
        if positional:
            if isinstance(positional[0], Markup) or not isinstance(positional[0], str):
                raise ContentNotAllowedError(name)
            if positional[0] not in definition.variants:
                raise UnknownVariantError(positional[0], definition.class_, list(definition.variants))
            variant = positional[0]
    elif block is not None:
        if len(positional) > 1:
            raise AmbiguousContentError(name)
        if positional:
            variant = positional[0]
        content = block()
    else:
        if len(positional) > 2:
            raise UsageError(
                f"Component '{name}' takes at most 2 positional arguments, got {len(positional)}"
            )
        if len(positional) == 2:
            variant, content = positional
        elif positional:
            content = positional[0]

    if variant is not None:
        merged["variants"] = [variant, *active_variants(merged)]

    return CallArgs(content=content, options=merged)


class Component:
    """A named, callable component."""

    def __init__(
        self,
        name: str,
        definition: ComponentDefinition,
        merger: AttributeMerger | None = None,
    ):
        self.name = name
        self.definition = definition
        self.merger = merger

    def __call__(self, *args: Any, block: Callable[[], Any] | None = None, **options: Any) -> Any:
        call = normalize_call(self.definition, args, block, options)
        return render(call.content, call.options, self.definition, self.merger)

    def __repr__(self) -> str:
        return f"<Component {self.name} ({self.definition.kind}) class={self.definition.class_!r}>"

    @property
    def kind(self) -> str:
        return self.definition.kind


def deftag(name: str, merger: AttributeMerger | None = None, **fields: Any) -> Component:
    """Define a void component, one that takes no content (``hr``, ``input``)."""
    return Component(name, define(kind="void", **fields), merger)


def defcontenttag(name: str, merger: AttributeMerger | None = None, **fields: Any) -> Component:
    """Define a component that wraps content (``div``, ``ul``, ...)."""
    return Component(name, define(kind="content", **fields), merger)
