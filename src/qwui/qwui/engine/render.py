"""Composition orchestrator - the entry point every component call ends in.

Content components are assembled inside-out:

    content -> wrap_content -> [prepend, content, append] -> element -> parent

Void components skip the content steps and only compose class and attributes,
build the element and apply ``parent``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from qwui.engine.attributes import DEFAULT_MERGER, AttributeMerger
from qwui.engine.classes import active_variants, compose_class, resolve_variants
from qwui.engine.definition import ComponentDefinition, VariantSpec
from qwui.engine.dispatch import dispatch, resolve_strategy
from qwui.engine.nodes import Content
from qwui.engine.siblings import apply_wrap, build_sibling
from qwui.engine.specs import SiblingSpec, WrapSpec, sibling, wrap
from qwui.exceptions import ContentNotAllowedError, UsageError

log = logging.getLogger(__name__)

# Variant attributes may override anything but these
_VARIANT_LOCKED_KEYS = ("class", "variants")


def _effective_options(
    options: Mapping[str, Any], specs: list[VariantSpec]
) -> dict[str, Any]:
    """Call options layered over the attributes of the active variants."""
    merged: dict[str, Any] = {}
    for spec in specs:
        merged.update(
            {k: v for k, v in spec.attributes.items() if k not in _VARIANT_LOCKED_KEYS}
        )
    merged.update(options)
    return merged


def _override(
    options: Mapping[str, Any],
    key: str,
    default: Any,
    coerce: Callable[[Any], Any],
) -> Any:
    """The call override for ``key`` if present (even ``None``), else the default."""
    if key not in options:
        return default
    value = options[key]
    if value is None:
        return None
    try:
        return coerce(value)
    except ValueError as e:
        raise UsageError(f"Invalid '{key}' option: {e}") from e


def _sibling_for(options: Mapping[str, Any], key: str, default: SiblingSpec | None):
    return _override(options, key, default, sibling)


def _wrap_for(options: Mapping[str, Any], key: str, default: WrapSpec | None):
    return _override(options, key, default, wrap)


def render(
    content: Content,
    options: Mapping[str, Any],
    definition: ComponentDefinition,
    merger: AttributeMerger | None = None,
) -> Any:
    """Render a component call to a node.

    Args:
        content: The component's own content; must be ``None`` for void components.
        options: Call options: attributes plus reserved keys.
        definition: The component definition.
        merger: Attribute merger; defaults to one using the standard reserved keys.

    Returns:
        The rendered node (whatever the element constructors, delegates or
        wrapper functions return).

    Raises:
        UnknownVariantError: If an undeclared variant is requested.
        ContentNotAllowedError: If content is given to a void component.
        UsageError: If an override has an invalid shape.
    """
    merger = merger or DEFAULT_MERGER
    specs = resolve_variants(definition, active_variants(options))
    options = _effective_options(options, specs)

    log.debug(
        "Rendering %s component '%s' (variants: %s)",
        definition.kind,
        definition.class_,
        active_variants(options) or "-",
    )

    if definition.kind == "void":
        if content is not None:
            raise ContentNotAllowedError(definition.class_)
        children = None
    else:
        wrapper = _wrap_for(options, "wrap_content", definition.wrap_content)
        if wrapper is not None:
            content = apply_wrap(wrapper, content)

        prepend = _sibling_for(options, "prepend", definition.prepend)
        append = _sibling_for(options, "append", definition.append)
        children = [] if content is None else [content]
        if prepend is not None:
            children.insert(0, build_sibling(prepend))
        if append is not None:
            children.append(build_sibling(append))

    attrs = merger.merge(
        options,
        definition.attributes,
        option_names=definition.option_names,
        class_name=compose_class(definition, options),
    )

    node = dispatch(resolve_strategy(definition.strategy, options), children, attrs)

    parent = _wrap_for(options, "parent", definition.parent)
    if parent is not None:
        node = apply_wrap(parent, node)
    return node
