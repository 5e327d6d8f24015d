"""Render strategy dispatcher."""

from __future__ import annotations

from typing import Any, Mapping

from qwui.engine.nodes import Content, content_tag, tag
from qwui.engine.specs import (
    ContentStrategy,
    DelegateStrategy,
    RenderStrategy,
    VoidStrategy,
)
from qwui.exceptions import UsageError


def resolve_strategy(strategy: RenderStrategy, options: Mapping[str, Any]) -> RenderStrategy:
    """Apply the call-time ``tag`` and ``delegate`` overrides to a strategy.

    A callable ``tag`` turns the call into a two-argument delegate; a string
    ``tag`` renames the element (and replaces a two-argument delegate); a
    ``delegate`` hands off to that function with the current tag name.
    """
    has_tag = options.get("tag") is not None
    override_tag = options.get("tag")
    override_delegate = options.get("delegate")

    if isinstance(strategy, VoidStrategy):
        if override_delegate is not None:
            raise UsageError(f"Void component <{strategy.tag}> cannot delegate")
        if not has_tag:
            return strategy
        if not isinstance(override_tag, str):
            raise UsageError(f"Void component <{strategy.tag}> needs a tag name, got {override_tag!r}")
        return VoidStrategy(override_tag)

    if override_delegate is not None:
        if not callable(override_delegate):
            raise UsageError(f"Delegate must be callable, got {override_delegate!r}")
        if has_tag and not isinstance(override_tag, str):
            raise UsageError("A delegate call needs a tag name, not a tag function")
        current = getattr(strategy, "tag", None)
        return DelegateStrategy(override_delegate, tag=override_tag if has_tag else current)

    if not has_tag:
        return strategy
    if callable(override_tag):
        return DelegateStrategy(override_tag)
    if not isinstance(override_tag, str):
        raise UsageError(f"Invalid tag: {override_tag!r}")
    if isinstance(strategy, DelegateStrategy) and strategy.tag is not None:
        return DelegateStrategy(strategy.fn, tag=override_tag)
    return ContentStrategy(override_tag)


def dispatch(strategy: RenderStrategy, children: Content, attrs: Mapping[str, Any]) -> Any:
    """Build the component's own node."""
    if isinstance(strategy, VoidStrategy):
        return tag(strategy.tag, attrs)
    if isinstance(strategy, ContentStrategy):
        return content_tag(strategy.tag, children, attrs)
    if isinstance(strategy, DelegateStrategy):
        if strategy.arity == 3:
            return strategy.fn(strategy.tag, children, dict(attrs))
        return strategy.fn(children, dict(attrs))
    raise TypeError(f"Unsupported render strategy: {strategy!r}")
