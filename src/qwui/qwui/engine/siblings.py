"""Sibling builder - turns sibling and wrapper specs into nodes."""

from __future__ import annotations

from typing import Any

from qwui.engine.nodes import Content, content_tag, tag
from qwui.engine.specs import (
    BareTag,
    SafeSibling,
    SiblingSpec,
    TagAttrs,
    TagContent,
    TagContentAttrs,
    WrapFunction,
    WrapSpec,
    WrapTag,
)


def build_sibling(spec: SiblingSpec) -> Any:
    """Build the node for a prepended or appended sibling.

    A callable tag is invoked with the same positional shape instead of
    building an element, so a sibling can be another component.
    """
    if isinstance(spec, SafeSibling):
        return spec.node

    if isinstance(spec, BareTag):
        if callable(spec.tag):
            return spec.tag()
        return tag(spec.tag)

    if isinstance(spec, TagAttrs):
        if callable(spec.tag):
            return spec.tag(dict(spec.attrs))
        return tag(spec.tag, spec.attrs)

    if isinstance(spec, TagContent):
        if callable(spec.tag):
            return spec.tag(spec.content)
        return content_tag(spec.tag, spec.content)

    if isinstance(spec, TagContentAttrs):
        if callable(spec.tag):
            return spec.tag(spec.content, dict(spec.attrs))
        return content_tag(spec.tag, spec.content, spec.attrs)

    raise TypeError(f"Unsupported sibling spec: {spec!r}")


def apply_wrap(spec: WrapSpec, content: Content) -> Any:
    """Wrap content (or a whole component) according to a wrapper spec."""
    if isinstance(spec, WrapTag):
        return content_tag(spec.tag, content, spec.attrs)
    if isinstance(spec, WrapFunction):
        return spec.fn(content)
    raise TypeError(f"Unsupported wrapper spec: {spec!r}")
