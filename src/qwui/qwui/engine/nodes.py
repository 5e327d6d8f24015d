"""Node values produced by the engine.

An ``Element`` is an abstract markup element: a name, its attributes and its
children. Children are strings (escaped when serialized), ``Markup`` (emitted
verbatim) or other elements. ``tag`` and ``content_tag`` are the two primitive
constructors the engine builds every element with.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from markupsafe import Markup


@dataclass(frozen=True)
class Element:
    """An immutable markup element."""

    name: str
    attrs: Mapping[str, Any] = field(default_factory=dict)
    children: tuple["Child", ...] = ()
    void: bool = False


Child = Union[Element, Markup, str]

# Any shape accepted as content: a child, a nested sequence of children, or None.
Content = Any


def flatten_children(content: Content) -> tuple[Child, ...]:
    """Flatten content into a tuple of children.

    ``None`` disappears, nested lists and tuples are spliced in order, other
    scalars (numbers, ...) are kept and stringified at serialization time.
    """
    if content is None:
        return ()
    if isinstance(content, (str, Element)):
        # Markup is a str subclass
        return (content,)
    if isinstance(content, (list, tuple)):
        children: list[Child] = []
        for item in content:
            children.extend(flatten_children(item))
        return tuple(children)
    return (content,)


def tag(name: str, attrs: Mapping[str, Any] | None = None) -> Element:
    """Build a void (self-closing) element."""
    return Element(name=name, attrs=dict(attrs or {}), void=True)


def content_tag(
    name: str,
    content: Content = None,
    attrs: Mapping[str, Any] | None = None,
) -> Element:
    """Build an element wrapping the given content."""
    return Element(name=name, attrs=dict(attrs or {}), children=flatten_children(content))

