"""Tagged values describing siblings, wrappers and render strategies.

Each loose shape a definition (or a call) may use for ``prepend``, ``append``,
``parent`` and ``wrap_content`` is coerced once into one of the classes below,
so the builders downstream only ever match on a closed set of types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Union

from markupsafe import Markup

from qwui.engine.nodes import Content, Element

TagRef = Union[str, Callable[..., Any]]


# =============================================================================
# Siblings (prepend / append)
# =============================================================================


class SiblingSpec:
    """Base class for sibling shapes."""

    __slots__ = ()


@dataclass(frozen=True)
class SafeSibling(SiblingSpec):
    """An already rendered node (or sequence of nodes), passed through verbatim."""

    node: Union[Element, Markup, tuple[Union[Element, Markup], ...]]


@dataclass(frozen=True)
class BareTag(SiblingSpec):
    """A tag with neither content nor attributes: ``"hr"``."""

    tag: TagRef


@dataclass(frozen=True)
class TagAttrs(SiblingSpec):
    """A void tag with attributes: ``("hr", {"class": "divider"})``."""

    tag: TagRef
    attrs: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class TagContent(SiblingSpec):
    """A content tag without attributes: ``("span", "Close")``."""

    tag: TagRef
    content: Content = None


@dataclass(frozen=True)
class TagContentAttrs(SiblingSpec):
    """A content tag with attributes: ``("button", "x", {"class": "close"})``."""

    tag: TagRef
    content: Content = None
    attrs: Mapping[str, Any] = field(default_factory=dict)


def _is_tag(value: Any) -> bool:
    return isinstance(value, str) or callable(value)


def _is_node(value: Any) -> bool:
    return isinstance(value, (Markup, Element))


def sibling(value: Any) -> SiblingSpec:
    """Coerce a loose sibling shape into a ``SiblingSpec``.

    Raises:
        ValueError: If the value matches no known shape.
    """
    if isinstance(value, SiblingSpec):
        return value
    # Markup first: it is also a str
    if _is_node(value):
        return SafeSibling(value)
    if isinstance(value, (tuple, list)) and value and all(_is_node(item) for item in value):
        return SafeSibling(tuple(value))
    if _is_tag(value):
        return BareTag(value)
    if isinstance(value, (tuple, list)) and value and _is_tag(value[0]):
        if len(value) == 1:
            return BareTag(value[0])
        if len(value) == 2:
            if isinstance(value[1], Mapping):
                return TagAttrs(value[0], dict(value[1]))
            return TagContent(value[0], value[1])
        if len(value) == 3 and isinstance(value[2], Mapping):
            return TagContentAttrs(value[0], value[1], dict(value[2]))
    raise ValueError(f"Invalid sibling: {value!r}")


# =============================================================================
# Wrappers (parent / wrap_content)
# =============================================================================


class WrapSpec:
    """Base class for wrapper shapes."""

    __slots__ = ()


@dataclass(frozen=True)
class WrapTag(WrapSpec):
    """Wrap with an element: ``"nav"`` or ``("nav", {"role": "nav"})``."""

    tag: str
    attrs: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class WrapFunction(WrapSpec):
    """Wrap by calling a one-argument function with the content."""

    fn: Callable[[Any], Any]


def wrap(value: Any) -> WrapSpec:
    """Coerce a loose wrapper shape into a ``WrapSpec``.

    Raises:
        ValueError: If the value matches no known shape.
    """
    if isinstance(value, WrapSpec):
        return value
    if isinstance(value, str):
        return WrapTag(value)
    if callable(value):
        return WrapFunction(value)
    if (
        isinstance(value, (tuple, list))
        and len(value) == 2
        and isinstance(value[0], str)
        and isinstance(value[1], Mapping)
    ):
        return WrapTag(value[0], dict(value[1]))
    raise ValueError(f"Invalid wrapper: {value!r}")


# =============================================================================
# Render strategies
# =============================================================================


class RenderStrategy:
    """Base class for the ways a component builds its own node."""

    __slots__ = ()


@dataclass(frozen=True)
class VoidStrategy(RenderStrategy):
    """``tag(name, attrs)``: no content."""

    tag: str


@dataclass(frozen=True)
class ContentStrategy(RenderStrategy):
    """``content_tag(name, children, attrs)``."""

    tag: str


@dataclass(frozen=True)
class DelegateStrategy(RenderStrategy):
    """Hand off to a render function.

    Called as ``fn(children, attrs)``, or as ``fn(tag, children, attrs)``
    when a tag name is carried along.
    """

    fn: Callable[..., Any]
    tag: str | None = None

    @property
    def arity(self) -> int:
        return 2 if self.tag is None else 3
