"""Renderer - serializes engine nodes to HTML text."""

from __future__ import annotations

from typing import Any, Mapping

from jinja2 import Environment
from markupsafe import Markup, escape

from qwui.engine.nodes import Element

# Attribute values are escaped by autoescape; the body is already Markup.
ELEMENT_TEMPLATE = (
    "<{{ name }}"
    "{% for key, value in attrs %}"
    "{% if value is sameas true %} {{ key }}"
    '{% else %} {{ key }}="{{ value }}"'
    "{% endif %}"
    "{% endfor %}>"
    "{% if not void %}{{ body }}</{{ name }}>{% endif %}"
)


class HtmlRenderer:
    """Renders node trees to markup-safe HTML.

    - strings are escaped, ``Markup`` is emitted verbatim
    - attributes are sorted by name; ``_`` in names becomes ``-``
    - nested mappings expand: ``{"data": {"dismiss": "alert"}}`` -> ``data-dismiss="alert"``
    - ``True`` renders a bare attribute, ``None`` and ``False`` are omitted
    """

    def __init__(self) -> None:
        env = Environment(autoescape=True)
        self._element = env.from_string(ELEMENT_TEMPLATE)

    def render(self, node: Any) -> Markup:
        """Render a node (or a sequence of nodes) to HTML.

        Args:
            node: An Element, Markup, string, sequence of nodes or None.

        Returns:
            The HTML as Markup.
        """
        if node is None:
            return Markup("")
        if isinstance(node, Element):
            return self._render_element(node)
        if isinstance(node, (list, tuple)):
            return Markup("").join(self.render(child) for child in node)
        # Markup passes through escape() untouched
        return escape(node)

    def _render_element(self, element: Element) -> Markup:
        html = self._element.render(
            name=element.name,
            attrs=sorted(self._attributes(element.attrs), key=lambda item: item[0]),
            void=element.void,
            body=self.render(element.children),
        )
        return Markup(html)

    def _attributes(self, attrs: Mapping[str, Any], prefix: str = "") -> list[tuple[str, Any]]:
        items: list[tuple[str, Any]] = []
        for key, value in attrs.items():
            name = prefix + str(key).replace("_", "-")
            if isinstance(value, Mapping):
                items.extend(self._attributes(value, prefix=f"{name}-"))
            elif value is None or value is False:
                continue
            elif isinstance(value, (list, tuple)):
                items.append((name, " ".join(str(v) for v in value)))
            else:
                items.append((name, value))
        return items


_default_renderer = HtmlRenderer()


def to_html(node: Any) -> Markup:
    """Render a node with the default renderer."""
    return _default_renderer.render(node)
