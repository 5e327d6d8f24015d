"""Tests for sibling and wrapper specs."""

import pytest
from markupsafe import Markup

from qwui import content_tag, tag
from qwui.engine.siblings import apply_wrap, build_sibling
from qwui.engine.specs import (
    BareTag,
    SafeSibling,
    TagAttrs,
    TagContent,
    TagContentAttrs,
    WrapFunction,
    WrapTag,
    sibling,
    wrap,
)


def badge(*args):
    """Stand-in component: records how it was called."""
    return ("badge", args)


def test_sibling_coerces_markup_and_elements():
    safe = Markup("<b>hi</b>")
    assert sibling(safe) == SafeSibling(safe)

    node = tag("hr")
    assert sibling(node) == SafeSibling(node)


def test_sibling_coerces_sequences_of_rendered_nodes():
    node = content_tag("b", "x")
    rule = Markup("<hr>")
    assert sibling([node, rule]) == SafeSibling((node, rule))
    # Markup is a str, but a list of only Markup is not a tag shape
    assert sibling((rule, rule)) == SafeSibling((rule, rule))
    assert build_sibling(sibling([node, rule])) == (node, rule)


def test_sibling_coerces_bare_tags():
    assert sibling("hr") == BareTag("hr")
    assert sibling(["hr"]) == BareTag("hr")
    assert sibling(badge) == BareTag(badge)


def test_sibling_coerces_tuples():
    assert sibling(("hr", {"class": "divider"})) == TagAttrs("hr", {"class": "divider"})
    assert sibling(("span", "Close")) == TagContent("span", "Close")
    assert sibling(["button", "x", {"class": "close"}]) == TagContentAttrs(
        "button", "x", {"class": "close"}
    )


def test_sibling_keeps_existing_specs():
    spec = TagContent("span", "x")
    assert sibling(spec) is spec


@pytest.mark.parametrize("value", [42, {"tag": "hr"}, (), ("a", "b", "c"), ("a", 1, 2, 3)])
def test_sibling_rejects_unknown_shapes(value):
    with pytest.raises(ValueError, match="Invalid sibling"):
        sibling(value)


def test_build_safe_sibling_passes_through():
    node = content_tag("strong", "already built")
    assert build_sibling(SafeSibling(node)) is node


def test_build_element_siblings():
    assert build_sibling(BareTag("hr")) == tag("hr")
    assert build_sibling(TagAttrs("hr", {"class": "divider"})) == tag("hr", {"class": "divider"})
    assert build_sibling(TagContent("span", "Close")) == content_tag("span", "Close")
    assert build_sibling(TagContentAttrs("span", "Close", {"id": "c"})) == content_tag(
        "span", "Close", {"id": "c"}
    )


def test_build_sibling_calls_function_tags_with_same_shape():
    assert build_sibling(BareTag(badge)) == ("badge", ())
    assert build_sibling(TagAttrs(badge, {"id": 1})) == ("badge", ({"id": 1},))
    assert build_sibling(TagContent(badge, "New")) == ("badge", ("New",))
    assert build_sibling(TagContentAttrs(badge, "New", {"id": 1})) == (
        "badge",
        ("New", {"id": 1}),
    )


def test_wrap_coercion():
    assert wrap("nav") == WrapTag("nav")
    assert wrap(("nav", {"role": "nav"})) == WrapTag("nav", {"role": "nav"})
    assert wrap(["nav", {"role": "nav"}]) == WrapTag("nav", {"role": "nav"})
    assert wrap(badge) == WrapFunction(badge)


@pytest.mark.parametrize("value", [42, ("nav",), ("nav", "content"), (badge, {})])
def test_wrap_rejects_unknown_shapes(value):
    with pytest.raises(ValueError, match="Invalid wrapper"):
        wrap(value)


def test_apply_wrap():
    assert apply_wrap(WrapTag("span"), "Go") == content_tag("span", "Go")
    assert apply_wrap(WrapTag("nav", {"role": "nav"}), ["a", "b"]) == content_tag(
        "nav", ["a", "b"], {"role": "nav"}
    )
    assert apply_wrap(WrapFunction(lambda c: ["<", c, ">"]), "x") == ["<", "x", ">"]
