"""Tests for component definitions."""

import pytest
from pydantic import ValidationError

from qwui import ComponentDefinition, ConfigurationError, OptionSpec, VariantSpec, define
from qwui.engine.specs import (
    ContentStrategy,
    DelegateStrategy,
    TagAttrs,
    VoidStrategy,
    WrapFunction,
    WrapTag,
)


def link(children, attrs):
    return ("a", children, attrs)


def test_variant_shorthand_list():
    definition = define(class_="list", tag="ul", variants=["flush", "horizontal"])
    assert definition.variants == {
        "flush": VariantSpec(class_="flush"),
        "horizontal": VariantSpec(class_="horizontal"),
    }


def test_variant_mapping_with_strings_and_specs():
    definition = define(
        class_="btn",
        tag="button",
        variants={"up": "dropup", "link": {"class": "link", "merge": False}},
    )
    assert definition.variants["up"].class_ == "dropup"
    assert definition.variants["link"].merge is False


def test_option_shorthand_list_is_base_prefixed():
    definition = define(class_="nav", tag="ul", options=["pills"])
    assert definition.options == {"pills": OptionSpec(class_="pills", prefix=True)}
    assert definition.option_names == ("pills",)


def test_class_alias_accepted():
    definition = define(**{"class": "card", "tag": "div"})
    assert definition.class_ == "card"


def test_siblings_and_wrappers_are_coerced():
    definition = define(
        class_="dropdown",
        tag="div",
        prepend=("hr", {"class": "divider"}),
        parent="nav",
        wrap_content=lambda content: content,
    )
    assert definition.prepend == TagAttrs("hr", {"class": "divider"})
    assert definition.parent == WrapTag("nav")
    assert isinstance(definition.wrap_content, WrapFunction)
    assert definition.append is None


def test_strategies():
    assert define(class_="d", tag="hr", kind="void").strategy == VoidStrategy("hr")
    assert define(class_="l", tag="ul").strategy == ContentStrategy("ul")
    assert define(class_="i", tag=link).strategy == DelegateStrategy(link)
    assert define(class_="i", tag="li", delegate=link).strategy == DelegateStrategy(link, tag="li")
    assert define(class_="i", delegate=link).strategy == DelegateStrategy(link)


def test_strategy_property_matches_derive_strategy():
    definition = define(class_="i", tag="li", delegate=link)
    assert definition.derive_strategy() == definition.strategy


def test_missing_class_is_configuration_error():
    with pytest.raises(ConfigurationError, match="Invalid component"):
        define(tag="div")


def test_empty_class_is_configuration_error():
    with pytest.raises(ConfigurationError, match="must not be empty"):
        define(class_="  ", tag="div")


@pytest.mark.parametrize(
    "fields, message",
    [
        ({"class_": "d", "kind": "void"}, "needs a tag name"),
        ({"class_": "d", "kind": "void", "tag": link}, "needs a tag name"),
        ({"class_": "d", "kind": "void", "tag": "hr", "delegate": link}, "cannot delegate"),
        ({"class_": "c"}, "needs a tag or a delegate"),
        ({"class_": "c", "tag": link, "delegate": link}, "both a tag function and a delegate"),
    ],
)
def test_missing_render_target_is_configuration_error(fields, message):
    with pytest.raises(ConfigurationError, match=message):
        define(**fields)


def test_variant_without_class_is_configuration_error():
    with pytest.raises(ConfigurationError):
        define(class_="btn", tag="button", variants={"lg": {"merge": False}})
    with pytest.raises(ConfigurationError, match="Variant class must not be empty"):
        define(class_="btn", tag="button", variants=[""])


def test_option_without_class_is_configuration_error():
    with pytest.raises(ConfigurationError, match="Option class must not be empty"):
        define(class_="btn", tag="button", options={"active": {"class": ""}})


def test_invalid_sibling_is_configuration_error():
    with pytest.raises(ConfigurationError, match="Invalid sibling"):
        define(class_="btn", tag="button", prepend=42)


def test_unknown_field_is_configuration_error():
    with pytest.raises(ConfigurationError):
        define(class_="btn", tag="button", colour="red")


def test_direct_construction_raises_validation_error():
    """Without the factory, pydantic's ValidationError (a ValueError) surfaces."""
    with pytest.raises(ValidationError):
        ComponentDefinition(tag="div")
    with pytest.raises(ValueError):
        ComponentDefinition(**{"class": "x"})


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        define(tag="div")


def test_definition_is_frozen():
    definition = define(class_="card", tag="div")
    with pytest.raises(ValidationError):
        definition.tag = "section"
