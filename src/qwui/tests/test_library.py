"""Tests for YAML component libraries."""

import pytest

from qwui import ConfigurationError, Library, load_library, load_library_from_string, to_html
from qwui.engine.specs import TagAttrs, WrapTag

LIBRARY_YAML = """
name: bootstrap
components:
  alert:
    tag: div
    class: alert
    variants: [primary, success]
    attributes:
      role: alert
  divider:
    kind: void
    tag: hr
    class: divider
    variants: [lg]
  breadcrumbs:
    tag: ol
    class: breadcrumb
    parent: [nav, {aria-label: breadcrumb}]
  menu:
    tag: ul
    class: dropdown-menu
    prepend: [li, {class: dropdown-header}]
    options:
      align:
        class: align
        prefix: true
"""


@pytest.fixture
def library():
    return load_library_from_string(LIBRARY_YAML)


def test_loads_components(library):
    assert isinstance(library, Library)
    assert library.name == "bootstrap"
    assert list(library) == ["alert", "divider", "breadcrumbs", "menu"]
    assert len(library) == 4


def test_renders_loaded_components(library):
    assert to_html(library["alert"]("primary", "Hi")) == (
        '<div class="alert alert-primary" role="alert">Hi</div>'
    )
    assert to_html(library["divider"]("lg")) == '<hr class="divider divider-lg">'


def test_yaml_lists_become_siblings_and_wrappers(library):
    menu = library["menu"].definition
    assert menu.prepend == TagAttrs("li", {"class": "dropdown-header"})
    assert library["breadcrumbs"].definition.parent == WrapTag("nav", {"aria-label": "breadcrumb"})
    assert to_html(library["breadcrumbs"]("Home")) == (
        '<nav aria-label="breadcrumb"><ol class="breadcrumb">Home</ol></nav>'
    )


def test_options_from_yaml(library):
    html = to_html(library["menu"]("x", align="end"))
    assert html == '<ul class="dropdown-menu dropdown-menu-align-end"><li class="dropdown-header">x</ul>'


def test_get_component_missing(library):
    with pytest.raises(ConfigurationError, match="'tooltip' not found"):
        library.get_component("tooltip")
    assert library.get_component("alert") is library["alert"]


def test_invalid_component_names_the_component():
    with pytest.raises(ConfigurationError, match="Invalid component 'card'"):
        load_library_from_string("components:\n  card:\n    tag: div\n")


def test_library_must_be_mapping():
    with pytest.raises(ConfigurationError, match="must be a YAML mapping"):
        load_library_from_string("- just\n- a list\n")


def test_empty_library():
    library = load_library_from_string("")
    assert len(library) == 0
    assert library.name is None


def test_load_library_from_file(tmp_path):
    path = tmp_path / "components.yaml"
    path.write_text(LIBRARY_YAML)
    library = load_library(path)
    assert "alert" in library
