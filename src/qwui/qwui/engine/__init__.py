"""qwui.engine - composes component definitions and call options into nodes.

Pure functions only: no I/O, no shared mutable state.
"""

from qwui.engine.attributes import RESERVED_KEYS, AttributeMerger
from qwui.engine.classes import compose_class
from qwui.engine.definition import ComponentDefinition, OptionSpec, VariantSpec, define
from qwui.engine.dispatch import dispatch, resolve_strategy
from qwui.engine.nodes import Element, content_tag, tag
from qwui.engine.render import render
from qwui.engine.siblings import apply_wrap, build_sibling

__all__ = [
    "RESERVED_KEYS",
    "AttributeMerger",
    "ComponentDefinition",
    "Element",
    "OptionSpec",
    "VariantSpec",
    "apply_wrap",
    "build_sibling",
    "compose_class",
    "content_tag",
    "define",
    "dispatch",
    "render",
    "resolve_strategy",
    "tag",
]
