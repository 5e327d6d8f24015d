"""qwui - reusable markup components.

A component is a definition (base class, tag, variants, options, siblings,
wrappers) plus a call surface. Calling it composes the class string and
builds a node tree; ``to_html`` serializes the tree.
"""

from qwui._version import __version__
from qwui.component import CallArgs, Component, defcontenttag, deftag, normalize_call
from qwui.config import EngineConfig, resolve_config
from qwui.engine import (
    RESERVED_KEYS,
    AttributeMerger,
    ComponentDefinition,
    Element,
    OptionSpec,
    VariantSpec,
    compose_class,
    content_tag,
    define,
    render,
    tag,
)
from qwui.exceptions import (
    AmbiguousContentError,
    ConfigurationError,
    ContentNotAllowedError,
    QwuiError,
    UnknownVariantError,
    UsageError,
)
from qwui.library import Library, load_library, load_library_from_string
from qwui.renderer import HtmlRenderer, to_html

__all__ = [
    "__version__",
    # Components
    "CallArgs",
    "Component",
    "defcontenttag",
    "deftag",
    "normalize_call",
    # Engine
    "RESERVED_KEYS",
    "AttributeMerger",
    "ComponentDefinition",
    "Element",
    "OptionSpec",
    "VariantSpec",
    "compose_class",
    "content_tag",
    "define",
    "render",
    "tag",
    # Config
    "EngineConfig",
    "resolve_config",
    # Libraries
    "Library",
    "load_library",
    "load_library_from_string",
    # Serialization
    "HtmlRenderer",
    "to_html",
    # Errors
    "AmbiguousContentError",
    "ConfigurationError",
    "ContentNotAllowedError",
    "QwuiError",
    "UnknownVariantError",
    "UsageError",
]
