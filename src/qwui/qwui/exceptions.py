"""qwui Exceptions

Configuration errors are raised when a component is defined, usage errors when
a component is called in a way its definition does not allow.
"""

from __future__ import annotations


class QwuiError(Exception):
    """Base exception for all qwui errors."""

    pass


class ConfigurationError(QwuiError, ValueError):
    """Raised when a component definition or library is malformed."""

    pass


class UsageError(QwuiError):
    """Raised when a call does not match the component's contract."""

    pass


class UnknownVariantError(UsageError):
    """Raised when a call references a variant the component does not declare."""

    def __init__(self, variant: str, component_class: str, known: list[str]):
        self.variant = variant
        self.component_class = component_class
        self.known = known
        choices = ", ".join(known) if known else "none declared"
        super().__init__(
            f"Unknown variant '{variant}' for component '{component_class}' "
            f"(known: {choices})"
        )


class ContentNotAllowedError(UsageError):
    """Raised when content is given to a void component."""

    def __init__(self, component: str):
        self.component = component
        super().__init__(f"Component '{component}' does not accept content")


class AmbiguousContentError(UsageError):
    """Raised when content is given both positionally and as a block."""

    def __init__(self, component: str):
        self.component = component
        super().__init__(
            f"Component '{component}' got content both positionally and as a block"
        )
