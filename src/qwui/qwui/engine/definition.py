"""Component definition schema.

A definition is authored once per component and never mutated. Shorthand
declarations are normalized on the way in:

    variants: ["flush", "horizontal"]      -> {"flush": VariantSpec(class_="flush"), ...}
    variants: {"dropup": "up"}            -> {"dropup": VariantSpec(class_="up")}
    options: ["active"]                   -> {"active": OptionSpec(class_="active", prefix=True)}
    prepend: ("hr", {"class": "divider"}) -> TagAttrs("hr", {"class": "divider"})
    parent: "nav"                         -> WrapTag("nav")
"""

from __future__ import annotations

from typing import Any, Callable, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from qwui.engine.specs import (
    ContentStrategy,
    DelegateStrategy,
    RenderStrategy,
    SiblingSpec,
    VoidStrategy,
    WrapSpec,
    sibling,
    wrap,
)
from qwui.exceptions import ConfigurationError

Kind = Literal["void", "content"]


class VariantSpec(BaseModel):
    """How one variant contributes to the class string."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    class_: str = Field(alias="class")
    merge: bool = Field(default=True, description="Keep the base class next to the variant class")
    prefix: str | bool | None = Field(
        default=None,
        description="False: no prefix, True: base class, None: the definition's variant_class_prefix",
    )
    attributes: dict[str, Any] = Field(
        default_factory=dict, description="Default attributes applied while the variant is active"
    )

    @field_validator("class_")
    @classmethod
    def class_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Variant class must not be empty")
        return value


class OptionSpec(BaseModel):
    """How one named option contributes to the class string."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    class_: str = Field(alias="class")
    prefix: str | bool = False

    @field_validator("class_")
    @classmethod
    def class_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Option class must not be empty")
        return value


class ComponentDefinition(BaseModel):
    """The static configuration of one component."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="forbid",
    )

    class_: str = Field(alias="class", description="Base style class")
    kind: Kind = "content"
    tag: str | Callable[..., Any] | None = None
    delegate: Callable[..., Any] | None = None
    variants: dict[str, VariantSpec] = Field(default_factory=dict)
    options: dict[str, OptionSpec] = Field(default_factory=dict)
    attributes: dict[str, Any] = Field(default_factory=dict)
    prepend: SiblingSpec | None = None
    append: SiblingSpec | None = None
    parent: WrapSpec | None = None
    wrap_content: WrapSpec | None = None
    variant_class_prefix: str | Literal[False] | None = None

    @field_validator("variants", mode="before")
    @classmethod
    def normalize_variants(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, (list, tuple)):
            return {name: {"class": name} for name in value}
        if isinstance(value, dict):
            return {
                name: {"class": spec} if isinstance(spec, str) else spec
                for name, spec in value.items()
            }
        return value

    @field_validator("options", mode="before")
    @classmethod
    def normalize_options(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, (list, tuple)):
            return {name: {"class": name, "prefix": True} for name in value}
        if isinstance(value, dict):
            return {
                name: {"class": spec} if isinstance(spec, str) else spec
                for name, spec in value.items()
            }
        return value

    @field_validator("prepend", "append", mode="before")
    @classmethod
    def coerce_sibling(cls, value: Any) -> Any:
        return None if value is None else sibling(value)

    @field_validator("parent", "wrap_content", mode="before")
    @classmethod
    def coerce_wrap(cls, value: Any) -> Any:
        return None if value is None else wrap(value)

    @model_validator(mode="after")
    def check_renderable(self) -> "ComponentDefinition":
        """Validate the class and that a render strategy can be derived."""
        if not self.class_.strip():
            raise ValueError("Component class must not be empty")
        self.derive_strategy()
        return self

    @property
    def strategy(self) -> RenderStrategy:
        """The render strategy selected by kind, tag and delegate."""
        return self.derive_strategy()

    def derive_strategy(self) -> RenderStrategy:
        """Select the render strategy.

        Raises:
            ValueError: If kind, tag and delegate fit no strategy.
        """
        if self.kind == "void":
            if not isinstance(self.tag, str):
                raise ValueError(f"Void component '{self.class_}' needs a tag name")
            if self.delegate is not None:
                raise ValueError(f"Void component '{self.class_}' cannot delegate")
            return VoidStrategy(self.tag)

        if self.delegate is not None:
            if self.tag is not None and not isinstance(self.tag, str):
                raise ValueError(
                    f"Component '{self.class_}' cannot take both a tag function and a delegate"
                )
            return DelegateStrategy(self.delegate, tag=self.tag)
        if callable(self.tag):
            return DelegateStrategy(self.tag)
        if isinstance(self.tag, str):
            return ContentStrategy(self.tag)
        raise ValueError(f"Component '{self.class_}' needs a tag or a delegate")

    @property
    def option_names(self) -> tuple[str, ...]:
        return tuple(self.options)


def define(**fields: Any) -> ComponentDefinition:
    """Build a definition, raising ``ConfigurationError`` if it is malformed.

    ``class`` may be given as ``class_``.

    Examples:
        define(class_="list", tag="ul", variants=["flush", "horizontal"])
        define(class_="divider", tag="hr", kind="void")
    """
    try:
        return ComponentDefinition.model_validate(fields)
    except ValidationError as e:
        name = fields.get("class_", fields.get("class", "<unnamed>"))
        raise ConfigurationError(f"Invalid component '{name}': {e}") from e
