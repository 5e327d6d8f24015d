"""Class composer - derives the final class string of a component.

Order of the composed tokens:
1. the variant portion: ``[base]`` when no variant is active, otherwise each
   variant's ``[base, variant]`` (merge) or ``[variant]`` (no merge), in the
   order the caller listed them, de-duplicated
2. one token per active option, in declaration order
3. the caller's own ``class``, verbatim
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from qwui.engine.definition import ComponentDefinition, OptionSpec, VariantSpec
from qwui.exceptions import UnknownVariantError, UsageError


def active_variants(options: Mapping[str, Any]) -> list[str]:
    """Normalize the ``variants`` call option into an ordered, unique list."""
    value = options.get("variants")
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise UsageError(f"Invalid 'variants' option: {value!r}")
    return list(dict.fromkeys(value))


def resolve_variants(
    definition: ComponentDefinition, names: Iterable[str]
) -> list[VariantSpec]:
    """Look up variant specs, failing on names the definition does not declare."""
    specs = []
    for name in names:
        spec = definition.variants.get(name)
        if spec is None:
            raise UnknownVariantError(name, definition.class_, list(definition.variants))
        specs.append(spec)
    return specs


def variant_classes(
    spec: VariantSpec, base_class: str, default_prefix: str | bool | None = None
) -> list[str]:
    """Classes contributed by a single variant."""
    prefix = spec.prefix if spec.prefix is not None else default_prefix
    if prefix is None or prefix is True:
        prefix = base_class

    if prefix is False:
        variant_class = spec.class_
    else:
        variant_class = f"{prefix}-{spec.class_}"

    return [base_class, variant_class] if spec.merge else [variant_class]


def option_class(spec: OptionSpec, value: Any, base_class: str) -> str | None:
    """Class contributed by an option set to ``value``, if any."""
    if value is None or value is False:
        return None

    token = spec.class_ if value is True else f"{spec.class_}-{value}"

    prefix = base_class if spec.prefix is True else spec.prefix
    if prefix:
        token = f"{prefix}-{token}"
    return token


def _caller_classes(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item]
    return [str(value)]


def compose_class(definition: ComponentDefinition, options: Mapping[str, Any]) -> str:
    """Compose the class string for one call.

    Raises:
        UnknownVariantError: If ``options["variants"]`` names an undeclared variant.
    """
    base_class = definition.class_
    specs = resolve_variants(definition, active_variants(options))

    if specs:
        portion: list[str] = []
        for spec in specs:
            portion.extend(variant_classes(spec, base_class, definition.variant_class_prefix))
        classes = list(dict.fromkeys(portion))
    else:
        classes = [base_class]

    for name, spec in definition.options.items():
        classes.append(option_class(spec, options.get(name), base_class))

    classes.extend(_caller_classes(options.get("class")))

    return " ".join(c for c in classes if c)
