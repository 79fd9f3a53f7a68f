from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from fixturist.exceptions import DeferredValueError


class Computed:
    """
    An attribute value computed from the merged attributes of an instance.

    Blueprints return `Computed` for fields that depend on sibling fields,
    for example a full name derived from first and last name. Only values
    wrapped in `Computed` are resolved; a bare callable is kept as a literal.

    The wrapped function takes either no arguments or a single argument,
    the read-only mapping of merged attributes.

    Example:
        ```python
        factory.define(
            "User",
            lambda faker, overrides: {
                "first_name": faker.first_name(),
                "last_name": faker.last_name(),
                "full_name": Computed(lambda attrs: f"{attrs['first_name']} {attrs['last_name']}"),
            },
        )
        ```
    """

    __slots__ = ("function", "takes_attributes")

    def __init__(self, function: Callable[..., Any]) -> None:
        if not callable(function):
            raise TypeError(f"Computed expects a callable, got {type(function).__name__}.")
        self.function = function
        self.takes_attributes = _accepts_argument(function)

    def __call__(self, attributes: Mapping[str, Any]) -> Any:
        if self.takes_attributes:
            return self.function(attributes)
        return self.function()

    def __repr__(self) -> str:
        name = getattr(self.function, "__qualname__", repr(self.function))
        return f"Computed({name})"


def computed(function: Callable[..., Any]) -> Computed:
    """Decorator form of `Computed`."""
    return Computed(function)


def _accepts_argument(function: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError):
        # builtins without introspectable signatures get the attributes
        return True
    for parameter in signature.parameters.values():
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.VAR_POSITIONAL,
        ):
            return True
    return False


def merge_attributes(
    base: Mapping[str, Any], overrides: Mapping[str, Any] | None
) -> dict[str, Any]:
    """
    Overlays `overrides` on top of `base`.

    Keys that only exist in `overrides` are added, so overrides may carry
    fields the blueprint never mentions.
    """
    merged = dict(base)
    if overrides:
        merged.update(overrides)
    return merged


def resolve_attributes(attributes: Mapping[str, Any]) -> dict[str, Any]:
    """
    Resolves every `Computed` value in `attributes`.

    Values are resolved in insertion order. Each computation receives a
    read-only view of the attributes in which the computations before it are
    already resolved. Results are not resolved a second time, even when they
    are themselves `Computed`.

    Raises:
        DeferredValueError: When a computation raises.
    """
    resolved = dict(attributes)
    view = MappingProxyType(resolved)
    for name, value in attributes.items():
        if not isinstance(value, Computed):
            continue
        try:
            resolved[name] = value(view)
        except Exception as exc:
            raise DeferredValueError(name, exc) from exc
    return resolved
