from __future__ import annotations

from functools import cached_property
from inspect import isclass
from typing import TYPE_CHECKING, Any

from fixturist.exceptions import InvalidCountError, PersistenceError

from .values import merge_attributes, resolve_attributes

if TYPE_CHECKING:
    from faker import Faker

    from fixturist.protocols import ModelAdapterProtocol

    from .types import AttributeMap, Blueprint, ModelIdentifier


def validate_count(count: Any) -> int:
    """
    Returns `count` when it is a non-negative integer.

    Raises:
        InvalidCountError: For negative counts, booleans and non-integers.
    """
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise InvalidCountError(count)
    return count


class FactoryBuilder:
    """
    Builds model instances from one blueprint.

    A builder is bound to a single blueprint, the registry's shared Faker
    instance and its model adapter. It is usually obtained from
    `BlueprintRegistry.of()` rather than created directly.

    Every call re-runs the blueprint, so random values differ between
    instances unless they are overridden.

    Example:
        ```python
        users = factory.of("User", "admin")

        admin = users.build({"name": "Ada"})
        saved = users.create_many(3)
        ```

    Parameters:
        model (ModelIdentifier): Model class, or a name the adapter resolves.
        alias (str): The blueprint alias, used in messages.
        blueprint (Blueprint): The blueprint callable.
        faker (Faker): Shared generator handed to the blueprint.
        adapter (ModelAdapterProtocol): ORM adapter.
    """

    def __init__(
        self,
        model: ModelIdentifier,
        alias: str,
        blueprint: Blueprint,
        faker: Faker,
        adapter: ModelAdapterProtocol,
    ) -> None:
        self.model = model
        self.alias = alias
        self.blueprint = blueprint
        self.faker = faker
        self.adapter = adapter

    @cached_property
    def model_class(self) -> type:
        if isclass(self.model):
            return self.model
        return self.adapter.resolve_model(self.model)

    def raw_attributes(self, overrides: dict[str, Any] | None = None) -> AttributeMap:
        """
        Runs the blueprint and overlays `overrides`.

        Computed values are returned unresolved.
        """
        overrides = dict(overrides) if overrides else {}
        base = self.blueprint(self.faker, dict(overrides))
        return merge_attributes(base, overrides)

    def attributes(self, overrides: dict[str, Any] | None = None) -> AttributeMap:
        """Returns the final attributes, with computed values resolved."""
        return resolve_attributes(self.raw_attributes(overrides))

    def build(self, overrides: dict[str, Any] | None = None) -> Any:
        """
        Builds a transient instance.

        Raises:
            DeferredValueError: When a computed value fails. No instance is
                                created in that case.
        """
        return self.adapter.instantiate(self.model_class, self.attributes(overrides))

    def build_many(self, count: int, overrides: dict[str, Any] | None = None) -> list[Any]:
        count = validate_count(count)
        return [self.build(overrides) for _ in range(count)]

    def create(self, overrides: dict[str, Any] | None = None, persist: bool = True) -> Any:
        """
        Builds an instance and writes it through the model adapter.

        Parameters:
            overrides (dict[str, Any] | None): Attribute overrides.
            persist (bool): When `False` the instance is only built.

        Raises:
            PersistenceError: Wrapping whatever the adapter raised.
        """
        instance = self.build(overrides)
        if not persist:
            return instance
        try:
            return self.adapter.persist(instance)
        except Exception as exc:
            raise PersistenceError(instance, exc) from exc

    def create_many(self, count: int, overrides: dict[str, Any] | None = None) -> list[Any]:
        """
        Builds and writes `count` instances, one after the other.

        No transaction is opened. When a write fails, instances written before
        it stay in the database and the `PersistenceError` propagates.
        """
        count = validate_count(count)
        return [self.create(overrides) for _ in range(count)]

    # aliases of the collapsed build/make naming schemes
    make = build_one = build
    build_list = make_list = build_many
    create_one = create
    create_list = create_many

    def __repr__(self) -> str:
        name = self.model.__name__ if isclass(self.model) else self.model
        return f"{type(self).__name__}(model={name!r}, alias={self.alias!r})"
