from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ModelAdapterProtocol(Protocol):
    """
    Defines the narrow interface fixturist needs from an ORM.

    The registry and the builders never talk to model classes directly; every
    resolution, instantiation, write and table reset goes through an object
    implementing this protocol. The `@runtime_checkable` decorator allows
    `isinstance()` checks against custom adapters.
    """

    def resolve_model(self, name: str) -> type:
        """
        Maps a model name to a constructible model class.

        Raises:
            LookupError: When no model is known under `name`.
        """
        ...

    def instantiate(self, model_class: type, attributes: dict[str, Any]) -> Any:
        """
        Creates a transient instance with every attribute in `attributes`
        assigned, without filtering attributes by any safety rules.
        """
        ...

    def persist(self, instance: Any) -> Any:
        """
        Writes a transient instance to the backing store and returns it.
        Errors from the store are raised unchanged.
        """
        ...

    def table_name(self, model_class: type) -> str:
        """Returns the fully qualified table name backing `model_class`."""
        ...

    def reset_table(self, model_class: type) -> None:
        """
        Deletes every row of the table backing `model_class` and resets its
        auto-increment sequence to 1 when it has one.
        """
        ...
