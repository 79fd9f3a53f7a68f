from collections import defaultdict
from typing import Any


class Record:
    """Plain attribute bag standing in for an ORM model."""

    id: int | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({vars(self)!r})"


class User(Record): ...


class Post(Record): ...


class InMemoryAdapter:
    """
    Model adapter keeping rows in dictionaries.

    `reject` can be set to a predicate; instances it matches fail to persist
    the way a constraint violation would.
    """

    def __init__(self, *models: type) -> None:
        self.models = {model.__name__: model for model in models}
        self.tables: dict[str, list[dict[str, Any]]] = defaultdict(list)
        self.sequences: dict[str, int] = defaultdict(int)
        self.instantiated: list[Any] = []
        self.resets: list[str] = []
        self.reject = None

    def resolve_model(self, name: str) -> type:
        try:
            return self.models[name]
        except KeyError:
            raise LookupError(f'No model named "{name}".') from None

    def instantiate(self, model_class: type, attributes: dict[str, Any]) -> Any:
        instance = model_class()
        for key, value in attributes.items():
            setattr(instance, key, value)
        self.instantiated.append(instance)
        return instance

    def persist(self, instance: Any) -> Any:
        if self.reject is not None and self.reject(instance):
            raise ValueError("UNIQUE constraint failed")
        table = self.table_name(type(instance))
        if instance.id is None:
            self.sequences[table] += 1
            instance.id = self.sequences[table]
        self.tables[table].append(dict(vars(instance)))
        return instance

    def fetch(self, model_class: type, id: int) -> dict[str, Any]:
        for row in self.tables[self.table_name(model_class)]:
            if row["id"] == id:
                return row
        raise LookupError(id)

    def table_name(self, model_class: type) -> str:
        return f"{model_class.__name__.lower()}s"

    def reset_table(self, model_class: type) -> None:
        table = self.table_name(model_class)
        self.tables[table].clear()
        self.sequences[table] = 0
        self.resets.append(table)


LOADED_FILES: list[str] = []


def record_loader(path, registry) -> None:
    LOADED_FILES.append(path.name)
