from __future__ import annotations

from collections.abc import Callable
from inspect import isclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import monkay
from loguru import logger

from fixturist.conf import settings
from fixturist.exceptions import AmbiguousModelError, InvalidPathError, UndefinedBlueprintError

from .builder import FactoryBuilder
from .generator import create_generator
from .loaders import find_blueprint_files

if TYPE_CHECKING:
    from faker import Faker

    from fixturist.protocols import ModelAdapterProtocol

    from .types import AttributeMap, Blueprint, BlueprintLoader, ModelIdentifier, PathType

DEFAULT_ALIAS = "default"


def model_name(model: ModelIdentifier) -> str:
    """
    Returns the registry key of a model class or model name.

    Classes are keyed by their import path, so same-named models of different
    modules never share blueprints.
    """
    if isclass(model):
        return f"{model.__module__}.{model.__qualname__}"
    return model


class BlueprintRegistry:
    """
    Holds the blueprints of every model and builds instances from them.

    Blueprints are stored per model and alias. Model classes are keyed by their
    import path (`"myapp.models.User"`) and can also be looked up by their bare
    name (`"User"`) as long as no other blueprinted class shares it. A model can have as many
    aliases as needed ("default", "admin", ...); the alias `"default"` is used
    whenever none is given.

    Example:
        ```python
        factory = BlueprintRegistry()

        factory.define(User, lambda faker, overrides: {"name": faker.name(), "age": 30})
        factory.define(
            User, lambda faker, overrides: {"name": faker.name(), "is_admin": True}, alias="admin"
        )

        user = factory.build(User, {"age": 31})
        admins = factory.create_list(User, 3, alias="admin")
        ```

    Parameters:
        adapter (ModelAdapterProtocol | None): ORM adapter. Defaults to an
            instance of `settings.model_adapter`.
        language (str | None): Faker locale. Defaults to `settings.language`.
        factories_path (PathType | None): Directory of blueprint files.
            Defaults to `settings.factories_path`.
        pattern (str | None): Glob for blueprint files. Defaults to
            `settings.factories_pattern`.
        loader (BlueprintLoader | None): Executes a single blueprint file.
            Defaults to `settings.blueprint_loader`.
        autoload (bool): Load `factories_path` right away when one is set.
    """

    def __init__(
        self,
        *,
        adapter: ModelAdapterProtocol | None = None,
        language: str | None = None,
        factories_path: PathType | None = None,
        pattern: str | None = None,
        loader: BlueprintLoader | None = None,
        autoload: bool = True,
    ) -> None:
        self._definitions: dict[str, dict[str, Blueprint]] = {}
        self._models: dict[str, type] = {}
        self._short_names: dict[str, list[str]] = {}
        self._generator: Faker | None = None
        self._adapter = adapter
        self.language = language
        self.factories_path = (
            factories_path if factories_path is not None else settings.factories_path
        )
        self.pattern = pattern or settings.factories_pattern
        self.loader: BlueprintLoader = loader or monkay.load(settings.blueprint_loader)

        if autoload and self.factories_path:
            self.load(self.factories_path)

    @property
    def adapter(self) -> ModelAdapterProtocol:
        if self._adapter is None:
            adapter_class = monkay.load(settings.model_adapter)
            self._adapter = adapter_class()
        return self._adapter

    @property
    def generator(self) -> Faker:
        """
        The Faker instance shared by every builder of this registry.

        Created on first access and kept for the lifetime of the registry.
        """
        if self._generator is None:
            language = self.language if self.language is not None else settings.language
            self._generator = create_generator(language, seed=settings.faker_seed)
        return self._generator

    faker = generator

    def load(self, path: PathType) -> BlueprintRegistry:
        """
        Runs every blueprint file found below `path`.

        Files are not deduplicated: loading the same directory twice runs each
        file again, and the later registrations overwrite the earlier ones.

        Raises:
            InvalidPathError: When `path` is not a directory.
        """
        directory = Path(path)
        if not directory.is_dir():
            raise InvalidPathError(f'Factories path "{path}" must be a directory.')
        files = find_blueprint_files(directory, self.pattern)
        for file in files:
            self.loader(file, self)
        logger.info(f"Loaded {len(files)} blueprint file(s) from '{directory}'.")
        return self

    load_directory = load

    def define(
        self, model: ModelIdentifier, blueprint: Blueprint, alias: str = DEFAULT_ALIAS
    ) -> Blueprint:
        """
        Registers `blueprint` for `model` under `alias`.

        An existing blueprint with the same key is replaced.
        """
        name = model_name(model)
        if isclass(model):
            self._models[name] = model
            keys = self._short_names.setdefault(model.__name__, [])
            if name not in keys:
                keys.append(name)
        self._definitions.setdefault(name, {})[alias] = blueprint
        logger.debug(f"Defined blueprint '{alias}' for model '{name}'.")
        return blueprint

    def blueprint(
        self, model: ModelIdentifier, alias: str = DEFAULT_ALIAS
    ) -> Callable[[Blueprint], Blueprint]:
        """
        Decorator registering the decorated function as a blueprint.

            ```python
            @factory.blueprint(User, alias="admin")
            def admin(faker, overrides):
                return {"name": faker.name(), "is_admin": True}
            ```
        """

        def decorator(function: Blueprint) -> Blueprint:
            return self.define(model, function, alias=alias)

        return decorator

    def key_of(self, model: ModelIdentifier) -> str:
        """
        Returns the key blueprints of `model` are stored under.

        Strings matching a key exactly win. Otherwise a bare class name is
        expanded to the import path of the one blueprinted class carrying it.

        Raises:
            AmbiguousModelError: When the bare name belongs to several classes.
        """
        if isclass(model) or model in self._definitions:
            return model_name(model)
        keys = self._short_names.get(model, [])
        if len(keys) > 1:
            raise AmbiguousModelError(model, keys)
        return keys[0] if keys else model

    def lookup(self, model: ModelIdentifier, alias: str = DEFAULT_ALIAS) -> Blueprint:
        """
        Returns the blueprint registered for `model` and `alias`.

        Raises:
            UndefinedBlueprintError: When the pair is not registered.
            AmbiguousModelError: When a bare name matches several classes.
        """
        name = self.key_of(model)
        try:
            return self._definitions[name][alias]
        except KeyError:
            raise UndefinedBlueprintError(name, alias) from None

    def get(
        self, model: ModelIdentifier, alias: str = DEFAULT_ALIAS, default: Any = None
    ) -> Blueprint | Any:
        return self._definitions.get(self.key_of(model), {}).get(alias, default)

    def has(self, model: ModelIdentifier, alias: str | None = None) -> bool:
        aliases = self._definitions.get(self.key_of(model))
        if not aliases:
            return False
        return alias is None or alias in aliases

    def remove(self, model: ModelIdentifier, alias: str | None = None) -> None:
        """
        Removes one alias of `model`, or every alias when `alias` is `None`.

        Unknown keys are ignored.
        """
        name = self.key_of(model)
        aliases = self._definitions.get(name)
        if aliases is None:
            return
        if alias is not None:
            aliases.pop(alias, None)
        if alias is None or not aliases:
            del self._definitions[name]
            model_class = self._models.pop(name, None)
            if model_class is not None:
                keys = self._short_names[model_class.__name__]
                keys.remove(name)
                if not keys:
                    del self._short_names[model_class.__name__]
        logger.debug(f"Removed blueprint(s) '{alias or '*'}' of model '{name}'.")

    def aliases(self, model: ModelIdentifier) -> list[str]:
        return list(self._definitions.get(self.key_of(model), ()))

    def models(self) -> list[str]:
        return list(self._definitions)

    def resolve_model(self, model: ModelIdentifier) -> type:
        if isclass(model):
            return model
        cls = self._models.get(self.key_of(model))
        if cls is not None:
            return cls
        return self.adapter.resolve_model(model)

    def of(self, model: ModelIdentifier, alias: str = DEFAULT_ALIAS) -> FactoryBuilder:
        """
        Returns a builder for the blueprint of `model` and `alias`.

        Raises:
            UndefinedBlueprintError: When the pair is not registered.
        """
        blueprint = self.lookup(model, alias)
        name = self.key_of(model)
        return FactoryBuilder(
            self._models.get(name, model),
            alias,
            blueprint,
            self.generator,
            self.adapter,
        )

    def attributes(
        self,
        model: ModelIdentifier,
        overrides: dict[str, Any] | None = None,
        alias: str = DEFAULT_ALIAS,
    ) -> AttributeMap:
        """Blueprint output with overrides applied, computed values unresolved."""
        return self.of(model, alias).raw_attributes(overrides)

    def build(
        self,
        model: ModelIdentifier,
        overrides: dict[str, Any] | None = None,
        alias: str = DEFAULT_ALIAS,
    ) -> Any:
        return self.of(model, alias).build(overrides)

    make = build

    def build_list(
        self,
        model: ModelIdentifier,
        count: int,
        overrides: dict[str, Any] | None = None,
        alias: str = DEFAULT_ALIAS,
    ) -> list[Any]:
        return self.of(model, alias).build_many(count, overrides)

    make_list = build_list

    def create(
        self,
        model: ModelIdentifier,
        overrides: dict[str, Any] | None = None,
        alias: str = DEFAULT_ALIAS,
        persist: bool = True,
    ) -> Any:
        return self.of(model, alias).create(overrides, persist=persist)

    def create_list(
        self,
        model: ModelIdentifier,
        count: int,
        overrides: dict[str, Any] | None = None,
        alias: str = DEFAULT_ALIAS,
    ) -> list[Any]:
        return self.of(model, alias).create_many(count, overrides)

    def reset_table(self, model: ModelIdentifier) -> None:
        """
        Deletes every row of the table behind `model` and restarts its
        sequence at 1.
        """
        model_class = self.resolve_model(model)
        self.adapter.reset_table(model_class)
        logger.info(f"Flushed table '{self.adapter.table_name(model_class)}'.")

    def flush_all(self) -> None:
        """
        Empties the table of every model with at least one blueprint.

        Each table is reset once, however many aliases its model has. Models
        are flushed in reverse definition order, so rows referencing a model
        defined earlier are removed before the rows they reference.
        """
        for name in reversed(list(self._definitions)):
            self.reset_table(name)

    def __contains__(self, model: ModelIdentifier) -> bool:
        return self.has(model)

    def __getitem__(self, model: ModelIdentifier) -> Any:
        return self.build(model)

    def __setitem__(self, model: ModelIdentifier, blueprint: Blueprint) -> None:
        self.define(model, blueprint)

    def __delitem__(self, model: ModelIdentifier) -> None:
        self.remove(model)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(models={self.models()!r})"
