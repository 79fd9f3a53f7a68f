from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import monkay
import sqlalchemy
from edgy import run_sync
from loguru import logger

if TYPE_CHECKING:
    from edgy import Model, Registry
    from edgy.core.connection import Database


class EdgyModelAdapter:
    """
    Model adapter backed by the Edgy ORM.

    Edgy is asynchronous; every database call made here is driven with
    `edgy.run_sync`, so the registry owning the models must be connected,
    either with `async with registry:` or `with registry.with_async_env():`.

    Parameters:
        registry (Registry | None): Registry used to resolve bare model names.
                                    When omitted, the registry of the active
                                    Edgy instance is used, if any.
    """

    def __init__(self, registry: Registry | None = None) -> None:
        self._registry = registry

    @property
    def registry(self) -> Registry | None:
        if self._registry is not None:
            return self._registry
        import edgy

        instance = edgy.monkay.instance
        return instance.registry if instance is not None else None

    def resolve_model(self, name: str) -> type[Model]:
        # "myapp.models.User" and "myapp.models:User" are import paths.
        if "." in name or ":" in name:
            return cast("type[Model]", monkay.load(name))
        registry = self.registry
        if registry is None:
            raise LookupError(
                f'Cannot resolve model "{name}": no Edgy registry is configured.'
            )
        return cast("type[Model]", registry.get_model(name))

    def instantiate(self, model_class: type[Model], attributes: dict[str, Any]) -> Model:
        instance = model_class(**attributes)
        # Built instances must not lazy load from the database.
        instance._db_loaded = True
        return instance

    def persist(self, instance: Model) -> Model:
        return cast("Model", run_sync(instance.save(force_insert=True)))

    def table_name(self, model_class: type[Model]) -> str:
        return cast(str, model_class.table.fullname)

    def reset_table(self, model_class: type[Model]) -> None:
        table = model_class.table
        row_count = run_sync(model_class.query.delete())
        logger.info(f"Deleted {row_count} rows from '{table.fullname}'.")

        column = table.autoincrement_column
        if column is None:
            return
        run_sync(self.reset_sequence(model_class.database, table, column))

    async def reset_sequence(
        self, database: Database, table: sqlalchemy.Table, column: sqlalchemy.Column
    ) -> None:
        """
        Restarts the auto-increment sequence of `column` at 1.

        Supports PostgreSQL, SQLite and MySQL/MariaDB. Other dialects are left
        untouched.
        """
        dialect = database.url.dialect
        if dialect.startswith("postgres"):
            expression = sqlalchemy.text(
                "SELECT setval(pg_get_serial_sequence(:table, :column), 1, false)"
            ).bindparams(table=table.fullname, column=column.name)
            await database.execute(expression)
        elif dialect == "sqlite":
            # sqlite_sequence only exists once a table declared AUTOINCREMENT.
            exists = await database.fetch_val(
                sqlalchemy.text(
                    "SELECT count(*) FROM sqlite_master "
                    "WHERE type = 'table' AND name = 'sqlite_sequence'"
                )
            )
            if exists:
                await database.execute(
                    sqlalchemy.text("DELETE FROM sqlite_sequence WHERE name = :table").bindparams(
                        table=table.name
                    )
                )
        elif dialect in {"mysql", "mariadb"}:
            preparer = database.engine.dialect.identifier_preparer
            await database.execute(
                sqlalchemy.text(f"ALTER TABLE {preparer.format_table(table)} AUTO_INCREMENT = 1")
            )
        else:
            logger.warning(
                f"Sequence reset is not supported for dialect '{dialect}', "
                f"'{table.fullname}' keeps its current sequence value."
            )
            return
        logger.info(f"Reset sequence of '{table.fullname}' to 1.")
