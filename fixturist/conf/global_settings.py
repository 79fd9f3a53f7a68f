from __future__ import annotations

import os

from pydantic_settings import BaseSettings, SettingsConfigDict


class FixturistSettings(BaseSettings):
    """
    Main settings class for fixturist.

    Every value can be overridden through an environment variable prefixed
    with `FIXTURIST_`, or by pointing `FIXTURIST_SETTINGS_MODULE` at a
    subclass.
    """

    model_config = SettingsConfigDict(extra="allow", env_prefix="FIXTURIST_")

    factories_path: str | os.PathLike | None = None
    """
    Directory scanned for blueprint files when a registry is created.

    `None` disables loading at construction time.
    """
    factories_pattern: str = "*.py"
    """
    Glob pattern a file name must match to be loaded as a blueprint file.
    The directory is searched recursively.
    """
    language: str = "en_US"
    """
    Locale handed to Faker. Hyphenated forms such as `en-US` are accepted.
    """
    faker_seed: int | None = None
    """
    Optional seed applied to the Faker instance when it is first created.
    """
    blueprint_loader: str = "fixturist.core.loaders.run_blueprint_file"
    """
    Import path of the callable used to execute a single blueprint file.
    It receives the file path and the registry.
    """
    model_adapter: str = "fixturist.adapters.edgy.EdgyModelAdapter"
    """
    Import path of the model adapter class used when a registry is created
    without an explicit adapter.
    """
