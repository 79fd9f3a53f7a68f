from __future__ import annotations

import runpy
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from .registry import BlueprintRegistry
    from .types import PathType


def find_blueprint_files(path: PathType, pattern: str = "*.py") -> list[Path]:
    """
    Lists every file below `path` whose name matches `pattern`.

    Subdirectories are searched too. The result is sorted so blueprint files
    are always executed in the same order.
    """
    return sorted(candidate for candidate in Path(path).rglob(pattern) if candidate.is_file())


def run_blueprint_file(path: Path, registry: BlueprintRegistry) -> None:
    """
    Default loader: executes a Python blueprint file.

    The registry is injected into the file's globals as `factory` and
    `registry`, so a blueprint file reads like:

        ```python
        factory.define("User", lambda faker, overrides: {"name": faker.name()})
        ```
    """
    logger.debug(f"Running blueprint file '{path}'.")
    runpy.run_path(
        str(path),
        init_globals={"factory": registry, "registry": registry},
        run_name=f"fixturist.blueprints.{path.stem}",
    )
