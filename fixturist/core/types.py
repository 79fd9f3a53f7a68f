from __future__ import annotations

from collections.abc import Callable
from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from faker import Faker

    from .registry import BlueprintRegistry

# Field name to value. Values may be `Computed` before resolution.
AttributeMap: TypeAlias = dict[str, Any]

Blueprint: TypeAlias = Callable[["Faker", dict[str, Any]], AttributeMap]
"""
A callable receiving the shared Faker instance and the caller's overrides and
returning the base attributes of an instance.
"""

# A model class, or a name the model adapter can resolve.
ModelIdentifier: TypeAlias = type | str

BlueprintLoader: TypeAlias = Callable[[Path, "BlueprintRegistry"], Any]
"""
Executes one blueprint file. It receives the file path and the registry the
file should register its blueprints with.
"""

PathType: TypeAlias = str | PathLike
