from __future__ import annotations

__version__ = "0.1.0"

import os
from typing import TYPE_CHECKING

from monkay import Monkay

if TYPE_CHECKING:
    from .adapters.edgy import EdgyModelAdapter
    from .conf.global_settings import FixturistSettings
    from .core.builder import FactoryBuilder
    from .core.registry import BlueprintRegistry
    from .core.values import Computed, computed
    from .exceptions import (
        AmbiguousModelError,
        DeferredValueError,
        FixturistException,
        InvalidCountError,
        InvalidPathError,
        PersistenceError,
        UndefinedBlueprintError,
    )
    from .protocols import ModelAdapterProtocol

__all__ = [
    "AmbiguousModelError",
    "BlueprintRegistry",
    "Computed",
    "DeferredValueError",
    "EdgyModelAdapter",
    "FactoryBuilder",
    "FixturistException",
    "FixturistSettings",
    "InvalidCountError",
    "InvalidPathError",
    "ModelAdapterProtocol",
    "PersistenceError",
    "UndefinedBlueprintError",
    "computed",
    "monkay",
    "settings",
]

monkay: Monkay[None, FixturistSettings] = Monkay(
    globals(),
    settings_path=lambda: os.environ.get(
        "FIXTURIST_SETTINGS_MODULE", "fixturist.conf.global_settings.FixturistSettings"
    )
    or "",
    uncached_imports={"settings"},
    lazy_imports={
        "settings": lambda: monkay.settings,
        "FixturistSettings": "fixturist.conf.global_settings:FixturistSettings",
        "BlueprintRegistry": "fixturist.core.registry:BlueprintRegistry",
        "FactoryBuilder": "fixturist.core.builder:FactoryBuilder",
        "Computed": "fixturist.core.values:Computed",
        "computed": "fixturist.core.values:computed",
        "EdgyModelAdapter": "fixturist.adapters.edgy:EdgyModelAdapter",
        "ModelAdapterProtocol": "fixturist.protocols:ModelAdapterProtocol",
        "FixturistException": "fixturist.exceptions:FixturistException",
        "AmbiguousModelError": "fixturist.exceptions:AmbiguousModelError",
        "InvalidPathError": "fixturist.exceptions:InvalidPathError",
        "UndefinedBlueprintError": "fixturist.exceptions:UndefinedBlueprintError",
        "InvalidCountError": "fixturist.exceptions:InvalidCountError",
        "DeferredValueError": "fixturist.exceptions:DeferredValueError",
        "PersistenceError": "fixturist.exceptions:PersistenceError",
    },
    skip_all_update=True,
)
