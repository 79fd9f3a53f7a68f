from typing import TYPE_CHECKING

from monkay import Monkay

if TYPE_CHECKING:
    from .edgy import EdgyModelAdapter

__all__ = ["EdgyModelAdapter"]

Monkay(
    globals(),
    lazy_imports={
        "EdgyModelAdapter": ".edgy.EdgyModelAdapter",
    },
)
del Monkay
