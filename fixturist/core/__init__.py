from .builder import FactoryBuilder
from .registry import BlueprintRegistry
from .values import Computed, computed

__all__ = ["BlueprintRegistry", "Computed", "FactoryBuilder", "computed"]
