from .model_adapter import ModelAdapterProtocol

__all__ = ["ModelAdapterProtocol"]
