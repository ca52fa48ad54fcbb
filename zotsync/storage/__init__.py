"""Settings stores (in-memory, JSON file)."""

from typing import Literal

from .base import SettingsStore, StoreExtensionAPI
from .json_file import JsonSettingsStore
from .memory import MemorySettingsStore

StoreType = Literal["memory", "json"]


def create_store(store_type: StoreType, **kwargs) -> SettingsStore:
    """
    Factory function to create a settings store.

    Args:
        store_type: Either "memory" or "json"
        **kwargs: Store-specific configuration (``initial`` or ``path``)

    Returns:
        SettingsStore instance

    Raises:
        ValueError: If store_type is not supported
    """
    if store_type == "memory":
        return MemorySettingsStore(**kwargs)
    elif store_type == "json":
        return JsonSettingsStore(**kwargs)
    else:
        raise ValueError(f"Unsupported store type: {store_type}")


__all__ = [
    "SettingsStore",
    "StoreExtensionAPI",
    "MemorySettingsStore",
    "JsonSettingsStore",
    "create_store",
    "StoreType",
]
