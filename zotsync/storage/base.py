"""Settings store contract and the host extension API shape."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional


class SettingsStore(ABC):
    """Abstract key/value settings store.

    Implementations match the host accessor contract consumed by
    ``zotsync.core.reconcile``: ``get_all`` reflects the latest committed state
    and ``set`` is durable once it returns.
    """

    @abstractmethod
    def get_all(self) -> Optional[Dict[str, Any]]:
        """Return a snapshot of every stored key."""
        pass

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the value stored under ``key``, or None."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""
        pass


@dataclass
class StoreExtensionAPI:
    """Minimal stand-in for the host extension API: exposes a store as ``settings``."""

    settings: SettingsStore
