"""In-memory settings store."""

import copy
from typing import Any, Dict, Optional

from .base import SettingsStore


class MemorySettingsStore(SettingsStore):
    """Dict-backed store; snapshots are deep copies so callers cannot mutate state."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def get_all(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)

    def get(self, key: str) -> Any:
        return copy.deepcopy(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def __contains__(self, key: str) -> bool:
        return key in self._data
