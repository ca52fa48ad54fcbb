"""JSON file settings store.

The whole store is one JSON object on disk, keyed by settings section. A
missing file reads as an empty store; the file and its parent directory are
created on the first ``set``.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from zotsync.core.errors import StoreReadError

from .base import SettingsStore

logger = logging.getLogger(__name__)


class JsonSettingsStore(SettingsStore):
    """Settings store persisted to a single JSON file."""

    def __init__(self, path: Union[str, Path]):
        """
        Initialize JSON store.

        Args:
            path: Location of the settings file
        """
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StoreReadError(str(self.path), f"invalid JSON ({e.msg} at line {e.lineno})") from e
        except UnicodeDecodeError as e:
            raise StoreReadError(str(self.path), f"not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise StoreReadError(str(self.path), str(e)) from e
        if not isinstance(data, dict):
            raise StoreReadError(str(self.path), f"expected a JSON object, got {type(data).__name__}")
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        tmp_path.replace(self.path)

    def get_all(self) -> Dict[str, Any]:
        return self._read()

    def get(self, key: str) -> Any:
        return self._read().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)
        logger.debug("Wrote settings key '%s' to %s", key, self.path)
