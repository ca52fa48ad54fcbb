"""Core exception hierarchy for zotsync.

All zotsync exceptions inherit from ZotsyncError, enabling both specific
and broad exception handling.

Exception Hierarchy:
    ZotsyncError (base)
    ├── ConfigurationError - No usable settings backend (fatal)
    │   ├── MissingConfigError
    │   └── InvalidConfigError
    ├── ValidationError - Input validation
    │   └── RequestEntryInvalidError
    └── StorageError - Settings store issues
        └── StoreReadError

ConfigurationError and StorageError (from the host store) escape initialize();
validation errors on single request entries are logged and the entry is
dropped.
"""

from typing import Optional, Dict, Any


class ZotsyncError(Exception):
    """Base exception for all zotsync errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code (e.g., "MISSING_CONFIG")
        details: Optional dict with additional context
    """

    error_code: str = "ZOTSYNC_ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        if error_code:
            self.error_code = error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dict for CLI/JSON output."""
        return {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


# Configuration Errors
class ConfigurationError(ZotsyncError):
    """Base class for fatal configuration errors."""
    error_code = "CONFIG_ERROR"


class MissingConfigError(ConfigurationError):
    """Required configuration is missing."""
    error_code = "MISSING_CONFIG"

    def __init__(self, config_key: str, source: str = "execution context"):
        super().__init__(
            f"Required configuration '{config_key}' not found in {source}.",
            details={"config_key": config_key, "source": source}
        )


class InvalidConfigError(ConfigurationError):
    """Configuration value is invalid."""
    error_code = "INVALID_CONFIG"

    def __init__(self, config_key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid value for '{config_key}': {reason}",
            details={"config_key": config_key, "value": str(value), "reason": reason}
        )


# Validation Errors
class ValidationError(ZotsyncError):
    """Base class for validation errors."""
    error_code = "VALIDATION_ERROR"


class RequestEntryInvalidError(ValidationError):
    """A single data request cannot be normalized."""
    error_code = "REQUEST_ENTRY_INVALID"

    def __init__(self, index: int, reason: str, entry: Any = None):
        super().__init__(
            f"Data request #{index} is invalid: {reason}",
            details={"index": index, "reason": reason, "name": _entry_name(entry)}
        )
        self.index = index
        self.reason = reason


def _entry_name(entry: Any) -> Optional[str]:
    if isinstance(entry, dict):
        name = entry.get("name")
        return str(name) if name is not None else None
    return None


# Storage Errors
class StorageError(ZotsyncError):
    """Base class for settings store errors."""
    error_code = "STORAGE_ERROR"


class StoreReadError(StorageError):
    """Settings store exists but cannot be read as a JSON object."""
    error_code = "STORE_READ"

    def __init__(self, filepath: str, reason: str):
        super().__init__(
            f"Cannot read settings store '{filepath}': {reason}",
            details={"filepath": filepath, "reason": reason}
        )
