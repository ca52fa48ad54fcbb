"""Startup reconciliation of stored settings and library requests.

``initialize()`` is called once when the extension is loaded. It accepts one
of two execution contexts:

- ``DepotContext``: settings live in the host's key/value store, reached
  through ``extension_api.settings`` (``get_all``/``get``/``set``). Sections
  missing from the store are written back with their defaults. Sections that
  exist, even partially, are never written; their missing options are filled
  in memory only.
- ``LegacyContext``: settings are a flat mapping supplied by the page, with
  the data requests at the top level under ``dataRequests``. Nothing is
  written back.

Usage:
    from zotsync.core.reconcile import DepotContext, initialize

    result = initialize(DepotContext(extension_api))
    result.settings["other"]["autoload"]
    result.requests.api_keys
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Union

from zotsync.core.defaults import get_section_defaults
from zotsync.core.errors import ConfigurationError, InvalidConfigError, MissingConfigError
from zotsync.core.merge import merge
from zotsync.core.requests import RequestCollection, derive_requests

logger = logging.getLogger(__name__)

REQUESTS_KEY = "requests"
LEGACY_REQUESTS_KEY = "dataRequests"
# Request records live beside the settings sections but are not merged.
NON_SETTINGS_KEYS = (REQUESTS_KEY, LEGACY_REQUESTS_KEY)

DEPOT_CONTEXT = "roam/depot"
LEGACY_CONTEXT = "roam/js"

_ACCESSOR_METHODS = ("get_all", "get", "set")


class SettingsAccessor(Protocol):
    """Host-provided settings store."""

    def get_all(self) -> Optional[Mapping[str, Any]]: ...

    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class ExtensionAPI(Protocol):
    """The part of the host extension API used here."""

    settings: SettingsAccessor


@dataclass(frozen=True)
class DepotContext:
    """Settings stored by the host behind ``extension_api.settings``."""

    extension_api: Optional[ExtensionAPI]


@dataclass(frozen=True)
class LegacyContext:
    """Settings supplied directly as a flat mapping (no persistence)."""

    manual_settings: Optional[Mapping[str, Any]]


ExecutionContext = Union[DepotContext, LegacyContext]


@dataclass
class InitializeResult:
    """Complete settings and the requests derived from them."""

    settings: dict[str, Any]
    requests: RequestCollection

    def to_dict(self) -> dict[str, Any]:
        return {"settings": copy.deepcopy(self.settings), "requests": self.requests.to_dict()}


def _resolve_accessor(extension_api: Any) -> SettingsAccessor:
    if extension_api is None:
        raise MissingConfigError("extension_api", source="roam/depot context")
    accessor = getattr(extension_api, "settings", None)
    if accessor is None:
        raise MissingConfigError("extension_api.settings", source="roam/depot context")
    for method in _ACCESSOR_METHODS:
        if not callable(getattr(accessor, method, None)):
            raise InvalidConfigError(
                "extension_api.settings", type(accessor).__name__, f"settings accessor has no callable '{method}'"
            )
    return accessor


def _initialize_depot(context: DepotContext) -> InitializeResult:
    accessor = _resolve_accessor(context.extension_api)

    snapshot = accessor.get_all()
    if snapshot is None:
        snapshot = {}
    elif not isinstance(snapshot, Mapping):
        logger.warning("Host settings snapshot is not a mapping (%s); treating as empty", type(snapshot).__name__)
        snapshot = {}
    first_run = len(snapshot) == 0

    raw_settings = {key: value for key, value in snapshot.items() if key not in NON_SETTINGS_KEYS}
    result = merge(raw_settings)

    for name in result.missing_top_level_keys:
        logger.info("Writing default settings for missing section '%s'", name)
        accessor.set(name, get_section_defaults(name))

    if first_run:
        logger.info("First run: writing empty '%s' record", REQUESTS_KEY)
        accessor.set(REQUESTS_KEY, RequestCollection.empty().to_dict())

    requests = derive_requests(snapshot.get(REQUESTS_KEY))
    return InitializeResult(settings=result.settings, requests=requests)


def _initialize_legacy(context: LegacyContext) -> InitializeResult:
    manual_settings = context.manual_settings
    if manual_settings is None:
        raise MissingConfigError("manual_settings", source="roam/js context")
    if not isinstance(manual_settings, Mapping):
        raise InvalidConfigError("manual_settings", type(manual_settings).__name__, "must be a mapping")

    raw_settings = {key: value for key, value in manual_settings.items() if key not in NON_SETTINGS_KEYS}
    result = merge(raw_settings)
    requests = derive_requests(manual_settings.get(LEGACY_REQUESTS_KEY))
    return InitializeResult(settings=result.settings, requests=requests)


def initialize(context: ExecutionContext) -> InitializeResult:
    """Merge stored settings with defaults and derive the library requests.

    Args:
        context: DepotContext or LegacyContext

    Returns:
        InitializeResult with complete settings and normalized requests

    Raises:
        ConfigurationError: If the context has no usable settings source
        StorageError: If the host settings store cannot be read
    """
    if isinstance(context, DepotContext):
        result = _initialize_depot(context)
    elif isinstance(context, LegacyContext):
        result = _initialize_legacy(context)
    else:
        raise ConfigurationError(
            f"Unsupported execution context: {type(context).__name__}",
            details={"context": type(context).__name__},
        )

    if result.requests.rejected:
        logger.warning(
            "%d data request(s) skipped; %d librar%s loaded",
            len(result.requests.rejected),
            len(result.requests.libraries),
            "y" if len(result.requests.libraries) == 1 else "ies",
        )
    return result


def build_context(
    context: str = LEGACY_CONTEXT,
    extension_api: Any = None,
    manual_settings: Optional[Mapping[str, Any]] = None,
) -> ExecutionContext:
    """Map the host's context tag onto an ExecutionContext.

    Raises:
        ConfigurationError: For an unknown tag, or a tag without its settings source
    """
    if context == DEPOT_CONTEXT:
        if extension_api is None:
            raise MissingConfigError("extension_api", source=f"'{DEPOT_CONTEXT}' context")
        return DepotContext(extension_api=extension_api)
    if context == LEGACY_CONTEXT:
        if manual_settings is None:
            raise MissingConfigError("manual_settings", source=f"'{LEGACY_CONTEXT}' context")
        return LegacyContext(manual_settings=manual_settings)
    raise InvalidConfigError("context", context, f"expected '{DEPOT_CONTEXT}' or '{LEGACY_CONTEXT}'")
