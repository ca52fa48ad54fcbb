"""Settings merge and request derivation."""

from .defaults import SECTION_NAMES, get_defaults, get_section_defaults
from .merge import MergeResult, merge, setup_initial_settings
from .reconcile import (
    DepotContext,
    ExecutionContext,
    InitializeResult,
    LegacyContext,
    build_context,
    initialize,
)
from .requests import LibraryRef, RequestCollection, RequestDescriptor, derive_requests

__all__ = [
    "SECTION_NAMES",
    "get_defaults",
    "get_section_defaults",
    "MergeResult",
    "merge",
    "setup_initial_settings",
    "DepotContext",
    "ExecutionContext",
    "InitializeResult",
    "LegacyContext",
    "build_context",
    "initialize",
    "LibraryRef",
    "RequestCollection",
    "RequestDescriptor",
    "derive_requests",
]
