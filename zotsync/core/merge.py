"""Non-destructive merge of stored settings against the default schema.

A key that is present in the raw settings always wins, whatever its value:
``False``, ``""``, ``0`` and ``None`` are user choices, not gaps. Only keys
that are absent fall back to the default. Unrecognized keys are kept so a
store written by a newer release survives a round-trip through an older one.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from zotsync.core.defaults import SECTION_NAMES, get_defaults

logger = logging.getLogger(__name__)


@dataclass
class MergeResult:
    """Outcome of merging raw settings with the defaults.

    Attributes:
        settings: Structurally complete settings
        missing_top_level_keys: Sections absent from the raw input, in schema order
    """

    settings: dict[str, Any]
    missing_top_level_keys: list[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        """True when the raw input already had every section."""
        return not self.missing_top_level_keys


def _merge_record(raw: Mapping, defaults: dict[str, Any], path: str) -> dict[str, Any]:
    """Merge one mapping against its default, following the schema's nesting only."""
    merged: dict[str, Any] = {}
    for key, default_value in defaults.items():
        if key not in raw:
            merged[key] = default_value
            continue
        value = raw[key]
        if isinstance(default_value, dict) and default_value:
            if isinstance(value, Mapping):
                merged[key] = _merge_record(value, default_value, f"{path}.{key}")
            else:
                logger.warning(
                    "Settings record '%s.%s' is not a mapping (%s); using defaults in memory",
                    path,
                    key,
                    type(value).__name__,
                )
                merged[key] = default_value
        else:
            merged[key] = copy.deepcopy(value)

    for key, value in raw.items():
        if key not in defaults:
            merged[key] = copy.deepcopy(value)
    return merged


def merge(raw: Optional[Mapping[str, Any]]) -> MergeResult:
    """Deep-merge raw settings with the default schema.

    Args:
        raw: Stored settings; may be partial, None, or not a mapping at all

    Returns:
        MergeResult with complete settings and the list of missing sections
    """
    if raw is None:
        raw = {}
    elif not isinstance(raw, Mapping):
        logger.warning("Stored settings are not a mapping (%s); treating as empty", type(raw).__name__)
        raw = {}

    defaults = get_defaults()
    settings: dict[str, Any] = {}
    missing: list[str] = []

    for name in SECTION_NAMES:
        if name not in raw:
            missing.append(name)
            settings[name] = defaults[name]
            continue
        section = raw[name]
        if not isinstance(section, Mapping):
            logger.warning(
                "Settings section '%s' is not a mapping (%s); using defaults in memory",
                name,
                type(section).__name__,
            )
            settings[name] = defaults[name]
            continue
        settings[name] = _merge_record(section, defaults[name], name)

    for key, value in raw.items():
        if key not in defaults:
            logger.debug("Passing through unrecognized settings key '%s'", key)
            settings[key] = copy.deepcopy(value)

    return MergeResult(settings=settings, missing_top_level_keys=missing)


def setup_initial_settings(raw: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Return complete settings for ``raw``, discarding merge bookkeeping."""
    return merge(raw).settings
