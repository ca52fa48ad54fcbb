"""Derivation of remote library requests from stored settings.

Two historical shapes are accepted:

- the persisted ``requests`` record, ``{"dataRequests": [...], ...}``, whose
  ``apiKeys`` and ``libraries`` fields are ignored and recomputed;
- a bare list of entries, as found at the top level of legacy settings.

Entries written before libraries were stored explicitly only carry a
``dataURI`` such as ``users/123/items``; the library is inferred from it.
Entries that cannot be normalized are logged and skipped so one bad library
does not prevent the others from loading.

Usage:
    from zotsync.core.requests import derive_requests

    collection = derive_requests([{"apikey": "K", "dataURI": "users/123/items"}])
    print(collection.api_keys)  # ["K"]
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from zotsync.core.errors import RequestEntryInvalidError

logger = logging.getLogger(__name__)

LIBRARY_TYPES = ("users", "groups")
API_KEY_FIELDS = ("apiKey", "apikey", "api_key")

_DATA_URI_PATTERN = re.compile(r"(?:^|/)(users|groups)/(\d+)/(.+)")


@dataclass(frozen=True)
class LibraryRef:
    """Address of one Zotero library."""

    id: str
    type: str
    uri: str = "items"

    @property
    def path(self) -> str:
        """Library path, e.g. ``users/123``; unique per library."""
        return f"{self.type}/{self.id}"

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "path": self.path, "type": self.type, "uri": self.uri}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], default_uri: str = "items") -> LibraryRef:
        """Build from a stored library record; any stored ``path`` is recomputed.

        Raises:
            ValueError: If ``type`` or ``id`` is unusable
        """
        lib_type = data.get("type")
        if lib_type not in LIBRARY_TYPES:
            raise ValueError(f"library type must be one of {LIBRARY_TYPES}, got {lib_type!r}")
        lib_id = data.get("id")
        if lib_id is None or str(lib_id).strip() == "":
            raise ValueError("library id is missing")
        uri = data.get("uri") or default_uri
        return cls(id=str(lib_id).strip(), type=lib_type, uri=str(uri))

    @classmethod
    def from_data_uri(cls, data_uri: str) -> Optional[LibraryRef]:
        """Infer the library from a ``<users|groups>/<id>/<rest>`` data URI."""
        match = _DATA_URI_PATTERN.search(data_uri)
        if match is None:
            return None
        lib_type, lib_id, uri = match.groups()
        return cls(id=lib_id, type=lib_type, uri=uri)


@dataclass(frozen=True)
class RequestDescriptor:
    """One remote library to query, with its credential."""

    api_key: str
    data_uri: str
    library: LibraryRef
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "apiKey": self.api_key,
            "dataURI": self.data_uri,
            "library": self.library.to_dict(),
            "name": self.name,
        }


@dataclass(frozen=True)
class LibraryAccess:
    """A distinct (library path, API key) pair."""

    path: str
    apikey: str

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "apikey": self.apikey}


@dataclass
class RequestCollection:
    """Normalized requests plus the key and library sets derived from them.

    Attributes:
        data_requests: Valid request descriptors, in input order
        api_keys: Distinct API keys, in first-seen order
        libraries: Distinct (path, apikey) pairs, in first-seen order
        rejected: Entries that were dropped (not part of equality or output)
    """

    data_requests: list[RequestDescriptor] = field(default_factory=list)
    api_keys: list[str] = field(default_factory=list)
    libraries: list[LibraryAccess] = field(default_factory=list)
    rejected: list[RequestEntryInvalidError] = field(default_factory=list, compare=False, repr=False)

    @classmethod
    def empty(cls) -> RequestCollection:
        return cls()

    @classmethod
    def from_descriptors(cls, descriptors: list[RequestDescriptor]) -> RequestCollection:
        """Build the collection, deduplicating keys and libraries by first occurrence."""
        api_keys: list[str] = []
        libraries: list[LibraryAccess] = []
        seen_keys: set[str] = set()
        seen_libraries: set[LibraryAccess] = set()

        for descriptor in descriptors:
            if descriptor.api_key not in seen_keys:
                seen_keys.add(descriptor.api_key)
                api_keys.append(descriptor.api_key)
            access = LibraryAccess(path=descriptor.library.path, apikey=descriptor.api_key)
            if access not in seen_libraries:
                seen_libraries.add(access)
                libraries.append(access)

        return cls(data_requests=list(descriptors), api_keys=api_keys, libraries=libraries)

    @classmethod
    def from_dict(cls, data: Any) -> RequestCollection:
        """Re-derive a collection from its persisted form."""
        return derive_requests(data)

    def to_dict(self) -> dict[str, Any]:
        """Persisted/wire layout."""
        return {
            "dataRequests": [request.to_dict() for request in self.data_requests],
            "apiKeys": list(self.api_keys),
            "libraries": [library.to_dict() for library in self.libraries],
        }


def _extract_api_key(entry: Mapping[str, Any]) -> Optional[str]:
    for key in API_KEY_FIELDS:
        value = entry.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def normalize_request(entry: Any, index: int) -> RequestDescriptor:
    """Normalize one raw request entry.

    Args:
        entry: Raw entry from storage
        index: Position in the raw list, used as the fallback name

    Returns:
        RequestDescriptor

    Raises:
        RequestEntryInvalidError: If the entry has no usable key, data URI or library
    """
    if not isinstance(entry, Mapping):
        raise RequestEntryInvalidError(index, f"expected an object, got {type(entry).__name__}")

    api_key = _extract_api_key(entry)
    if api_key is None:
        raise RequestEntryInvalidError(index, "no API key", entry)

    data_uri = entry.get("dataURI")
    if not isinstance(data_uri, str) or not data_uri.strip():
        raise RequestEntryInvalidError(index, "no dataURI", entry)
    data_uri = data_uri.strip()

    raw_library = entry.get("library")
    inferred = LibraryRef.from_data_uri(data_uri)
    if isinstance(raw_library, Mapping):
        try:
            library = LibraryRef.from_dict(raw_library, default_uri=inferred.uri if inferred else "items")
        except ValueError as e:
            raise RequestEntryInvalidError(index, str(e), entry) from e
    else:
        if inferred is None:
            raise RequestEntryInvalidError(
                index, f"cannot infer library from dataURI '{data_uri}' (expected users/<id>/... or groups/<id>/...)", entry
            )
        library = inferred

    name = entry.get("name")
    if name is None or str(name) == "":
        name = str(index)

    return RequestDescriptor(api_key=api_key, data_uri=data_uri, library=library, name=str(name))


def derive_requests(raw: Any) -> RequestCollection:
    """Derive a RequestCollection from a persisted ``requests`` record or a list of entries.

    Args:
        raw: None, a list of raw entries, or a mapping with a ``dataRequests`` list

    Returns:
        RequestCollection; never raises for malformed entries
    """
    if raw is None:
        return RequestCollection.empty()
    if isinstance(raw, Mapping):
        raw = raw.get("dataRequests")
        if raw is None:
            return RequestCollection.empty()
    if not isinstance(raw, (list, tuple)):
        logger.warning("Ignoring data requests: expected a list, got %s", type(raw).__name__)
        return RequestCollection.empty()

    descriptors: list[RequestDescriptor] = []
    rejected: list[RequestEntryInvalidError] = []
    for index, entry in enumerate(raw):
        try:
            descriptors.append(normalize_request(entry, index))
        except RequestEntryInvalidError as e:
            logger.warning("Skipping data request: %s", e.message)
            rejected.append(e)

    collection = RequestCollection.from_descriptors(descriptors)
    collection.rejected = rejected
    return collection
