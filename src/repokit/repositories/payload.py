"""
repokit.repositories.payload

Payload normalization for create/update.

Responsibilities:
- Turn either a plain mapping or an object implementing `SupportsAttributes`
  into a fresh `dict[str, Any]`.
- Reject anything else with `InvalidPayloadError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from repokit.errors import InvalidPayloadError


@runtime_checkable
class SupportsAttributes(Protocol):
    def attributes_to_dict(self) -> Mapping[str, Any]: ...


Payload = Mapping[str, Any] | SupportsAttributes


def normalize_payload(data: Payload) -> dict[str, Any]:
    if isinstance(data, Mapping):
        attributes: Any = data
    elif isinstance(data, SupportsAttributes):
        attributes = data.attributes_to_dict()
    else:
        raise InvalidPayloadError(
            f"cannot normalize {type(data).__name__} payload into a mapping"
        )

    if not isinstance(attributes, Mapping):
        raise InvalidPayloadError(
            f"{type(data).__name__}.attributes_to_dict() returned {type(attributes).__name__}"
        )
    bad_keys = [key for key in attributes if not isinstance(key, str)]
    if bad_keys:
        raise InvalidPayloadError(f"payload keys must be column names, got {bad_keys!r}")
    return dict(attributes)
