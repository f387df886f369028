"""Canonical endpoint record."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from fedmeta.constants.metadata import (
    FIELD_BINDING,
    FIELD_INDEX,
    FIELD_IS_DEFAULT,
    FIELD_LOCATION,
    FIELD_RESPONSE_LOCATION,
)


@dataclass(frozen=True)
class Endpoint:
    """A single service endpoint as found in partner metadata.

    ``is_default`` is tri-state: ``None`` means the metadata states no
    preference. ``index`` is informational only. Keys of the source record
    that are not endpoint fields are kept verbatim in ``extra``.
    """

    location: str
    binding: str
    response_location: str | None = None
    index: int | None = None
    is_default: bool | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __hash__(self) -> int:
        # Extra values may be unhashable; only their keys are hashed.
        return hash(
            (self.location, self.binding, self.response_location, self.index, self.is_default, frozenset(self.extra))
        )

    def to_dict(self) -> dict[str, Any]:
        """Render the endpoint in metadata record form."""
        record: dict[str, Any] = dict(self.extra)
        record[FIELD_LOCATION] = self.location
        record[FIELD_BINDING] = self.binding
        if self.response_location is not None:
            record[FIELD_RESPONSE_LOCATION] = self.response_location
        if self.index is not None:
            record[FIELD_INDEX] = self.index
        if self.is_default is not None:
            record[FIELD_IS_DEFAULT] = self.is_default
        return record
