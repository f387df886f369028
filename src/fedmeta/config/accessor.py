"""Raw-value access to a single metadata entry."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any

from fedmeta.constants.metadata import ARRAY_LOCATION, METADATA_SET_KEY, RESPONSE_SUFFIX
from fedmeta.metadata.normalizer import normalize_endpoints
from fedmeta.metadata.roles import MetadataRole
from fedmeta.metadata.selector import select_default_endpoint
from fedmeta.model import Endpoint


class MetadataConfig:
    """Read-only view over the raw key/value pairs of one metadata entry.

    ``location`` labels the entry in error messages, e.g. the file and entity
    ID it was loaded from.
    """

    def __init__(self, values: Mapping[str, Any], location: str = ARRAY_LOCATION) -> None:
        self._values = dict(values)
        self._location = location

    @property
    def location(self) -> str:
        return self._location

    def get_raw(self, name: str) -> Any:
        """Return the untyped value for ``name``, or ``None`` when absent."""
        return self._values.get(name)

    def has_value(self, name: str) -> bool:
        return name in self._values

    @property
    def metadata_set(self) -> str | None:
        value = self._values.get(METADATA_SET_KEY)
        return value if isinstance(value, str) else None

    @property
    def role(self) -> MetadataRole:
        return MetadataRole.from_set_name(self.metadata_set)

    def get_endpoints(self, endpoint_name: str) -> tuple[Endpoint, ...]:
        """Return every configured endpoint of type ``endpoint_name``, in order."""
        return normalize_endpoints(
            self.get_raw(endpoint_name),
            self.role,
            endpoint_name,
            response_location=self.get_raw(endpoint_name + RESPONSE_SUFFIX),
            location=self._location,
            set_name=self.metadata_set,
        )

    def get_default_endpoint(
        self,
        endpoint_name: str,
        valid_bindings: Collection[str] | None = None,
    ) -> Endpoint:
        """Return the endpoint of type ``endpoint_name`` that should be used."""
        return select_default_endpoint(self, endpoint_name, self.role, valid_bindings)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._values)

    def __repr__(self) -> str:
        return f"MetadataConfig(location={self._location!r}, metadata_set={self.metadata_set!r})"
