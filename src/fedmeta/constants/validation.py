"""Stable error codes and diagnostic phrases for endpoint and metadata validation."""

from __future__ import annotations

MD001: str = "MD001"  # metadata file not found
MD002: str = "MD002"  # invalid YAML parse
MD003: str = "MD003"  # top-level value is not a mapping
MD004: str = "MD004"  # entity entry is not a mapping
MD005: str = "MD005"  # malformed endpoint definition
MD006: str = "MD006"  # no default binding for a bare address
MD007: str = "MD007"  # unknown metadata set

EXPECTED_ARRAY_OR_STRING: str = "Expected array or string."
EXPECTED_STRING_OR_ARRAY: str = "Expected a string or an array."
MISSING_LOCATION: str = "Missing Location."
LOCATION_NOT_STRING: str = "Location must be a string."
MISSING_BINDING: str = "Missing Binding."
BINDING_NOT_STRING: str = "Binding must be a string."
RESPONSE_LOCATION_NOT_STRING: str = "ResponseLocation must be a string."
INDEX_NOT_INTEGER: str = "index must be an integer."
IS_DEFAULT_NOT_BOOLEAN: str = "isDefault must be a boolean."

NO_SUPPORTED_ENDPOINT: str = "Could not find a supported {endpoint_name} endpoint."
MISSING_DEFAULT_BINDING: str = (
    "Missing default binding for {endpoint_name} in {metadata_set}. "
    "Please report this to the metadata maintainers."
)
