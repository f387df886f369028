"""Metadata keys, endpoint type names and record field names."""

from __future__ import annotations

METADATA_SET_KEY: str = "metadata-set"
ARRAY_LOCATION: str = "[ARRAY]"

# Suffix of the legacy key holding a separate response address for a bare endpoint.
RESPONSE_SUFFIX: str = "Response"

ASSERTION_CONSUMER_SERVICE: str = "AssertionConsumerService"
ARTIFACT_RESOLUTION_SERVICE: str = "ArtifactResolutionService"
SINGLE_LOGOUT_SERVICE: str = "SingleLogoutService"
SINGLE_SIGN_ON_SERVICE: str = "SingleSignOnService"

KNOWN_ENDPOINT_TYPES: tuple[str, ...] = (
    ASSERTION_CONSUMER_SERVICE,
    ARTIFACT_RESOLUTION_SERVICE,
    SINGLE_LOGOUT_SERVICE,
    SINGLE_SIGN_ON_SERVICE,
)

FIELD_LOCATION: str = "Location"
FIELD_BINDING: str = "Binding"
FIELD_RESPONSE_LOCATION: str = "ResponseLocation"
FIELD_INDEX: str = "index"
FIELD_IS_DEFAULT: str = "isDefault"

ENDPOINT_FIELDS: frozenset[str] = frozenset(
    {FIELD_LOCATION, FIELD_BINDING, FIELD_RESPONSE_LOCATION, FIELD_INDEX, FIELD_IS_DEFAULT}
)
