"""Normalization of raw endpoint values into canonical Endpoint records."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from fedmeta.constants.metadata import (
    ENDPOINT_FIELDS,
    FIELD_BINDING,
    FIELD_INDEX,
    FIELD_IS_DEFAULT,
    FIELD_LOCATION,
    FIELD_RESPONSE_LOCATION,
)
from fedmeta.constants.validation import (
    BINDING_NOT_STRING,
    INDEX_NOT_INTEGER,
    IS_DEFAULT_NOT_BOOLEAN,
    LOCATION_NOT_STRING,
    MISSING_BINDING,
    MISSING_LOCATION,
    RESPONSE_LOCATION_NOT_STRING,
)
from fedmeta.exceptions import MalformedEndpointSpec
from fedmeta.metadata.bindings import default_binding
from fedmeta.metadata.roles import MetadataRole
from fedmeta.metadata.spec import BareLocation, classify_endpoint_spec
from fedmeta.model import Endpoint
from fedmeta.types.common import EndpointRecord

logger = logging.getLogger(__name__)


def endpoint_path(location: str, endpoint_name: str) -> str:
    """Return the error path of an endpoint key, e.g. ``[ARRAY]['SingleSignOnService']``."""
    return f"{location}[{endpoint_name!r}]"


def normalize_endpoints(
    raw: Any,
    role: MetadataRole,
    endpoint_name: str,
    *,
    response_location: Any = None,
    location: str = "",
    set_name: str | None = None,
) -> tuple[Endpoint, ...]:
    """Convert a raw endpoint value into an ordered tuple of endpoints.

    Args:
        raw: The configured value: ``None``, an address, or a list (or
            mapping, walked by value) of addresses and/or endpoint records.
        role: Metadata role used to look up bindings for bare addresses.
        endpoint_name: Endpoint type, e.g. ``SingleSignOnService``.
        response_location: Raw value of the legacy ``<endpoint_name>Response``
            key. Only applied to a single bare address, and only when it is a
            string.
        location: Prefix for error paths (file or entity label).
        set_name: Configured metadata-set name, reported when ``role`` is
            unrecognized and a bare address needs a default binding.

    Returns:
        Endpoints in the order they were configured. Never reordered or
        deduplicated.
    """
    path = endpoint_path(location, endpoint_name)
    spec = classify_endpoint_spec(raw, path)
    if spec is None:
        return ()

    if isinstance(spec, BareLocation):
        endpoint = _bare_endpoint(spec.location, role, endpoint_name, set_name, path)
        if isinstance(response_location, str):
            endpoint = replace(endpoint, response_location=response_location)
        return (endpoint,)

    endpoints: list[Endpoint] = []
    for position, item in enumerate(spec.items):
        item_path = spec.item_path(path, position)
        if isinstance(item, str):
            endpoints.append(_bare_endpoint(item, role, endpoint_name, set_name, item_path))
        else:
            endpoints.append(_record_endpoint(item, item_path))
    logger.debug("Normalized %d %s endpoint(s) at %s", len(endpoints), endpoint_name, path)
    return tuple(endpoints)


def _bare_endpoint(
    address: str,
    role: MetadataRole,
    endpoint_name: str,
    set_name: str | None,
    path: str,
) -> Endpoint:
    if not address:
        raise MalformedEndpointSpec(MISSING_LOCATION, path=path)
    binding = default_binding(role, endpoint_name, set_name=set_name, path=path)
    return Endpoint(location=address, binding=binding)


def _record_endpoint(record: EndpointRecord, path: str) -> Endpoint:
    """Validate one endpoint record and build the canonical Endpoint."""
    if FIELD_LOCATION not in record:
        raise MalformedEndpointSpec(MISSING_LOCATION, path=path)
    address = record[FIELD_LOCATION]
    if not isinstance(address, str):
        raise MalformedEndpointSpec(LOCATION_NOT_STRING, path=path)
    if not address:
        raise MalformedEndpointSpec(MISSING_LOCATION, path=path)

    if FIELD_BINDING not in record:
        raise MalformedEndpointSpec(MISSING_BINDING, path=path)
    binding = record[FIELD_BINDING]
    if not isinstance(binding, str):
        raise MalformedEndpointSpec(BINDING_NOT_STRING, path=path)

    response_location = record.get(FIELD_RESPONSE_LOCATION)
    if FIELD_RESPONSE_LOCATION in record and not isinstance(response_location, str):
        raise MalformedEndpointSpec(RESPONSE_LOCATION_NOT_STRING, path=path)

    index = record.get(FIELD_INDEX)
    if FIELD_INDEX in record and (isinstance(index, bool) or not isinstance(index, int)):
        raise MalformedEndpointSpec(INDEX_NOT_INTEGER, path=path)

    # An explicit null reads as "no preference stated".
    is_default = record.get(FIELD_IS_DEFAULT)
    if is_default is not None and not isinstance(is_default, bool):
        raise MalformedEndpointSpec(IS_DEFAULT_NOT_BOOLEAN, path=path)

    return Endpoint(
        location=address,
        binding=binding,
        response_location=response_location,
        index=index,
        is_default=is_default,
        extra={key: value for key, value in record.items() if key not in ENDPOINT_FIELDS},
    )
