"""Selection of the default endpoint among the configured ones."""

from __future__ import annotations

import logging
from collections.abc import Collection, Sequence
from typing import Any, Protocol

from fedmeta.constants.metadata import METADATA_SET_KEY, RESPONSE_SUFFIX
from fedmeta.constants.validation import NO_SUPPORTED_ENDPOINT
from fedmeta.exceptions import NoSupportedEndpoint
from fedmeta.metadata.bindings import has_default_binding, missing_default_binding
from fedmeta.metadata.normalizer import endpoint_path, normalize_endpoints
from fedmeta.metadata.roles import MetadataRole
from fedmeta.model import Endpoint

logger = logging.getLogger(__name__)


class RawValueSource(Protocol):
    """Untyped key lookup over one metadata entry."""

    @property
    def location(self) -> str: ...

    def get_raw(self, name: str) -> Any: ...


def pick_default(
    endpoints: Sequence[Endpoint],
    valid_bindings: Collection[str] | None = None,
) -> Endpoint | None:
    """Return the preferred endpoint, or ``None`` when nothing is eligible.

    Endpoints whose binding is not in ``valid_bindings`` are dropped first.
    Among the rest, the first one flagged ``isDefault: true`` wins, otherwise
    the first one in configured order. ``index`` is ignored. A single string
    for ``valid_bindings`` is one binding, not a set of characters.
    """
    if valid_bindings is None:
        candidates = list(endpoints)
    else:
        allowed = frozenset((valid_bindings,)) if isinstance(valid_bindings, str) else frozenset(valid_bindings)
        candidates = [endpoint for endpoint in endpoints if endpoint.binding in allowed]
        dropped = len(endpoints) - len(candidates)
        if dropped:
            logger.debug("Dropped %d endpoint(s) with unsupported bindings", dropped)

    for endpoint in candidates:
        if endpoint.is_default is True:
            return endpoint
    if candidates:
        return candidates[0]
    return None


def select_default_endpoint(
    source: RawValueSource,
    endpoint_name: str,
    role: MetadataRole,
    valid_bindings: Collection[str] | None = None,
) -> Endpoint:
    """Resolve the endpoint of type ``endpoint_name`` that should be used.

    Raises:
        MalformedEndpointSpec: The configured value is invalid.
        MissingDefaultBinding: Nothing is configured and the role has no
            default binding for this endpoint type, or a bare address needs a
            binding the table does not have.
        NoSupportedEndpoint: No configured endpoint has an acceptable binding.
    """
    raw = source.get_raw(endpoint_name)
    set_name = source.get_raw(METADATA_SET_KEY)
    if not isinstance(set_name, str):
        set_name = None
    endpoints = normalize_endpoints(
        raw,
        role,
        endpoint_name,
        response_location=source.get_raw(endpoint_name + RESPONSE_SUFFIX),
        location=source.location,
        set_name=set_name,
    )

    chosen = pick_default(endpoints, valid_bindings)
    if chosen is not None:
        logger.debug("Selected %s endpoint %s (%s)", endpoint_name, chosen.location, chosen.binding)
        return chosen

    path = endpoint_path(source.location, endpoint_name)
    if raw is None and not has_default_binding(role, endpoint_name):
        raise missing_default_binding(role, endpoint_name, set_name=set_name, path=path)
    raise NoSupportedEndpoint(NO_SUPPORTED_ENDPOINT.format(endpoint_name=endpoint_name), path=path)
