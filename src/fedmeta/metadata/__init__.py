"""Endpoint normalization and default-endpoint selection.

This package facade re-exports the public names so callers can use
``from fedmeta.metadata import ...``.
"""

from __future__ import annotations

from fedmeta.metadata.bindings import DEFAULT_BINDINGS, default_binding, has_default_binding, missing_default_binding
from fedmeta.metadata.normalizer import normalize_endpoints
from fedmeta.metadata.roles import MetadataRole
from fedmeta.metadata.selector import RawValueSource, pick_default, select_default_endpoint
from fedmeta.metadata.spec import BareLocation, EndpointListing, EndpointSpec, classify_endpoint_spec

__all__ = [
    "DEFAULT_BINDINGS",
    "BareLocation",
    "EndpointListing",
    "EndpointSpec",
    "MetadataRole",
    "RawValueSource",
    "classify_endpoint_spec",
    "default_binding",
    "has_default_binding",
    "missing_default_binding",
    "normalize_endpoints",
    "pick_default",
    "select_default_endpoint",
]
