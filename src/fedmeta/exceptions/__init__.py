"""Shared exception hierarchy for fedmeta."""

from __future__ import annotations

from .base import FedmetaError
from .config import ConfigError
from .endpoints import EndpointError, MalformedEndpointSpec, MissingDefaultBinding, NoSupportedEndpoint

__all__ = [
    "ConfigError",
    "EndpointError",
    "FedmetaError",
    "MalformedEndpointSpec",
    "MissingDefaultBinding",
    "NoSupportedEndpoint",
]
