"""Configuration-related exceptions."""

from __future__ import annotations

from fedmeta.exceptions.base import FedmetaError


class ConfigError(FedmetaError, ValueError):
    """Raised when a metadata file cannot be loaded."""
