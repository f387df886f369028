"""Metadata loading, raw-value access and validation.

This package facade re-exports all public names so that callers can use
``from fedmeta.config import ...``.
"""

from __future__ import annotations

from fedmeta.config.accessor import MetadataConfig
from fedmeta.config.loader import load_metadata, read_metadata_file
from fedmeta.config.validator import validate_metadata_file

__all__ = [
    "MetadataConfig",
    "load_metadata",
    "read_metadata_file",
    "validate_metadata_file",
]
