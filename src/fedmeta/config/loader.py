"""Metadata file loading for fedmeta."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from fedmeta.config.accessor import MetadataConfig
from fedmeta.constants.metadata import METADATA_SET_KEY
from fedmeta.exceptions import ConfigError
from fedmeta.metadata.roles import KNOWN_SET_NAMES

logger = logging.getLogger(__name__)


def load_metadata(path: Path, metadata_set: str | None = None) -> dict[str, MetadataConfig]:
    """Load a YAML metadata file mapping entity IDs to metadata entries.

    The metadata set of an entry is taken from its own ``metadata-set`` key,
    then from ``metadata_set``, then from the file name stem (so
    ``saml20-idp-remote.yaml`` needs no explicit set).
    """
    raw = read_metadata_file(path)
    fallback_set = metadata_set if metadata_set is not None else path.stem

    entries: dict[str, MetadataConfig] = {}
    for entity_id, entry in raw.items():
        if not isinstance(entry, dict):
            raise ConfigError(f"Metadata entry {entity_id!r} in {path} must be a mapping")
        values = dict(entry)
        values.setdefault(METADATA_SET_KEY, fallback_set)
        entity_key = str(entity_id)
        config = MetadataConfig(values, location=f"{path.name}[{entity_key!r}]")
        if config.metadata_set not in KNOWN_SET_NAMES:
            logger.warning("Unknown metadata set %r for entity %s", values[METADATA_SET_KEY], entity_key)
        logger.debug("Loaded metadata entry %s (%s)", entity_key, config.metadata_set)
        entries[entity_key] = config
    return entries


def read_metadata_file(path: Path) -> dict[Any, Any]:
    """Parse a metadata file and return its top-level mapping."""
    if not path.exists():
        raise ConfigError(f"Metadata file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML metadata file at {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Metadata file at {path} must be a YAML mapping")
    return raw
