"""Root exception for fedmeta."""

from __future__ import annotations


class FedmetaError(Exception):
    """Base class for all fedmeta errors."""
