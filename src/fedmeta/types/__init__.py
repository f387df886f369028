"""Shared type aliases for fedmeta."""

from .common import EndpointRecord

__all__ = ["EndpointRecord"]
