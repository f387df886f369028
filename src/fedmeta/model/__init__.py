"""Data models for resolved metadata."""

from __future__ import annotations

from .endpoint import Endpoint

__all__ = ["Endpoint"]
