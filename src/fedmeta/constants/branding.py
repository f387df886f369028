"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "FEDMETA"
CLI_DESCRIPTION: str = f"{BRAND_NAME} federation metadata endpoint resolver"
