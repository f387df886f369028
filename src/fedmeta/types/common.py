"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

type EndpointRecord = Mapping[str, Any]
