"""Endpoint normalization and selection exceptions."""

from __future__ import annotations

from fedmeta.exceptions.base import FedmetaError


class EndpointError(FedmetaError, ValueError):
    """Base for errors raised while resolving metadata endpoints.

    ``reason`` holds the bare diagnostic and ``path`` the offending
    configuration key, so callers can match on either.
    """

    def __init__(self, reason: str, *, path: str = "") -> None:
        self.reason = reason
        self.path = path
        super().__init__(self._render())

    def _render(self) -> str:
        return self.reason


class MalformedEndpointSpec(EndpointError):
    """Raised when a raw endpoint value or record field fails validation."""

    def _render(self) -> str:
        if not self.path:
            return self.reason
        return f"{self.path}: {self.reason}"


class NoSupportedEndpoint(EndpointError):
    """Raised when no endpoint survives the binding filter."""


class MissingDefaultBinding(EndpointError):
    """Raised when no default binding is known for a role and endpoint type."""
