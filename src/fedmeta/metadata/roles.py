"""Metadata roles (the schema a metadata entry is interpreted under)."""

from __future__ import annotations

from enum import StrEnum


class MetadataRole(StrEnum):
    """Known metadata sets for remote federation partners."""

    SAML20_SP_REMOTE = "saml20-sp-remote"
    SAML20_IDP_REMOTE = "saml20-idp-remote"
    SHIB13_SP_REMOTE = "shib13-sp-remote"
    SHIB13_IDP_REMOTE = "shib13-idp-remote"
    UNKNOWN = "unknown"

    @classmethod
    def from_set_name(cls, name: str | None) -> MetadataRole:
        """Map a metadata-set name to a role, or ``UNKNOWN`` when unrecognized."""
        if name is None:
            return cls.UNKNOWN
        try:
            role = cls(name)
        except ValueError:
            return cls.UNKNOWN
        return role


KNOWN_ROLES: tuple[MetadataRole, ...] = tuple(role for role in MetadataRole if role is not MetadataRole.UNKNOWN)
KNOWN_SET_NAMES: frozenset[str] = frozenset(role.value for role in KNOWN_ROLES)
