"""Default bindings for bare endpoint addresses, per metadata role."""

from __future__ import annotations

from fedmeta.constants.bindings import (
    BINDING_HTTP_POST,
    BINDING_HTTP_REDIRECT,
    BINDING_SOAP,
    SAML1_BROWSER_POST,
    SHIB13_AUTHN_REQUEST,
)
from fedmeta.constants.metadata import (
    ARTIFACT_RESOLUTION_SERVICE,
    ASSERTION_CONSUMER_SERVICE,
    SINGLE_LOGOUT_SERVICE,
    SINGLE_SIGN_ON_SERVICE,
)
from fedmeta.constants.validation import MISSING_DEFAULT_BINDING
from fedmeta.exceptions import MissingDefaultBinding
from fedmeta.metadata.roles import KNOWN_ROLES, MetadataRole

DEFAULT_BINDINGS: dict[tuple[MetadataRole, str], str] = {
    (MetadataRole.SAML20_IDP_REMOTE, SINGLE_SIGN_ON_SERVICE): BINDING_HTTP_REDIRECT,
    (MetadataRole.SAML20_IDP_REMOTE, SINGLE_LOGOUT_SERVICE): BINDING_HTTP_REDIRECT,
    (MetadataRole.SAML20_IDP_REMOTE, ARTIFACT_RESOLUTION_SERVICE): BINDING_SOAP,
    (MetadataRole.SAML20_SP_REMOTE, SINGLE_LOGOUT_SERVICE): BINDING_HTTP_REDIRECT,
    (MetadataRole.SAML20_SP_REMOTE, ASSERTION_CONSUMER_SERVICE): BINDING_HTTP_POST,
    (MetadataRole.SHIB13_IDP_REMOTE, SINGLE_SIGN_ON_SERVICE): SHIB13_AUTHN_REQUEST,
    (MetadataRole.SHIB13_SP_REMOTE, ASSERTION_CONSUMER_SERVICE): SAML1_BROWSER_POST,
}


def has_default_binding(role: MetadataRole, endpoint_name: str) -> bool:
    """Return whether the table covers ``(role, endpoint_name)``."""
    return (role, endpoint_name) in DEFAULT_BINDINGS


def missing_default_binding(
    role: MetadataRole,
    endpoint_name: str,
    *,
    set_name: str | None = None,
    path: str = "",
) -> MissingDefaultBinding:
    """Build the error for a ``(role, endpoint_name)`` pair the table lacks.

    For an unrecognized role the configured ``set_name`` is reported, so the
    operator sees the value that is wrong.
    """
    label = set_name if role is MetadataRole.UNKNOWN and set_name is not None else role.value
    return MissingDefaultBinding(
        MISSING_DEFAULT_BINDING.format(endpoint_name=endpoint_name, metadata_set=label),
        path=path,
    )


def default_binding(
    role: MetadataRole,
    endpoint_name: str,
    *,
    set_name: str | None = None,
    path: str = "",
) -> str:
    """Return the binding assumed for a bare address of ``endpoint_name``.

    Raises MissingDefaultBinding when the pair is not in the table; there is
    no fallback binding.
    """
    try:
        return DEFAULT_BINDINGS[(role, endpoint_name)]
    except KeyError:
        raise missing_default_binding(role, endpoint_name, set_name=set_name, path=path) from None


def roles_without_defaults() -> list[MetadataRole]:
    """Return known roles that have no entry at all in the table."""
    covered = {role for role, _ in DEFAULT_BINDINGS}
    return [role for role in KNOWN_ROLES if role not in covered]
