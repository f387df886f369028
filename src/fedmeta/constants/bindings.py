"""SAML protocol binding identifiers."""

from __future__ import annotations

BINDING_HTTP_POST: str = "urn:oasis:names:tc:SAML:2.0:bindings:HTTP-POST"
BINDING_HTTP_REDIRECT: str = "urn:oasis:names:tc:SAML:2.0:bindings:HTTP-Redirect"
BINDING_HTTP_ARTIFACT: str = "urn:oasis:names:tc:SAML:2.0:bindings:HTTP-Artifact"
BINDING_SOAP: str = "urn:oasis:names:tc:SAML:2.0:bindings:SOAP"
BINDING_PAOS: str = "urn:oasis:names:tc:SAML:2.0:bindings:PAOS"
BINDING_HOK_SSO: str = "urn:oasis:names:tc:SAML:2.0:profiles:holder-of-key:SSO:browser"

SHIB13_AUTHN_REQUEST: str = "urn:mace:shibboleth:1.0:profiles:AuthnRequest"
SAML1_BROWSER_POST: str = "urn:oasis:names:tc:SAML:1.0:profiles:browser-post"
SAML1_ARTIFACT: str = "urn:oasis:names:tc:SAML:1.0:profiles:artifact-01"

KNOWN_BINDINGS: frozenset[str] = frozenset(
    {
        BINDING_HTTP_POST,
        BINDING_HTTP_REDIRECT,
        BINDING_HTTP_ARTIFACT,
        BINDING_SOAP,
        BINDING_PAOS,
        BINDING_HOK_SSO,
        SHIB13_AUTHN_REQUEST,
        SAML1_BROWSER_POST,
        SAML1_ARTIFACT,
    }
)
