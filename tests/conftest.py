"""Shared pytest fixtures for metadata files and entries."""

from __future__ import annotations

from pathlib import Path

import pytest

IDP_METADATA_YAML = """\
'https://idp.example.org':
  SingleSignOnService: https://idp.example.org/sso
  SingleSignOnServiceResponse: https://idp.example.org/sso-response
  SingleLogoutService:
    - Location: https://idp.example.org/slo-soap
      Binding: urn:oasis:names:tc:SAML:2.0:bindings:SOAP
    - Location: https://idp.example.org/slo
      Binding: urn:oasis:names:tc:SAML:2.0:bindings:HTTP-Redirect
      isDefault: true
  ArtifactResolutionService:
    - Location: https://idp.example.org/ars
      Binding: urn:oasis:names:tc:SAML:2.0:bindings:SOAP
      index: 0
      hoksso:ProtocolBinding: urn:oasis:names:tc:SAML:2.0:bindings:HTTP-Redirect
'https://legacy.example.org':
  metadata-set: shib13-idp-remote
  SingleSignOnService: https://legacy.example.org/sso
"""


@pytest.fixture()
def idp_metadata_path(tmp_path: Path) -> Path:
    """Write a small ``saml20-idp-remote.yaml`` file and return its path."""
    path = tmp_path / "saml20-idp-remote.yaml"
    path.write_text(IDP_METADATA_YAML, encoding="utf-8")
    return path
