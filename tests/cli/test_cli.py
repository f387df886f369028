"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import pytest

from fedmeta.cli.main import build_parser, main
from fedmeta.constants.bindings import BINDING_HTTP_REDIRECT, BINDING_SOAP

SCHEMA_PATH: Path = Path(__file__).resolve().parents[2] / "schemas" / "endpoint.schema.json"


@pytest.fixture()
def endpoint_schema() -> dict[str, Any]:
    """Load the endpoint JSON Schema."""
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def test_build_parser_accepts_resolve_flags(tmp_path: Path) -> None:
    parser = build_parser()

    args = parser.parse_args(
        [
            "resolve",
            "--metadata",
            str(tmp_path / "idp.yaml"),
            "--entity",
            "https://idp.example.org",
            "--endpoint-type",
            "SingleSignOnService",
            "--binding",
            "a",
            "--binding",
            "b",
        ]
    )

    assert args.command == "resolve"
    assert args.metadata == tmp_path / "idp.yaml"
    assert args.binding == ["a", "b"]
    assert args.metadata_set is None


def test_build_parser_binding_optional(tmp_path: Path) -> None:
    args = build_parser().parse_args(["resolve", "-m", str(tmp_path), "-e", "x", "-t", "SingleSignOnService"])

    assert args.binding is None


def test_resolve_prints_endpoint_json(
    idp_metadata_path: Path,
    capsys: pytest.CaptureFixture[str],
    endpoint_schema: dict[str, Any],
) -> None:
    code = main(["resolve", "-m", str(idp_metadata_path), "-e", "https://idp.example.org", "-t", "SingleSignOnService"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    jsonschema.validate(payload, endpoint_schema)
    assert payload == {
        "Location": "https://idp.example.org/sso",
        "Binding": BINDING_HTTP_REDIRECT,
        "ResponseLocation": "https://idp.example.org/sso-response",
    }


def test_resolve_applies_binding_filter(idp_metadata_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(
        [
            "resolve",
            "-m",
            str(idp_metadata_path),
            "-e",
            "https://idp.example.org",
            "-t",
            "SingleLogoutService",
            "-b",
            BINDING_SOAP,
        ]
    )

    assert code == 0
    assert json.loads(capsys.readouterr().out)["Location"] == "https://idp.example.org/slo-soap"


def test_resolve_reports_unsupported_binding(idp_metadata_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(
        [
            "resolve",
            "-m",
            str(idp_metadata_path),
            "-e",
            "https://idp.example.org",
            "-t",
            "SingleLogoutService",
            "-b",
            "urn:example:none",
        ]
    )

    assert code == 1
    assert "Could not find a supported SingleLogoutService endpoint." in capsys.readouterr().err


def test_resolve_unknown_entity(idp_metadata_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["resolve", "-m", str(idp_metadata_path), "-e", "https://nobody", "-t", "SingleSignOnService"])

    assert code == 2
    assert "not found" in capsys.readouterr().err


def test_resolve_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["resolve", "-m", str(tmp_path / "missing.yaml"), "-e", "x", "-t", "SingleSignOnService"])

    assert code == 2
    assert capsys.readouterr().err.startswith("Configuration error:")


def test_endpoints_prints_all_in_order(
    idp_metadata_path: Path,
    capsys: pytest.CaptureFixture[str],
    endpoint_schema: dict[str, Any],
) -> None:
    code = main(["endpoints", "-m", str(idp_metadata_path), "-e", "https://idp.example.org", "-t", "SingleLogoutService"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    for item in payload:
        jsonschema.validate(item, endpoint_schema)
    assert [item["Location"] for item in payload] == [
        "https://idp.example.org/slo-soap",
        "https://idp.example.org/slo",
    ]


def test_endpoints_reports_malformed_value(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "saml20-idp-remote.yaml"
    path.write_text("'https://idp.example.org':\n  SingleSignOnService: 10\n")

    code = main(["endpoints", "-m", str(path), "-e", "https://idp.example.org", "-t", "SingleSignOnService"])

    assert code == 1
    assert capsys.readouterr().err.strip().endswith("Expected array or string.")


def test_validate_valid_file(idp_metadata_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["validate", "-m", str(idp_metadata_path)])

    assert code == 0
    assert "Metadata is valid." in capsys.readouterr().out


def test_validate_invalid_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "saml20-idp-remote.yaml"
    path.write_text("'https://idp.example.org':\n  SingleSignOnService:\n    - foo: bar\n")

    code = main(["validate", "-m", str(path)])

    err = capsys.readouterr().err
    assert code == 2
    assert err.startswith("[MD005]")
    assert "Missing Location." in err


def test_resolve_mapping_value_output_matches_schema(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    endpoint_schema: dict[str, Any],
) -> None:
    path = tmp_path / "saml20-idp-remote.yaml"
    path.write_text(
        "'https://idp.example.org':\n"
        "  SingleLogoutService:\n"
        "    Location: https://idp.example.org/slo\n"
        "    Binding: valid_binding\n"
    )

    code = main(["resolve", "-m", str(path), "-e", "https://idp.example.org", "-t", "SingleLogoutService"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    jsonschema.validate(payload, endpoint_schema)
    assert payload == {"Location": "https://idp.example.org/slo", "Binding": BINDING_HTTP_REDIRECT}


@pytest.mark.parametrize(
    "value",
    ["''", "\n    - ''", "\n    - Location: ''\n      Binding: urn:oasis:names:tc:SAML:2.0:bindings:HTTP-POST"],
    ids=["bare_string", "list_item", "record"],
)
def test_empty_location_is_never_printed(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    value: str,
) -> None:
    path = tmp_path / "saml20-sp-remote.yaml"
    path.write_text(f"'https://sp.example.org':\n  AssertionConsumerService: {value}\n")

    code = main(["resolve", "-m", str(path), "-e", "https://sp.example.org", "-t", "AssertionConsumerService"])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert captured.err.strip().endswith("Missing Location.")
