"""Metadata file validation for fedmeta."""

from __future__ import annotations

import difflib
from pathlib import Path

import yaml

from fedmeta.config.accessor import MetadataConfig
from fedmeta.constants.metadata import KNOWN_ENDPOINT_TYPES, METADATA_SET_KEY
from fedmeta.constants.validation import MD001, MD002, MD003, MD004, MD005, MD006, MD007
from fedmeta.exceptions import MalformedEndpointSpec, MissingDefaultBinding
from fedmeta.exceptions.validation import ValidationError
from fedmeta.metadata.roles import KNOWN_SET_NAMES


def validate_metadata_file(path: Path, metadata_set: str | None = None) -> list[ValidationError]:
    """Validate every entry of a metadata file and return all problems found.

    Unlike :func:`fedmeta.config.load_metadata` this never raises; each
    problem is returned as a :class:`ValidationError`.
    """
    errors: list[ValidationError] = []
    path_str = str(path)

    if not path.exists():
        errors.append(
            ValidationError(
                code=MD001,
                path=path_str,
                entity="",
                field="",
                message=f"metadata file not found: {path}",
            )
        )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=MD002,
                path=path_str,
                entity="",
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=MD003,
                path=path_str,
                entity="",
                field="",
                message=f"metadata must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    fallback_set = metadata_set if metadata_set is not None else path.stem
    for entity_id, entry in raw.items():
        entity = str(entity_id)
        if not isinstance(entry, dict):
            errors.append(
                ValidationError(
                    code=MD004,
                    path=path_str,
                    entity=entity,
                    field="",
                    message=f"entry must be a mapping, got {type(entry).__name__}",
                )
            )
            continue
        values = dict(entry)
        values.setdefault(METADATA_SET_KEY, fallback_set)
        _validate_entry(MetadataConfig(values, location=f"{path.name}[{entity!r}]"), path_str, entity, errors)

    return errors


def _validate_entry(
    config: MetadataConfig,
    path_str: str,
    entity: str,
    errors: list[ValidationError],
) -> None:
    """Check the metadata set and every known endpoint type of one entry."""
    set_name = config.get_raw(METADATA_SET_KEY)
    if not isinstance(set_name, str) or set_name not in KNOWN_SET_NAMES:
        errors.append(
            ValidationError(
                code=MD007,
                path=path_str,
                entity=entity,
                field=METADATA_SET_KEY,
                message=f"unknown metadata set {set_name!r}",
                hint=_suggest_set(set_name),
            )
        )

    for endpoint_name in KNOWN_ENDPOINT_TYPES:
        if not config.has_value(endpoint_name):
            continue
        try:
            config.get_endpoints(endpoint_name)
        except MalformedEndpointSpec as exc:
            errors.append(
                ValidationError(
                    code=MD005,
                    path=path_str,
                    entity=entity,
                    field=endpoint_name,
                    message=exc.reason,
                    hint=f"at {exc.path}",
                )
            )
        except MissingDefaultBinding:
            errors.append(
                ValidationError(
                    code=MD006,
                    path=path_str,
                    entity=entity,
                    field=endpoint_name,
                    message=f"no default binding for a bare `{endpoint_name}` address in {set_name!r}",
                    hint="give the endpoint as a record with an explicit Binding",
                )
            )


def _suggest_set(unknown: object) -> str:
    """Return a 'did you mean ...' hint for a close metadata set name, or empty string."""
    if not isinstance(unknown, str):
        return f"expected one of: {', '.join(sorted(KNOWN_SET_NAMES))}"
    matches = difflib.get_close_matches(unknown, sorted(KNOWN_SET_NAMES), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return f"expected one of: {', '.join(sorted(KNOWN_SET_NAMES))}"
