"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import json
import sys

from fedmeta.config import MetadataConfig, load_metadata, validate_metadata_file
from fedmeta.exceptions import ConfigError, EndpointError
from fedmeta.exceptions.validation import format_errors


def handle_resolve(args: argparse.Namespace) -> int:
    """Print the default endpoint of one entity as JSON."""
    config = _load_entry(args)
    if config is None:
        return 2

    valid_bindings = frozenset(args.binding) if args.binding else None
    try:
        endpoint = config.get_default_endpoint(args.endpoint_type, valid_bindings)
    except EndpointError as exc:
        print(f"Resolution error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(endpoint.to_dict(), indent=2, sort_keys=True))
    return 0


def handle_endpoints(args: argparse.Namespace) -> int:
    """Print every normalized endpoint of one entity as a JSON list."""
    config = _load_entry(args)
    if config is None:
        return 2

    try:
        endpoints = config.get_endpoints(args.endpoint_type)
    except EndpointError as exc:
        print(f"Resolution error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps([endpoint.to_dict() for endpoint in endpoints], indent=2, sort_keys=True))
    return 0


def handle_validate(args: argparse.Namespace) -> int:
    """Validate a metadata file and report results."""
    errors = validate_metadata_file(args.metadata, args.metadata_set)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Metadata is valid.")
    return 0


def _load_entry(args: argparse.Namespace) -> MetadataConfig | None:
    """Load the requested entity, reporting problems on stderr."""
    try:
        entries = load_metadata(args.metadata, args.metadata_set)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return None

    config = entries.get(args.entity)
    if config is None:
        print(f"Configuration error: entity {args.entity!r} not found in {args.metadata}", file=sys.stderr)
    return config
