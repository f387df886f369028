"""CLI entrypoint for fedmeta."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from fedmeta import __version__
from fedmeta.cli.handlers import handle_endpoints, handle_resolve, handle_validate
from fedmeta.constants.branding import CLI_DESCRIPTION


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="fedmeta", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Print the default endpoint of an entity")
    _add_entry_arguments(resolve)
    resolve.add_argument(
        "-b",
        "--binding",
        action="append",
        default=None,
        help="Acceptable binding URN (repeat for multiple values; default: any binding)",
    )

    endpoints = subparsers.add_parser("endpoints", help="Print all normalized endpoints of an entity")
    _add_entry_arguments(endpoints)

    validate = subparsers.add_parser("validate", help="Validate a metadata file")
    validate.add_argument("-m", "--metadata", type=Path, required=True, help="Metadata YAML file")
    validate.add_argument("-s", "--metadata-set", default=None, help="Metadata set (default: file name stem)")

    return parser


def _add_entry_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-m", "--metadata", type=Path, required=True, help="Metadata YAML file")
    parser.add_argument("-e", "--entity", required=True, help="Entity ID of the partner")
    parser.add_argument("-t", "--endpoint-type", required=True, help="Endpoint type, e.g. SingleSignOnService")
    parser.add_argument("-s", "--metadata-set", default=None, help="Metadata set (default: file name stem)")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.command == "validate":
        return handle_validate(args)
    if args.command == "endpoints":
        return handle_endpoints(args)
    if args.command == "resolve":
        return handle_resolve(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
