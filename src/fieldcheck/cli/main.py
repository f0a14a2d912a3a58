"""CLI entrypoint for Fieldcheck."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from fieldcheck import __version__
from fieldcheck.config import load_config, validate_config_file
from fieldcheck.constants.branding import CLI_DESCRIPTION
from fieldcheck.constants.reporting import DEFAULT_OUTPUT_FORMAT, VALID_OUTPUT_FORMATS
from fieldcheck.exceptions import ConfigError, FieldcheckError
from fieldcheck.exceptions.validation import format_errors
from fieldcheck.reporting import TextReporter, render_json
from fieldcheck.schema import SchemaModel, load_record, load_schema

EXIT_VALID: int = 0
EXIT_INVALID: int = 1
EXIT_USAGE: int = 2


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="fieldcheck", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Validate a record file against a schema")
    check.add_argument("record", type=Path, help="Record file (YAML or JSON mapping)")
    check.add_argument("-s", "--schema", type=Path, required=True, help="Schema file")
    check.add_argument("-c", "--config", type=Path, help="Explicit config file")
    check.add_argument(
        "--output-format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=DEFAULT_OUTPUT_FORMAT,
        help="Output format (default: text)",
    )
    check.add_argument("--no-color", action="store_true", help="Disable colored output")
    check.add_argument("-v", "--verbose", action="store_true", help="Log each checked field")

    validate = subparsers.add_parser("validate-config", help="Validate a config file")
    validate.add_argument("-c", "--config", type=Path, required=True, help="Config file to validate")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)
    if args.command != "check":
        parser.error(f"Unsupported command: {args.command}")
    return _handle_check(args)


def _handle_check(args: argparse.Namespace) -> int:
    """Validate one record and report its errors."""
    try:
        config = load_config(args.config, root=Path.cwd())
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        schema = load_schema(args.schema, config)
        record = load_record(args.record)
    except FieldcheckError as exc:
        print(f"Schema error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    errors = SchemaModel(schema, record).validate()

    if args.output_format == "json":
        print(render_json(errors))
    else:
        use_color = not args.no_color and sys.stdout.isatty()
        print(TextReporter(errors, color=use_color, source=str(args.record)).render())

    return EXIT_INVALID if errors else EXIT_VALID


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = validate_config_file(args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return EXIT_USAGE
    print(f"Config OK: {args.config}")
    return EXIT_VALID
