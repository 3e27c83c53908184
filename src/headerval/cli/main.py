# Copyright 2026 headerval Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the headerval command-line interface."""

import argparse
import io
import json
import logging
import sys
from pathlib import Path

from headerval.entity.streamed import StreamedEntity
from headerval.model.entities import HeaderElement
from headerval.parser.value_parser import HeaderParseError, parse_elements
from headerval.settings.config import (
    SETTINGS_FILE_NAME,
    ParserSettings,
    ParserSettingsError,
    load_parser_settings,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the headerval CLI."""
    parser = argparse.ArgumentParser(
        prog="headerval",
        description="headerval - split HTTP header values into elements and parameters",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # parse subcommand
    parse_parser = subparsers.add_parser(
        "parse",
        help="Print the elements of a header value",
        description="Parse a header value and print one element per line.",
    )
    _add_value_argument(parse_parser)
    parse_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the elements as a JSON array",
    )
    _add_common_options(parse_parser)

    # param subcommand
    param_parser = subparsers.add_parser(
        "param",
        help="Print the value of a named parameter",
        description=(
            "Parse a header value and print the value of the first parameter "
            "with the given name (case-insensitive). A parameter without '=' "
            "prints nothing; one with an empty value prints an empty line."
        ),
    )
    param_parser.add_argument("name", help="Parameter name to look up")
    _add_value_argument(param_parser)
    _add_common_options(param_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

# HTTP/1.1 header fields are historically ISO-8859-1.
_STDIN_ENCODING = "iso-8859-1"


def _add_value_argument(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "value",
        nargs="?",
        default="-",
        help="Header value to parse; '-' or omitted reads it from standard input",
    )


def _add_common_options(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "--strict",
        action="store_true",
        help="Reject malformed header values instead of parsing leniently",
    )
    subparser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Settings file (default: {SETTINGS_FILE_NAME} in the current directory, if present)",
    )
    subparser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Load settings and dispatch to the appropriate subcommand handler."""
    try:
        settings = _load_settings(args.config)
    except ParserSettingsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    overrides: dict[str, object] = {}
    if args.strict:
        overrides["strict"] = True
    if getattr(args, "json", False):
        overrides["output"] = "json"
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    if overrides:
        settings = settings.model_copy(update=overrides)

    logging.basicConfig(level=settings.log_level, format="%(levelname)s: %(name)s: %(message)s")
    logger.debug("Effective settings: %s", settings)

    try:
        value = _read_value(args.value, settings)
    except OSError as exc:
        print(f"Error: cannot read header value: {exc}", file=sys.stderr)
        return 1

    try:
        elements = parse_elements(value, settings.build_parser())
    except HeaderParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.command == "parse":
        return _cmd_parse(elements, settings)
    if args.command == "param":
        return _cmd_param(elements, args.name)
    return 0


def _load_settings(config: Path | None) -> ParserSettings:
    """Load the explicit settings file, the default one if present, or the defaults."""
    if config is not None:
        return load_parser_settings(config)
    default_file = Path.cwd() / SETTINGS_FILE_NAME
    if default_file.exists():
        return load_parser_settings(default_file)
    return ParserSettings()


def _read_value(value: str, settings: ParserSettings) -> str:
    """Return ``value``, or the contents of standard input for ``-``."""
    if value != "-":
        return value
    entity = StreamedEntity(chunk_size=settings.chunk_size)
    entity.set_content(sys.stdin.buffer)
    sink = io.BytesIO()
    entity.write_to(sink)
    return sink.getvalue().decode(_STDIN_ENCODING).strip()


def _cmd_parse(elements: list[HeaderElement], settings: ParserSettings) -> int:
    """Handle the parse subcommand."""
    if settings.output == "json":
        print(json.dumps([element.model_dump() for element in elements], indent=2))
        return 0
    for element in elements:
        print(element)
    return 0


def _cmd_param(elements: list[HeaderElement], name: str) -> int:
    """Handle the param subcommand."""
    for element in elements:
        param = element.get_parameter_by_name(name)
        if param is not None:
            if param.value is not None:
                print(param.value)
            return 0
    print(f"Error: no parameter named '{name}'.", file=sys.stderr)
    return 1
