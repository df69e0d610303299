# Copyright 2026 CaseFile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the casefile command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from casefile.config import ReaderConfig, load_reader_config
from casefile.errors import CaseFileError
from casefile.model.document import ParsedDocument
from casefile.reader.testcase import TestCaseReader
from casefile.verification.settings import TARGET_KEYWORDS, parse_grouped_names, parse_targets

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the casefile CLI."""
    parser = argparse.ArgumentParser(
        prog="casefile",
        description="casefile - composite test case document reader",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # show subcommand
    show_parser = subparsers.add_parser(
        "show",
        help="Print the sources, settings, and expectations of a test case",
        description="Parse a test case document and print its parts.",
    )
    show_parser.add_argument("file", help="Test case document to read")
    show_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the parsed sources and settings as JSON",
    )
    show_parser.add_argument("--config", help="Reader configuration file (YAML)")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Validate a test case and its model checker settings",
        description=(
            "Parse a test case document, validate the SMTTargets and SMTContracts "
            "settings, and reject any unknown setting."
        ),
    )
    check_parser.add_argument("file", help="Test case document to check")
    check_parser.add_argument("--config", help="Reader configuration file (YAML)")

    # targets subcommand
    subparsers.add_parser(
        "targets",
        help="List the known verification targets",
        description="List the keywords accepted by the SMTTargets setting.",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_TARGETS_SETTING = "SMTTargets"
_CONTRACTS_SETTING = "SMTContracts"


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "show":
        return _cmd_show(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "targets":
        return _cmd_targets(args)
    return 0


def _load_config(args: argparse.Namespace) -> ReaderConfig:
    if args.config is None:
        return ReaderConfig()
    return load_reader_config(Path(args.config))


def _cmd_show(args: argparse.Namespace) -> int:
    """Handle the show subcommand."""
    path = Path(args.file)
    try:
        config = _load_config(args)
        with TestCaseReader(path, encoding=config.encoding) as reader:
            expectations = reader.simple_expectations()
    except CaseFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        document = ParsedDocument(
            source_map=reader.sources,
            settings=reader.settings.settings,
            line_number=reader.line_number,
        )
        print(document.model_dump_json(indent=2))
        return 0

    for name in reader.sources.names():
        marker = " (main)" if name == reader.sources.main_source_name else ""
        print(f"==== Source: {name or '<unnamed>'}{marker} ====")
        print(reader.sources.sources[name], end="")
    settings = reader.settings.settings
    if settings:
        print("==== Settings ====")
        for key in sorted(settings):
            print(f"{key}: {settings[key]}")
    if expectations:
        print(f"==== Expectations (line {reader.line_number}) ====")
        print(expectations, end="")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    path = Path(args.file)
    try:
        config = _load_config(args)
        with TestCaseReader(path, encoding=config.encoding) as reader:
            targets = parse_targets(reader.string_setting(_TARGETS_SETTING, "default"))
            contracts = parse_grouped_names(
                reader.string_setting(_CONTRACTS_SETTING, "default"),
                default=config.default_grouped_names(),
            )
            reader.ensure_all_settings_read()
            reader.simple_expectations()
    except CaseFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Sources: {', '.join(repr(n) for n in reader.sources.names())}")
    print(f"Targets: {', '.join(targets.names())}")
    if contracts.groups:
        for source in sorted(contracts.groups):
            print(f"Contracts in {source}: {', '.join(sorted(contracts.groups[source]))}")
    else:
        print("Contracts: all")
    print("No issues found.")
    return 0


def _cmd_targets(args: argparse.Namespace) -> int:
    """Handle the targets subcommand."""
    for keyword in sorted(TARGET_KEYWORDS):
        print(keyword)
    return 0
