# Copyright 2026 Regg Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the Regg command-line interface."""

import argparse
import sys
from pathlib import Path

from regg.config.settings import ConfigError, ReggConfig, find_config, load_config
from regg.scanner.diagnostics import Diagnostics
from regg.scanner.lexer import FenceMode, ScanResult, scan
from regg.scanner.serialize import format_token, serialize_tokens

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the Regg CLI."""
    parser = argparse.ArgumentParser(
        prog="regg",
        description="Regg: template scanner",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # run subcommand
    run_parser = subparsers.add_parser(
        "run",
        help="Scan a template file and print its tokens",
        description="Scan a template file, print its tokens, and report lexical errors.",
    )
    run_parser.add_argument("file", help="Template file to scan")
    _add_scan_options(run_parser)

    # repl subcommand
    repl_parser = subparsers.add_parser(
        "repl",
        help="Start an interactive scanning prompt",
        description="Read template lines from standard input and print the tokens of each line.",
    )
    _add_scan_options(repl_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

# Exit status of a file run that reported lexical errors (EX_DATAERR).
_EXIT_LEXICAL_ERROR = 65


def _add_scan_options(parser: argparse.ArgumentParser) -> None:
    """Add the options shared by all scanning subcommands."""
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default=None,
        help="Token output format (default: from configuration, else text)",
    )
    parser.add_argument(
        "--fence-mode",
        choices=[mode.value for mode in FenceMode],
        default=None,
        help="Closing fence detection for code blocks (default: from configuration, else exact)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a .regg.yaml file (default: nearest .regg.yaml, if any)",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "run":
        return _cmd_run(args)
    if args.command == "repl":
        return _cmd_repl(args)
    return 0


def _cmd_run(args: argparse.Namespace) -> int:
    """Handle the run subcommand."""
    path = Path(args.file)

    try:
        source = path.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return 1

    config = _resolve_config(args, path.resolve().parent)
    if config is None:
        return 1

    result = scan(source, fence_mode=config.fence_mode)
    _print_result(result, config)

    if result.has_errors:
        return _EXIT_LEXICAL_ERROR
    return 0


def _cmd_repl(args: argparse.Namespace) -> int:
    """Handle the repl subcommand."""
    config = _resolve_config(args, Path.cwd())
    if config is None:
        return 1

    print("Welcome to the Regg REPL, press Ctrl+D or Ctrl+C to exit.")
    diagnostics = Diagnostics()
    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return 0

        result = scan(line + "\n", fence_mode=config.fence_mode, diagnostics=diagnostics)
        _print_result(result, config)
        # Errors on one line never fail the session.
        diagnostics.reset()


def _resolve_config(args: argparse.Namespace, search_dir: Path) -> ReggConfig | None:
    """Combine the configuration file with command-line overrides.

    Returns None (after printing the error) if the configuration is invalid.
    """
    config_path = Path(args.config) if args.config else find_config(search_dir)
    config = ReggConfig()
    if config_path is not None:
        try:
            config = load_config(config_path)
        except ConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return None

    overrides: dict[str, object] = {}
    if args.format is not None:
        overrides["output_format"] = args.format
    if args.fence_mode is not None:
        overrides["fence_mode"] = FenceMode(args.fence_mode)
    return config.model_copy(update=overrides)


def _print_result(result: ScanResult, config: ReggConfig) -> None:
    """Print tokens to stdout and diagnostics to stderr."""
    if config.output_format == "json":
        print(serialize_tokens(result.tokens))
    else:
        for token in result.tokens:
            print(format_token(token))

    for diagnostic in result.diagnostics:
        print(diagnostic.format(), file=sys.stderr)
