"""Argument parsing for the parasail-lsp CLI."""

import argparse
from pathlib import Path


def add_config_arg(parser: argparse.ArgumentParser) -> None:
    """Add --config argument to a parser."""
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Config file (default: merge ~/.parasail-lsp and ./.parasail-lsp config.json)",
    )


def add_log_args(parser: argparse.ArgumentParser) -> None:
    """Add --log-level and --log-file arguments to a parser."""
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write a rotating log file in addition to stderr",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parasail-lsp",
        description="ParaSail language server and source analysis tools",
    )
    subparsers = parser.add_subparsers(dest="command")

    # serve - run the language server
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the language server (stdio by default)",
    )
    serve_parser.add_argument(
        "--tcp",
        action="store_true",
        help="Listen on a TCP socket instead of stdio",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="TCP host (default: 127.0.0.1)",
    )
    serve_parser.add_argument(
        "--port", "-p",
        type=int,
        default=2087,
        help="TCP port (default: 2087)",
    )
    add_config_arg(serve_parser)
    add_log_args(serve_parser)

    # check - run the interpreter over files and print diagnostics
    check_parser = subparsers.add_parser(
        "check",
        help="Validate files with the interpreter and print diagnostics",
    )
    check_parser.add_argument("files", nargs="+", type=Path, help="ParaSail source files")
    add_config_arg(check_parser)
    add_log_args(check_parser)

    # outline - list declarations
    outline_parser = subparsers.add_parser(
        "outline",
        help="Print the declarations found in a file",
    )
    outline_parser.add_argument("file", type=Path, help="ParaSail source file")

    # format - normalize indentation
    format_parser = subparsers.add_parser(
        "format",
        help="Snap indentation to multiples of the tab size",
    )
    format_parser.add_argument("file", type=Path, help="ParaSail source file")
    format_parser.add_argument(
        "--tab-size", "-t",
        type=int,
        default=4,
        help="Indentation width (default: 4)",
    )
    format_parser.add_argument(
        "--write", "-w",
        action="store_true",
        help="Rewrite the file in place instead of printing it",
    )

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments; defaults to ``serve`` with no subcommand."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        args = parser.parse_args(["serve"])
    return args
