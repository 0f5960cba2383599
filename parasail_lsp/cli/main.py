"""Entry point for the parasail-lsp command."""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from parasail_lsp.analysis.engine import AnalysisEngine
from parasail_lsp.analysis.formatter import apply_edits, reindent
from parasail_lsp.analysis.symbols import symbols_in
from parasail_lsp.cli.arg_parser import parse_args
from parasail_lsp.cli.output import print_diagnostics, print_error, print_info, print_outline
from parasail_lsp.config.loader import load_config
from parasail_lsp.config.schema import ServerConfig
from parasail_lsp.core.encoding import ENCODING, configure_stdio
from parasail_lsp.core.errors import ConfigError
from parasail_lsp.core.types import DiagnosticSeverity
from parasail_lsp.server.app import run_server
from parasail_lsp.server.bootstrap import configure_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PROBLEMS = 1
EXIT_UNAVAILABLE = 2


def _read_source(path: Path) -> str | None:
    try:
        with open(path, encoding=ENCODING, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"Cannot read {path}: {e}")
        return None


def _load(args: argparse.Namespace) -> ServerConfig:
    config = load_config(getattr(args, "config", None))
    level = getattr(args, "log_level", None) or config.log_level
    log_file = getattr(args, "log_file", None) or (Path(config.log_file) if config.log_file else None)
    configure_logging(level, log_file)
    return config


async def _check(config: ServerConfig, files: list[Path]) -> int:
    engine = AnalysisEngine.from_config(config)
    status = EXIT_OK
    for path in files:
        text = _read_source(path)
        if text is None:
            status = max(status, EXIT_PROBLEMS)
            continue
        diagnostics = await engine.validate(text, config.settings)
        if diagnostics is None:
            print_error(f"{config.interpreter} could not validate {path}")
            return EXIT_UNAVAILABLE
        print_diagnostics(path, diagnostics)
        if any(d.severity == DiagnosticSeverity.ERROR for d in diagnostics):
            status = EXIT_PROBLEMS
    return status


def _outline(path: Path) -> int:
    text = _read_source(path)
    if text is None:
        return EXIT_PROBLEMS
    print_outline(path, symbols_in(text))
    return EXIT_OK


def _format(path: Path, tab_size: int, write: bool) -> int:
    text = _read_source(path)
    if text is None:
        return EXIT_PROBLEMS
    edits = reindent(text, tab_size)
    formatted = apply_edits(text, edits)
    if not write:
        print(formatted, end="")
        return EXIT_OK
    if edits:
        with open(path, "w", encoding=ENCODING, newline="") as f:
            f.write(formatted)
    print_info(f"{path}: {len(edits)} line(s) reindented")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    configure_stdio()
    args = parse_args(argv)

    try:
        if args.command == "serve":
            config = _load(args)
            run_server(config, tcp=args.tcp, host=args.host, port=args.port)
            return EXIT_OK
        if args.command == "check":
            config = _load(args)
            return asyncio.run(_check(config, args.files))
    except ConfigError as e:
        print_error(e.message)
        return EXIT_UNAVAILABLE

    if args.command == "outline":
        return _outline(args.file)
    if args.command == "format":
        return _format(args.file, args.tab_size, args.write)

    print_error(f"Unknown command: {args.command}")
    return EXIT_UNAVAILABLE
