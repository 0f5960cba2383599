"""Diagnostics from the external ParaSail interpreter.

The interpreter is a black box run as ``<interpreter> [args...] <file>``.
Its only contract is that it writes lines shaped like::

    <line>:<column>: <Error|Warning|Info>: <message>

to stderr before exiting. Stdout and the exit code are ignored, and lines in
any other shape are treated as noise.
"""

from __future__ import annotations

import asyncio
import logging
import os
import re
import tempfile
from collections.abc import Sequence
from dataclasses import replace

from parasail_lsp.core.constants import DEFAULT_FILE_SUFFIX, DIAGNOSTIC_SOURCE, TEMP_FILE_PREFIX
from parasail_lsp.core.encoding import ENCODING, ENCODING_ERRORS, index_to_utf16
from parasail_lsp.core.errors import ValidatorError
from parasail_lsp.core.process import process_group_kwargs, terminate_process
from parasail_lsp.core.types import Diagnostic, DiagnosticSeverity, Position, Range
from parasail_lsp.core.utils import split_lines

logger = logging.getLogger(__name__)

DIAGNOSTIC_LINE_RE = re.compile(r"(\d+):(\d+):\s*(Error|Warning|Info):\s*(.*)")

SEVERITIES: dict[str, DiagnosticSeverity] = {
    "Error": DiagnosticSeverity.ERROR,
    "Warning": DiagnosticSeverity.WARNING,
    "Info": DiagnosticSeverity.INFORMATION,
}


def parse_diagnostics(output: str, source: str = DIAGNOSTIC_SOURCE) -> list[Diagnostic]:
    """Parse interpreter stderr into diagnostics.

    Positions in the output are 1-based; each diagnostic becomes a
    one-character range at the 0-based equivalent.
    """
    diagnostics: list[Diagnostic] = []
    for raw in output.splitlines():
        match = DIAGNOSTIC_LINE_RE.search(raw)
        if match is None:
            continue
        line = max(int(match.group(1)) - 1, 0)
        column = max(int(match.group(2)) - 1, 0)
        diagnostics.append(Diagnostic(
            severity=SEVERITIES[match.group(3)],
            range=Range.on_line(line, column, column + 1),
            message=match.group(4).rstrip(),
            source=source,
        ))
    return diagnostics


def clamp_to_text(diagnostics: Sequence[Diagnostic], text: str) -> list[Diagnostic]:
    """Keep every diagnostic inside the bounds of text.

    Lines past the end move to the last line. Interpreter columns count
    characters; they are clamped to the line and converted to UTF-16.
    """
    lines = split_lines(text)
    last = len(lines) - 1
    clamped: list[Diagnostic] = []
    for diag in diagnostics:
        row = min(diag.range.start.line, last)
        line = lines[row]
        start = index_to_utf16(line, diag.range.start.character)
        end = index_to_utf16(line, diag.range.end.character)
        clamped.append(replace(
            diag,
            range=Range(Position(row, start), Position(row, max(start, end))),
        ))
    return clamped


class DiagnosticsAdapter:
    """Runs the interpreter over a snapshot of a document.

    Every run writes its own temporary file, so concurrent runs for
    different documents never share state.
    """

    def __init__(
        self,
        interpreter: str,
        interpreter_args: Sequence[str] = (),
        *,
        file_suffix: str = DEFAULT_FILE_SUFFIX,
        temp_dir: str | None = None,
        timeout: float | None = None,
        source: str = DIAGNOSTIC_SOURCE,
    ) -> None:
        self.interpreter = interpreter
        self.interpreter_args = tuple(interpreter_args)
        self.file_suffix = file_suffix
        self.temp_dir = temp_dir
        self.timeout = timeout
        self.source = source

    async def run(self, text: str) -> list[Diagnostic]:
        """Validate text and return its diagnostics.

        Raises:
            ValidatorError: If the temporary file cannot be written, the
                interpreter cannot be started, or it exceeds the timeout.
        """
        path = self._write_temp_file(text)
        try:
            output = await self._run_interpreter(path)
        finally:
            self._remove_temp_file(path)
        return clamp_to_text(parse_diagnostics(output, self.source), text)

    def _write_temp_file(self, text: str) -> str:
        try:
            fd, path = tempfile.mkstemp(
                prefix=TEMP_FILE_PREFIX, suffix=self.file_suffix, dir=self.temp_dir
            )
        except OSError as e:
            raise ValidatorError(f"Cannot create temporary file: {e}", self.interpreter) from e
        try:
            with os.fdopen(fd, "w", encoding=ENCODING, newline="") as f:
                f.write(text)
        except (OSError, UnicodeError) as e:
            self._remove_temp_file(path)
            raise ValidatorError(f"Cannot write temporary file {path}: {e}", self.interpreter) from e
        return path

    @staticmethod
    def _remove_temp_file(path: str) -> None:
        try:
            os.unlink(path)
        except OSError as e:
            logger.warning("Failed to remove temporary file %s: %s", path, e)

    async def _run_interpreter(self, path: str) -> str:
        argv = [self.interpreter, *self.interpreter_args, path]
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
                **process_group_kwargs(),
            )
        except OSError as e:
            raise ValidatorError(f"Cannot start {self.interpreter}: {e}", self.interpreter) from e

        logger.debug("Started %s (pid %d) for %s", self.interpreter, process.pid, path)
        try:
            _, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except TimeoutError as e:
            await terminate_process(process)
            raise ValidatorError(
                f"{self.interpreter} did not finish within {self.timeout}s", self.interpreter
            ) from e
        except asyncio.CancelledError:
            await terminate_process(process)
            raise

        logger.debug("%s exited with %s", self.interpreter, process.returncode)
        return stderr.decode(ENCODING, errors=ENCODING_ERRORS) if stderr else ""
