"""End-to-end validation against a real interpreter process.

The Python interpreter stands in for interp.csh: ``python -c <script> <file>``
matches the ``<interpreter> [args...] <file>`` calling convention.
"""

import asyncio
import sys
import time
from pathlib import Path

import pytest

from parasail_lsp.analysis.diagnostics import DiagnosticsAdapter
from parasail_lsp.analysis.engine import AnalysisEngine
from parasail_lsp.config.schema import Settings
from parasail_lsp.core.errors import ValidatorError
from parasail_lsp.core.types import Diagnostic, DiagnosticSeverity, Range
from parasail_lsp.server.validation import ValidationCoordinator

# Reports "missing end" at the last line of the file when it has no "end"
CHECKER = """
import sys
lines = open(sys.argv[1], encoding="utf-8").read().split("\\n")
if not any(line.strip().startswith("end") for line in lines):
    sys.stderr.write(f"{len(lines)}:1: Error: missing end\\n")
print("checked", sys.argv[1])
"""

SLEEPER = "import time; time.sleep(30)"


def _adapter(script: str, tmp_path: Path, timeout: float | None = None) -> DiagnosticsAdapter:
    return DiagnosticsAdapter(
        sys.executable, ["-c", script], temp_dir=str(tmp_path), timeout=timeout
    )


class TestRealInterpreter:
    @pytest.mark.asyncio
    async def test_reports_error(self, tmp_path: Path) -> None:
        adapter = _adapter(CHECKER, tmp_path)

        diagnostics = await adapter.run("func Foo() is\n  return 1")

        assert diagnostics == [
            Diagnostic(DiagnosticSeverity.ERROR, Range.on_line(1, 0, 1), "missing end")
        ]
        assert list(tmp_path.iterdir()) == []

    @pytest.mark.asyncio
    async def test_clean_source(self, tmp_path: Path) -> None:
        adapter = _adapter(CHECKER, tmp_path)

        assert await adapter.run("func Foo() is\nend func Foo") == []

    @pytest.mark.asyncio
    async def test_missing_interpreter(self, tmp_path: Path) -> None:
        adapter = DiagnosticsAdapter(str(tmp_path / "no-such-interp"), temp_dir=str(tmp_path))
        engine = AnalysisEngine(adapter)

        assert await engine.validate("x", Settings()) is None
        assert list(tmp_path.iterdir()) == []

    @pytest.mark.unix_only
    @pytest.mark.asyncio
    async def test_timeout_kills_interpreter(self, tmp_path: Path) -> None:
        adapter = _adapter(SLEEPER, tmp_path, timeout=0.5)

        started = time.monotonic()
        with pytest.raises(ValidatorError):
            await adapter.run("x")

        assert time.monotonic() - started < 10
        assert list(tmp_path.iterdir()) == []


class TestCoordinatorEndToEnd:
    @pytest.mark.unix_only
    @pytest.mark.asyncio
    async def test_superseded_run_is_cancelled(self, tmp_path: Path) -> None:
        """Under 'latest' only the newest edit's diagnostics are published."""
        script = CHECKER.replace(
            "print(", "import time\nif 'slow' in lines[0]: time.sleep(30)\nprint("
        )
        engine = AnalysisEngine(_adapter(script, tmp_path))
        published: list[tuple[str, list[Diagnostic]]] = []
        coordinator = ValidationCoordinator(
            engine, lambda uri, diags: published.append((uri, diags)), policy="latest"
        )
        uri = "file:///work/a.psi"

        slow = coordinator.request(uri, "// slow\nfunc A() is", Settings())
        await asyncio.sleep(0.2)
        fast = coordinator.request(uri, "func A() is\nend func A", Settings())
        await asyncio.wait_for(asyncio.gather(slow, fast, return_exceptions=True), timeout=10)

        assert slow.cancelled()
        assert published == [(uri, [])]
        assert list(tmp_path.iterdir()) == []
