"""Tests for process group termination in parasail_lsp.core.process."""

import asyncio
import signal
import sys
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from parasail_lsp.core.process import process_group_kwargs, terminate_process


def _running_process() -> MagicMock:
    process = MagicMock()
    process.pid = 1234
    process.returncode = None
    process.wait = AsyncMock(return_value=0)
    return process


class TestProcessGroupKwargs:
    @pytest.mark.unix_only
    def test_unix_starts_new_session(self) -> None:
        assert process_group_kwargs() == {"start_new_session": True}

    @pytest.mark.windows
    def test_windows_uses_creation_flags(self) -> None:
        assert "creationflags" in process_group_kwargs()


@pytest.mark.unix_only
class TestTerminateProcessUnix:
    """Tests for terminate_process on Unix."""

    @pytest.mark.asyncio
    async def test_already_exited_is_noop(self) -> None:
        process = _running_process()
        process.returncode = 0

        with patch("parasail_lsp.core.process.os.killpg") as mock_killpg:
            await terminate_process(process)

        mock_killpg.assert_not_called()

    @pytest.mark.asyncio
    async def test_sigterm_to_group(self) -> None:
        """Should send SIGTERM to the process group and return when it exits."""
        process = _running_process()

        with patch("parasail_lsp.core.process.os.getpgid", return_value=5678):
            with patch("parasail_lsp.core.process.os.killpg") as mock_killpg:
                await terminate_process(process, 2.0)

        mock_killpg.assert_called_once_with(5678, signal.SIGTERM)

    @pytest.mark.asyncio
    async def test_sigkill_after_timeout(self) -> None:
        """If the process ignores SIGTERM, the group gets SIGKILL."""
        process = _running_process()
        call_count = [0]

        async def mock_wait() -> int:
            call_count[0] += 1
            if call_count[0] == 1:
                await asyncio.sleep(10)  # Will timeout
            return 0

        process.wait = mock_wait

        with patch("parasail_lsp.core.process.os.getpgid", return_value=5678):
            with patch("parasail_lsp.core.process.os.killpg") as mock_killpg:
                await terminate_process(process, 0.01)

        calls = mock_killpg.call_args_list
        assert [c[0] for c in calls] == [(5678, signal.SIGTERM), (5678, signal.SIGKILL)]

    @pytest.mark.asyncio
    async def test_falls_back_to_single_process(self) -> None:
        """ProcessLookupError from the group lookup signals the process directly."""
        process = _running_process()

        with patch("parasail_lsp.core.process.os.getpgid", side_effect=ProcessLookupError):
            await terminate_process(process, 2.0)

        process.send_signal.assert_called_once_with(signal.SIGTERM)

    @pytest.mark.asyncio
    async def test_killpg_permission_error(self) -> None:
        process = _running_process()

        with patch("parasail_lsp.core.process.os.getpgid", return_value=5678):
            with patch("parasail_lsp.core.process.os.killpg", side_effect=PermissionError):
                await terminate_process(process, 2.0)

        process.send_signal.assert_called_once_with(signal.SIGTERM)


class TestTerminateProcessWindows:
    """Windows behavior, exercised by faking the platform."""

    @pytest.mark.asyncio
    async def test_terminate_then_kill(self) -> None:
        process = _running_process()
        call_count = [0]

        async def mock_wait() -> int:
            call_count[0] += 1
            if call_count[0] == 1:
                await asyncio.sleep(10)
            return 0

        process.wait = mock_wait

        with patch.object(sys, "platform", "win32"):
            await terminate_process(process, 0.01)

        process.terminate.assert_called_once()
        process.kill.assert_called_once()
