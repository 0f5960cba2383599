"""Cross-platform subprocess helpers for the interpreter adapter.

Interpreter wrappers are often shell scripts that fork the real compiler, so
termination targets the whole process group where the platform allows it:
- Unix: start a new session, then SIGTERM -> wait -> SIGKILL to the group
- Windows: new process group, then terminate() -> wait -> kill()
"""

import asyncio
import logging
import os
import signal
import subprocess
import sys
from asyncio.subprocess import Process
from typing import Any

logger = logging.getLogger(__name__)

GRACEFUL_TIMEOUT: float = 2.0

# Windows-specific creation flags (only defined on Windows)
if sys.platform == "win32":
    WINDOWS_CREATIONFLAGS = (
        subprocess.CREATE_NEW_PROCESS_GROUP |
        subprocess.CREATE_NO_WINDOW
    )
else:
    WINDOWS_CREATIONFLAGS = 0


def process_group_kwargs() -> dict[str, Any]:
    """Keyword arguments that place a child in its own process group."""
    if sys.platform == "win32":
        return {"creationflags": WINDOWS_CREATIONFLAGS}
    return {"start_new_session": True}


async def terminate_process(
    process: Process,
    graceful_timeout: float = GRACEFUL_TIMEOUT,
) -> None:
    """Stop a running interpreter and anything it spawned.

    Does nothing if the process already exited.

    Args:
        process: The asyncio subprocess to stop.
        graceful_timeout: Seconds to wait after the polite signal before
            killing outright.
    """
    if process.returncode is not None or process.pid is None:
        return

    if sys.platform == "win32":
        _signal_windows(process, kill=False)
    else:
        _signal_group(process, signal.SIGTERM)

    try:
        await asyncio.wait_for(process.wait(), timeout=graceful_timeout)
        return
    except TimeoutError:
        logger.debug("Process %d ignored termination, killing", process.pid)

    if sys.platform == "win32":
        _signal_windows(process, kill=True)
    else:
        _signal_group(process, signal.SIGKILL)

    try:
        await process.wait()
    except ProcessLookupError:
        pass


def _signal_group(process: Process, sig: signal.Signals) -> None:
    """Unix: signal the process group, falling back to the single process."""
    try:
        os.killpg(os.getpgid(process.pid), sig)
        logger.debug("Sent %s to process group of %d", sig.name, process.pid)
    except (ProcessLookupError, PermissionError, OSError):
        try:
            process.send_signal(sig)
        except ProcessLookupError:
            pass


def _signal_windows(process: Process, kill: bool) -> None:
    """Windows: terminate() first, kill() on escalation."""
    try:
        if kill:
            process.kill()
        else:
            process.terminate()
    except ProcessLookupError:
        pass
