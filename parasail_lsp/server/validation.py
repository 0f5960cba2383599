"""Per-document validation scheduling.

Each request bumps the document's generation counter and runs the engine in
its own asyncio task. How overlapping runs are reconciled depends on the
policy:

- ``last-writer`` (default): nothing is cancelled and every finished run
  publishes, so whichever interpreter exits last wins, even if it saw older text.
- ``latest``: a new request cancels the run still in flight (terminating its
  interpreter) and a result is published only if its generation is still the
  newest for that document.

Under both policies a closed document never receives late results.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from parasail_lsp.analysis.engine import AnalysisEngine
from parasail_lsp.config.schema import Settings, ValidationPolicy
from parasail_lsp.core.types import Diagnostic

logger = logging.getLogger(__name__)

# Called with (uri, diagnostics) when a run's result should be shown
PublishCallback = Callable[[str, list[Diagnostic]], None]


class ValidationCoordinator:
    """Starts validations and decides which results reach the editor."""

    def __init__(
        self,
        engine: AnalysisEngine,
        publish: PublishCallback,
        policy: ValidationPolicy = "last-writer",
    ) -> None:
        self._engine = engine
        self._publish = publish
        self.policy = policy
        self._generations: dict[str, int] = {}
        self._inflight: dict[str, set[asyncio.Task[None]]] = {}

    def generation(self, uri: str) -> int:
        """Latest generation requested for uri (0 if none)."""
        return self._generations.get(uri, 0)

    def request(self, uri: str, text: str, settings: Settings) -> asyncio.Task[None]:
        """Schedule validation of a snapshot of uri's text."""
        generation = self._generations.get(uri, 0) + 1
        self._generations[uri] = generation

        tasks = self._inflight.setdefault(uri, set())
        if self.policy == "latest":
            for task in tasks:
                task.cancel()

        task = asyncio.create_task(
            self._run(uri, generation, text, settings),
            name=f"validate:{uri}#{generation}",
        )
        tasks.add(task)
        task.add_done_callback(lambda t: self._discard(uri, t))
        return task

    async def _run(self, uri: str, generation: int, text: str, settings: Settings) -> None:
        diagnostics = await self._engine.validate(text, settings)
        if diagnostics is None:
            return
        latest = self._generations.get(uri)
        if latest is None:
            logger.debug("Dropping diagnostics for closed document %s", uri)
            return
        if self.policy == "latest" and generation != latest:
            logger.debug("Dropping stale diagnostics for %s (#%d < #%d)", uri, generation, latest)
            return
        self._publish(uri, diagnostics)

    def _discard(self, uri: str, task: asyncio.Task[None]) -> None:
        tasks = self._inflight.get(uri)
        if tasks is not None:
            tasks.discard(task)
            if not tasks:
                self._inflight.pop(uri, None)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Validation of %s failed", uri, exc_info=task.exception())

    def forget(self, uri: str) -> None:
        """Stop tracking a closed document and cancel its runs."""
        self._generations.pop(uri, None)
        for task in self._inflight.pop(uri, set()):
            task.cancel()

    async def shutdown(self) -> None:
        """Cancel every in-flight run and wait for them to unwind."""
        tasks = [t for group in self._inflight.values() for t in group]
        self._inflight.clear()
        self._generations.clear()
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
