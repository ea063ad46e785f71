"""Detached execution of media cleanup after content writes."""

import asyncio
from typing import Iterable

import structlog

from domain.media import MediaSweeper

logger = structlog.get_logger()


class BackgroundCleanupScheduler:
    """Runs ``MediaSweeper.remove_if_unused`` in a tracked background task.

    The write that scheduled the cleanup never waits for it; ``drain`` is
    awaited on shutdown so no sweep is cut off mid-way.
    """

    def __init__(self, sweeper: MediaSweeper) -> None:
        self._sweeper = sweeper
        self._tasks: set[asyncio.Task[list[str]]] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def schedule(self, candidates: Iterable[str]) -> None:
        batch = list(candidates)
        if not batch:
            return
        task = asyncio.create_task(self._run(batch))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run(self, batch: list[str]) -> list[str]:
        try:
            return await self._sweeper.remove_if_unused(batch)
        except Exception:
            logger.exception("media_cleanup_task_failed", candidates=batch)
            return []

    async def drain(self) -> None:
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
