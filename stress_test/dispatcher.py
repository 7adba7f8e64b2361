"""Bounded fan-out of attempts against a single target."""

import asyncio
import logging
import time
from dataclasses import dataclass

from stress_test.aggregator import OutcomeAggregator
from stress_test.models.config import RunConfig
from stress_test.models.report import RunReport
from stress_test.requester import Requester

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class LoadDispatcher:
    """Runs every attempt of a stress test and aggregates the outcomes."""

    requester: Requester

    async def run(self, config: RunConfig) -> RunReport:
        """Issue ``config.requests`` attempts, at most ``config.concurrency`` at once.

        A slot is acquired before the task for an attempt is created, so
        attempts waiting for admission are not spawned yet. The call returns
        only after every attempt has finished; there is no overall timeout.

        Args:
            config: Validated run configuration

        Returns:
            Report of the attempts that completed with a response

        """
        log.info(
            "Starting stress test on %s with %d requests and %d concurrency",
            config.url,
            config.requests,
            config.concurrency,
        )
        aggregator = OutcomeAggregator()
        slots = asyncio.Semaphore(config.concurrency)

        started = time.perf_counter()
        async with asyncio.TaskGroup() as group:
            for _ in range(config.requests):
                await slots.acquire()
                group.create_task(self._attempt(config.url, aggregator, slots))
        elapsed = time.perf_counter() - started

        report = aggregator.snapshot(elapsed)
        log.info(
            "Stress test finished: %d of %d requests recorded in %.2fs",
            report.completed,
            config.requests,
            report.elapsed,
        )
        return report

    async def _attempt(
        self,
        url: str,
        aggregator: OutcomeAggregator,
        slots: asyncio.Semaphore,
    ) -> None:
        try:
            if (status := await self.requester.fetch(url)) is not None:
                await aggregator.record_outcome(status)
        finally:
            slots.release()
