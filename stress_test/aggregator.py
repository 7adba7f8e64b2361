"""Shared outcome counters updated by concurrently running attempts."""

import asyncio
from collections import Counter

from stress_test.models.report import RunReport

HTTP_OK = 200


class OutcomeAggregator:
    """Collects status codes of completed attempts under a single lock."""

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._completed = 0
        self._succeeded = 0
        self._status_counts: Counter[int] = Counter()

    async def record_outcome(self, status_code: int) -> None:
        """Record the status code of an attempt that read its full response."""
        async with self._lock:
            self._completed += 1
            if status_code == HTTP_OK:
                self._succeeded += 1
            else:
                self._status_counts[status_code] += 1

    def snapshot(self, elapsed: float) -> RunReport:
        """Freeze the current counters into a report."""
        return RunReport(
            completed=self._completed,
            succeeded=self._succeeded,
            status_counts=dict(self._status_counts),
            elapsed=elapsed,
        )
