"""Execution of single HTTP attempts."""

import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp

from stress_test.models.config import RunConfig

log = logging.getLogger(__name__)


class Requester(ABC):
    """Performs one attempt against the target and reports its status."""

    @abstractmethod
    async def fetch(self, url: str) -> int | None:
        """Issue a GET request and read the whole response body.

        Args:
            url: Target URL

        Returns:
            The response status code, or None when the attempt failed before
            the body was fully read

        """


@dataclass(frozen=True, kw_only=True)
class AiohttpRequester(Requester):
    """Requester backed by a shared aiohttp session."""

    session: aiohttp.ClientSession = field(repr=False)
    logger: logging.Logger = field(default=log, repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: RunConfig, *, logger: logging.Logger = log
    ) -> AsyncGenerator["AiohttpRequester", None]:
        """Create requester with managed session lifecycle."""
        connector = aiohttp.TCPConnector(
            limit=config.concurrency,
            ssl=config.verify_ssl,
        )
        timeout = aiohttp.ClientTimeout(total=config.timeout)
        async with aiohttp.ClientSession(
            connector=connector, timeout=timeout
        ) as session:
            yield cls(session=session, logger=logger)

    async def fetch(self, url: str) -> int | None:
        """Fetch the URL, logging and swallowing per-attempt failures."""
        try:
            response = await self.session.get(url)
        except (aiohttp.ClientError, TimeoutError) as exc:
            self.logger.error("Error making the request: %s", exc)
            return None

        async with response:
            try:
                await response.read()
            except (aiohttp.ClientError, TimeoutError) as exc:
                self.logger.error("Error reading the response body: %s", exc)
                return None

        return response.status
