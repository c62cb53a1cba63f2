"""Retry controller for upstream news fetches.

Wraps an upstream client in a bounded retry loop with exponential backoff.
"""

import asyncio
from typing import Awaitable, Callable, Protocol

from newsproxy.core.execution.error_classifier import ErrorClassifier
from newsproxy.core.logging import logger
from newsproxy.core.retry_config import RetryConfig
from newsproxy.models.news import NewsQuery, RetryState, UpstreamResult

Sleep = Callable[[float], Awaitable[None]]


class UpstreamClient(Protocol):
    """Anything that can perform a single upstream attempt."""

    async def fetch(self, query: NewsQuery, attempt: int) -> UpstreamResult:
        ...


class RetryController:
    """Drives up to ``max_attempts`` upstream attempts for one logical fetch.

    Only transient failures (``is_transient_block``) are retried; success and
    permanent failures return immediately. Backoff suspends the current task
    with ``asyncio.sleep`` so other requests keep running. The controller holds
    no per-fetch state, so one instance serves concurrent requests.
    """

    def __init__(self, client: UpstreamClient, config: RetryConfig, sleep: Sleep = asyncio.sleep):
        """Initialize RetryController.

        Args:
            client: Upstream client performing single attempts
            config: RetryConfig with attempt limit and backoff base
            sleep: Awaitable delay function (injectable for tests)
        """
        self.client = client
        self.config = config
        self._sleep = sleep

    async def execute(self, query: NewsQuery) -> UpstreamResult:
        """Run ``query`` with automatic retry on transient failures.

        Waits ``2 ** attempt * backoff_base_ms`` after each failed attempt that
        is retried (2s, then 4s with defaults).

        Args:
            query: Immutable upstream query

        Returns:
            UpstreamSuccess, or the ClassifiedError of the last attempt
        """
        state = RetryState()

        while True:
            result = await self._attempt(query, state.attempt)

            if result.ok:
                if state.attempt > 1:
                    logger.info(
                        "upstream_recovered",
                        endpoint=query.endpoint.value,
                        attempt=state.attempt,
                    )
                return result

            state.last_error = result

            if not result.is_transient_block:
                return result

            if state.attempt >= self.config.max_attempts:
                break

            delay = self.config.delay_for(state.attempt)
            logger.info(
                "upstream_retry_scheduled",
                endpoint=query.endpoint.value,
                attempt=state.attempt,
                kind=result.kind.value,
                delay_seconds=delay,
            )
            await self._sleep(delay)
            state.attempt += 1

        logger.warning(
            "upstream_retries_exhausted",
            endpoint=query.endpoint.value,
            attempts=state.attempt,
            kind=state.last_error.kind.value,
            status=state.last_error.http_status,
        )
        return state.last_error

    async def _attempt(self, query: NewsQuery, attempt: int) -> UpstreamResult:
        """Run one attempt, converting any escaped exception into a ClassifiedError."""
        try:
            return await self.client.fetch(query, attempt)
        except Exception as e:
            logger.error(
                "upstream_client_crashed",
                endpoint=query.endpoint.value,
                attempt=attempt,
                error_type=type(e).__name__,
            )
            return ErrorClassifier.classify_exception(e)
