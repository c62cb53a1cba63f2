"""NewsAPI client for the news proxy.

Performs single upstream attempts; retries are the caller's concern
(see ``RetryController``).
"""

from typing import Optional

import httpx

from newsproxy.config import NewsAPISettings
from newsproxy.core.execution.error_classifier import ErrorClassifier
from newsproxy.core.logging import logger
from newsproxy.integrations.newsapi.user_agents import UserAgentRotation
from newsproxy.models.news import ClassifiedError, NewsQuery, UpstreamResult, UpstreamSuccess

API_KEY_HEADER = "X-Api-Key"

# Sent with every attempt; only User-Agent varies between attempts
BROWSER_HEADERS = {
    "Accept": "application/json, text/plain, */*",
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
    "Connection": "keep-alive",
    "Sec-Fetch-Dest": "empty",
    "Sec-Fetch-Mode": "cors",
    "Sec-Fetch-Site": "cross-site",
}


class NewsAPIClient:
    """Async client for the NewsAPI REST interface.

    Holds one pooled ``httpx.AsyncClient``. Every outcome is returned as an
    ``UpstreamResult``; no exception escapes ``fetch``.
    """

    def __init__(
        self,
        settings: NewsAPISettings,
        user_agents: Optional[UserAgentRotation] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize NewsAPI client.

        Args:
            settings: Upstream settings (API key, base URL, timeout)
            user_agents: User-Agent rotation (defaults to the browser pool)
            transport: Optional httpx transport override (tests use MockTransport)
        """
        self.settings = settings
        self.user_agents = user_agents or UserAgentRotation()
        self._http = httpx.AsyncClient(
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
            transport=transport,
        )

    def build_headers(self, attempt: int) -> dict:
        """Build outbound headers for a 1-based attempt number."""
        headers = dict(BROWSER_HEADERS)
        headers["User-Agent"] = self.user_agents.for_attempt(attempt)
        if self.settings.api_key:
            headers[API_KEY_HEADER] = self.settings.api_key
        return headers

    async def fetch(self, query: NewsQuery, attempt: int = 1) -> UpstreamResult:
        """Perform one GET against the provider.

        Args:
            query: Immutable upstream query
            attempt: 1-based attempt number, selects the User-Agent

        Returns:
            UpstreamSuccess with the decoded JSON body, or a ClassifiedError
        """
        try:
            response = await self._http.get(
                query.endpoint.value,
                params=dict(query.params),
                headers=self.build_headers(attempt),
            )
        except Exception as e:
            error = ErrorClassifier.classify_exception(e)
            logger.warning(
                "upstream_request_failed",
                endpoint=query.endpoint.value,
                attempt=attempt,
                error_type=type(e).__name__,
                kind=error.kind.value,
            )
            return error

        return self._handle_response(query, attempt, response)

    def _handle_response(
        self, query: NewsQuery, attempt: int, response: httpx.Response
    ) -> UpstreamResult:
        """Turn an upstream response into an UpstreamResult."""
        body = response.text
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.is_success and payload is not None:
            # Provider reports some failures as {"status": "error"} with 200
            if not (isinstance(payload, dict) and payload.get("status") == "error"):
                logger.debug(
                    "upstream_request_succeeded",
                    endpoint=query.endpoint.value,
                    attempt=attempt,
                    status=response.status_code,
                )
                return UpstreamSuccess(payload)

        error = ErrorClassifier.classify_response(response.status_code, body, payload)
        error = self._scrub(error)
        logger.warning(
            "upstream_request_failed",
            endpoint=query.endpoint.value,
            attempt=attempt,
            status=response.status_code,
            kind=error.kind.value,
            transient=error.is_transient_block,
        )
        return error

    def _scrub(self, error: ClassifiedError) -> ClassifiedError:
        """Remove the API key from a message before it can reach a caller."""
        api_key = self.settings.api_key
        if not api_key or api_key not in error.message:
            return error
        return ClassifiedError(
            error.kind,
            error.http_status,
            error.message.replace(api_key, "***"),
            error.is_transient_block,
        )

    async def aclose(self) -> None:
        """Close pooled connections."""
        await self._http.aclose()
