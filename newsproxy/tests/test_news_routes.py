"""Integration tests for the /api/news routes."""

import pytest

from newsproxy.config import RateLimitSettings
from newsproxy.models.news import NewsEndpoint
from newsproxy.tests.fakes import (
    ARTICLES_PAYLOAD,
    BLOCKED,
    INVALID_KEY,
    RATE_LIMITED,
    FakeNewsClient,
    make_settings,
)


class TestTrendingNews:
    """Test /api/news/trending."""

    def test_healthy_upstream(self, make_client):
        """Test one upstream call and a success envelope."""
        upstream = FakeNewsClient()
        client = make_client(upstream)

        response = client.get("/api/news/trending", params={"page": 1, "pageSize": 10})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"] == ARTICLES_PAYLOAD
        assert body["timestamp"].endswith("Z")
        assert len(upstream.calls) == 1

        query, attempt = upstream.calls[0]
        assert attempt == 1
        assert query.endpoint == NewsEndpoint.TOP_HEADLINES
        assert dict(query.params) == {"country": "us", "page": "1", "pageSize": "10"}

    def test_defaults(self, make_client):
        upstream = FakeNewsClient()

        make_client(upstream).get("/api/news/trending")

        query, _ = upstream.calls[0]
        assert query.params["page"] == "1"
        assert query.params["pageSize"] == "10"

    @pytest.mark.parametrize(
        "params",
        [{"page": "abc"}, {"page": 0}, {"pageSize": 0}, {"pageSize": 500}],
    )
    def test_invalid_paging_rejected(self, make_client, params):
        """Test malformed paging is a 400 without contacting upstream."""
        upstream = FakeNewsClient()

        response = make_client(upstream).get("/api/news/trending", params=params)

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert upstream.calls == []


class TestCategoryNews:
    """Test /api/news/category/{category}."""

    def test_category_forwarded(self, make_client):
        upstream = FakeNewsClient()

        response = make_client(upstream).get("/api/news/category/Technology", params={"page": 2})

        assert response.status_code == 200
        query, _ = upstream.calls[0]
        assert query.params["category"] == "technology"
        assert query.params["page"] == "2"

    def test_unknown_category_rejected(self, make_client):
        upstream = FakeNewsClient()

        response = make_client(upstream).get("/api/news/category/gossip")

        assert response.status_code == 400
        assert "Invalid category" in response.json()["message"]
        assert upstream.calls == []


class TestGeneralAndPoliticsNews:
    """Test /api/news/general and /api/news/politics."""

    def test_general_uses_top_headlines(self, make_client):
        upstream = FakeNewsClient()

        response = make_client(upstream).get("/api/news/general")

        assert response.status_code == 200
        query, _ = upstream.calls[0]
        assert query.endpoint == NewsEndpoint.TOP_HEADLINES
        assert "category" not in query.params

    def test_politics_uses_keyword_search(self, make_client):
        upstream = FakeNewsClient()

        response = make_client(upstream).get("/api/news/politics", params={"pageSize": 5})

        assert response.status_code == 200
        query, _ = upstream.calls[0]
        assert query.endpoint == NewsEndpoint.EVERYTHING
        assert query.params["q"] == "politics"
        assert query.params["sortBy"] == "publishedAt"
        assert query.params["language"] == "en"
        assert query.params["pageSize"] == "5"


class TestSearchNews:
    """Test /api/news/search."""

    @pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "   "}])
    def test_missing_query_rejected_without_upstream_call(self, make_client, params):
        """Test absent or blank q is a 400 ClientInputError."""
        upstream = FakeNewsClient()

        response = make_client(upstream).get("/api/news/search", params=params)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Search query is required"
        assert upstream.calls == []

    def test_search_forwarded(self, make_client):
        upstream = FakeNewsClient()

        response = make_client(upstream).get("/api/news/search", params={"q": " climate "})

        assert response.status_code == 200
        query, _ = upstream.calls[0]
        assert query.params["q"] == "climate"
        assert query.params["sortBy"] == "relevancy"

    def test_rate_limited_three_times(self, make_client, sleep):
        """Test exhaustion after 3 calls and 2s + 4s of backoff."""
        upstream = FakeNewsClient([RATE_LIMITED])

        response = make_client(upstream).get("/api/news/search", params={"q": "climate"})

        assert response.status_code == 429
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Failed to search news"
        assert body["isCloudflareIssue"] is False
        assert body["retryAfter"] == 60
        assert "timestamp" in body
        assert response.headers["Retry-After"] == "60"
        assert len(upstream.calls) == 3
        assert sleep.delays == [2.0, 4.0]


class TestUpstreamFailures:
    """Test failure envelopes for classified upstream errors."""

    def test_blocked_reports_cloudflare_issue(self, make_client):
        upstream = FakeNewsClient([BLOCKED])

        response = make_client(upstream).get("/api/news/general")

        assert response.status_code == 403
        body = response.json()
        assert body["error"] == "Failed to fetch general news"
        assert body["isCloudflareIssue"] is True
        assert body["retryAfter"] >= 300
        assert len(upstream.calls) == 3

    def test_invalid_key_not_retried(self, make_client, sleep):
        upstream = FakeNewsClient([INVALID_KEY])

        response = make_client(upstream).get("/api/news/politics")

        assert response.status_code == 401
        body = response.json()
        assert body["message"] == "Invalid API key"
        assert body["error"] == "Failed to fetch politics news"
        assert len(upstream.calls) == 1
        assert sleep.delays == []

    def test_api_key_never_echoed(self, make_client):
        upstream = FakeNewsClient([INVALID_KEY])

        response = make_client(upstream).get("/api/news/trending")

        assert "test-key" not in response.text


class TestAppSurface:
    """Test envelope behavior shared by all routes."""

    def test_unknown_route(self, make_client):
        response = make_client(FakeNewsClient()).get("/api/nope")

        assert response.status_code == 404
        assert response.json()["message"] == "Route not found"
        assert response.json()["success"] is False

    def test_request_id_and_security_headers(self, make_client):
        response = make_client(FakeNewsClient()).get("/api/news/trending")

        assert response.headers["X-Request-ID"]
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_news_requires_authentication(self, make_client):
        upstream = FakeNewsClient()

        response = make_client(upstream, user=None).get("/api/news/trending")

        assert response.status_code == 401
        assert response.json()["message"] == "No token provided, authorization denied"
        assert upstream.calls == []

    def test_inbound_rate_limit(self, make_client):
        settings = make_settings(rate_limit=RateLimitSettings(max_requests=2, window_seconds=60))
        client = make_client(FakeNewsClient(), settings=settings)

        statuses = [client.get("/api/news/trending").status_code for _ in range(3)]

        assert statuses == [200, 200, 429]
        limited = client.get("/api/news/trending")
        assert limited.json()["message"] == "Too many requests from this IP, please try again later."
        assert int(limited.headers["Retry-After"]) > 0

    def test_forwarded_header_cannot_dodge_rate_limit(self, make_client):
        """Test a rotating X-Forwarded-For does not buy extra requests."""
        settings = make_settings(rate_limit=RateLimitSettings(max_requests=2, window_seconds=60))
        client = make_client(FakeNewsClient(), settings=settings)

        statuses = [
            client.get("/api/news/trending", headers={"X-Forwarded-For": f"10.0.0.{i}"}).status_code
            for i in range(10)
        ]

        assert statuses[:2] == [200, 200]
        assert set(statuses[2:]) == {429}

    def test_forwarded_header_honoured_when_trusted(self, make_client):
        """Test forwarded addresses key the limiter behind a trusted proxy."""
        settings = make_settings(
            rate_limit=RateLimitSettings(max_requests=1, window_seconds=60, trust_proxy_headers=True)
        )
        client = make_client(FakeNewsClient(), settings=settings)

        first = client.get("/api/news/trending", headers={"X-Forwarded-For": "10.0.0.1, 172.16.0.1"})
        other = client.get("/api/news/trending", headers={"X-Forwarded-For": "10.0.0.2"})
        repeat = client.get("/api/news/trending", headers={"X-Forwarded-For": "10.0.0.1"})

        assert [first.status_code, other.status_code, repeat.status_code] == [200, 200, 429]

    def test_health(self, make_client):
        response = make_client(FakeNewsClient()).get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "NewsAI Backend is running"
        assert body["dependencies"]["newsapi"]["status"] == "configured"
        assert body["dependencies"]["supabase"]["status"] == "unconfigured"
