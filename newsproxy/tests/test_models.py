"""Unit tests for news query and result models."""

from dataclasses import FrozenInstanceError

import pytest

from newsproxy.config import Config
from newsproxy.core.retry_config import ErrorCategory
from newsproxy.models import ClassifiedError, NewsEndpoint, NewsQuery, Pagination


class TestNewsQuery:
    """Test NewsQuery immutability."""

    def test_params_are_read_only(self):
        query = NewsQuery(NewsEndpoint.EVERYTHING, {"q": "climate"})

        with pytest.raises(TypeError):
            query.params["q"] = "weather"

    def test_source_mapping_is_copied(self):
        source = {"q": "climate"}
        query = NewsQuery(NewsEndpoint.EVERYTHING, source)

        source["q"] = "weather"

        assert query.params["q"] == "climate"

    def test_fields_are_frozen(self):
        query = NewsQuery(NewsEndpoint.TOP_HEADLINES, {})

        with pytest.raises(FrozenInstanceError):
            query.endpoint = NewsEndpoint.EVERYTHING

    def test_values_are_strings(self):
        query = NewsQuery(NewsEndpoint.TOP_HEADLINES, {"page": 2})

        assert query.params["page"] == "2"

    def test_equal_queries_hash_equal(self):
        first = NewsQuery(NewsEndpoint.EVERYTHING, {"q": "a", "page": "1"})
        second = NewsQuery(NewsEndpoint.EVERYTHING, {"page": "1", "q": "a"})

        assert hash(first) == hash(second)


class TestClassifiedError:
    def test_retry_after_hints(self):
        blocked = ClassifiedError(ErrorCategory.UPSTREAM_BLOCKED, 403, "blocked", True)
        generic = ClassifiedError(ErrorCategory.UPSTREAM_GENERIC, 500, "oops")

        assert blocked.retry_after == 300
        assert generic.retry_after == 60
        assert blocked.ok is False


class TestPagination:
    def test_as_params(self):
        assert Pagination(page=3, page_size=20).as_params() == {"page": "3", "pageSize": "20"}


class TestConfigLoad:
    """Test settings built from the environment."""

    def test_defaults(self, monkeypatch):
        for name in ("NEWS_API_KEY", "NEWS_BASE_URL", "NEWS_TIMEOUT_SECONDS", "NEWS_MAX_ATTEMPTS"):
            monkeypatch.delenv(name, raising=False)

        settings = Config.load()

        assert settings.news_api.base_url == "https://newsapi.org/v2"
        assert settings.news_api.timeout_seconds == 30.0
        assert settings.retry.max_attempts == 3
        assert settings.rate_limit.max_requests == 100

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("NEWS_API_KEY", "abc")
        monkeypatch.setenv("NEWS_BASE_URL", "https://proxy.example/v2/")
        monkeypatch.setenv("NEWS_MAX_ATTEMPTS", "5")
        monkeypatch.setenv("NEWS_TIMEOUT_SECONDS", "12")

        settings = Config.load()

        assert settings.news_api.api_key == "abc"
        assert settings.news_api.base_url == "https://proxy.example/v2"
        assert settings.news_api.timeout_seconds == 12.0
        assert settings.retry.max_attempts == 5

    def test_malformed_integer_fails_fast(self, monkeypatch):
        monkeypatch.setenv("NEWS_MAX_ATTEMPTS", "three")

        with pytest.raises(ValueError, match="NEWS_MAX_ATTEMPTS"):
            Config.load()

    def test_zero_attempts_rejected(self, monkeypatch):
        monkeypatch.setenv("NEWS_MAX_ATTEMPTS", "0")

        with pytest.raises(ValueError, match="at least 1"):
            Config.load()

    @pytest.mark.parametrize("raw, expected", [(None, False), ("true", True), ("1", True), ("no", False)])
    def test_trust_proxy_headers(self, monkeypatch, raw, expected):
        if raw is None:
            monkeypatch.delenv("TRUST_PROXY_HEADERS", raising=False)
        else:
            monkeypatch.setenv("TRUST_PROXY_HEADERS", raw)

        assert Config.load().rate_limit.trust_proxy_headers is expected
