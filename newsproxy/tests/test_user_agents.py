"""Unit tests for User-Agent rotation."""

import pytest

from newsproxy.integrations.newsapi import BROWSER_USER_AGENTS, UserAgentRotation


class TestUserAgentRotation:
    """Test deterministic cyclic rotation."""

    def test_pool_has_at_least_three_browsers(self):
        assert len(BROWSER_USER_AGENTS) >= 3
        assert all(agent.startswith("Mozilla/5.0") for agent in BROWSER_USER_AGENTS)

    def test_first_three_attempts_differ(self):
        """Test attempts 1, 2 and 3 present distinct User-Agents."""
        rotation = UserAgentRotation()

        agents = [rotation.for_attempt(n) for n in (1, 2, 3)]

        assert len(set(agents)) == 3

    def test_rotation_is_deterministic(self):
        """Test the same attempt always gets the same User-Agent."""
        assert UserAgentRotation().for_attempt(2) == UserAgentRotation().for_attempt(2)

    def test_rotation_wraps_around(self):
        """Test the sequence cycles through the pool."""
        rotation = UserAgentRotation(["a", "b", "c"])

        assert [rotation.for_attempt(n) for n in range(1, 8)] == ["a", "b", "c", "a", "b", "c", "a"]

    def test_invalid_attempt_raises(self):
        with pytest.raises(ValueError, match="attempt"):
            UserAgentRotation().for_attempt(0)

    def test_empty_pool_raises(self):
        with pytest.raises(ValueError, match="empty"):
            UserAgentRotation([])
