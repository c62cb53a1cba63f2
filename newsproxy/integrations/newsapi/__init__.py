"""NewsAPI integration: upstream client and User-Agent rotation."""

from newsproxy.integrations.newsapi.client import NewsAPIClient
from newsproxy.integrations.newsapi.user_agents import BROWSER_USER_AGENTS, UserAgentRotation

__all__ = ["NewsAPIClient", "UserAgentRotation", "BROWSER_USER_AGENTS"]
