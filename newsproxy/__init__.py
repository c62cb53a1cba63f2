"""NewsAI backend: authenticated proxy in front of the NewsAPI aggregation service."""

__version__ = "1.0.0"
