"""Main entry point for the news proxy.

Usage:
    Development: uvicorn newsproxy.main:app --reload --port 5001
    Production: uvicorn newsproxy.main:app --host 0.0.0.0 --port 5001 --workers 4
"""

from newsproxy.api import create_app
from newsproxy.config import Config
from newsproxy.core.logging import logger

missing = Config.get_missing_config()
if missing:
    logger.warning("config_incomplete", missing=missing)

app = create_app()


def run():
    """Console entry point."""
    import uvicorn

    uvicorn.run(
        "newsproxy.main:app",
        host="0.0.0.0",
        port=Config.port(),
        log_level=Config.log_level().lower(),
    )


if __name__ == "__main__":
    run()
