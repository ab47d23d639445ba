"""
Command-line entry point.

Usage:
    python -m shortie

Environment variables:
    PORT - Port to listen on (default 8080)
    HOST - Address to bind (default 0.0.0.0)
    BASE_URL - Base URL for short links (default http://localhost:<PORT>)
    LOG_LEVEL - Logging level (default INFO)
"""

import uvicorn

from shortie.core.logging_config import setup_logging
from shortie.core.setting import Settings
from shortie.main import create_app


def main():
    """Load configuration, set up logging and serve until interrupted."""
    config = Settings()
    logger = setup_logging(config.LOG_LEVEL)

    app = create_app(app_settings=config)

    logger.info(f"listening on {config.HOST}:{config.PORT}")
    uvicorn.run(
        app,
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
