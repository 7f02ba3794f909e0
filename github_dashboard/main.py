import logging
import sys

from aiohttp import web

from github_dashboard.api.app import create_app
from github_dashboard.config import load_settings

logger = logging.getLogger(__name__)


def run() -> None:
    # Reads .env and the process environment
    settings = load_settings()

    # Configure logging
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    app = create_app(settings)

    logger.info(f"Starting GitHub dashboard API on {settings.host}:{settings.port}.")
    try:
        web.run_app(app, host=settings.host, port=settings.port, print=None)
    except KeyboardInterrupt:
        logger.info("Server interrupted by user. Exiting gracefully.")
    except Exception as e:
        logger.exception(f"An unexpected error occurred: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
