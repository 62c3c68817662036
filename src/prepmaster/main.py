"""PREP Master entry point.

Serves the scraping/analysis API with uvicorn.
"""

import logging

import uvicorn

from prepmaster.config import LOG_LEVEL, SERVER_HOST, SERVER_PORT

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
)
logger = logging.getLogger(__name__)


def main() -> None:
    from prepmaster.api.app import app

    logger.info("Starting PREP Master API on %s:%d", SERVER_HOST, SERVER_PORT)
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT, log_level="warning")


if __name__ == "__main__":
    main()
