"""Server Runner — starts uvicorn on the configured host and port.

Invariants:
    - Configuration errors abort before the socket is bound (exit code 2)
    - SIGINT/SIGTERM: uvicorn stops accepting, drains in-flight requests,
      then runs the lifespan teardown that releases the database
"""

import logging
import sys

import uvicorn

from content_api.config import get_settings
from content_api.core.errors import ConfigurationError
from content_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    try:
        settings = get_settings()
    except ConfigurationError as e:
        setup_logging()
        logger.error(e.message)
        sys.exit(2)

    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Starting server on {settings.host}:{settings.port}")
    uvicorn.run(
        "content_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
