"""CLI entry point: `python -m users_api` or `users-api`.

Invariants:
    - Logging configured before the server starts
    - Failure to bind the listen address is fatal: logged, exit status 1
"""

import logging
import sys

import uvicorn

from users_api.config import get_settings
from users_api.infrastructure.observability import setup_logging

logger = logging.getLogger("users_api")


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Listening on {settings.addr}")
    try:
        uvicorn.run(
            "users_api.main:app",
            host=settings.host,
            port=settings.port,
            log_config=None,
        )
    except OSError as e:
        logger.critical(f"Cannot bind {settings.addr}: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
