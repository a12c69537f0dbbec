"""
CLI entrypoint for the HTTP server. Run from project root:

  python -m rolegate

Reads HOST, PORT, ACCESS_TOKEN_SECRET, UPLOAD_DIR, LOG_LEVEL from the
environment or .env. Exits with status 1 if the configuration is invalid.
"""

import logging
import sys

from dotenv import load_dotenv

load_dotenv()

import uvicorn
from pydantic import ValidationError

from rolegate.core.config import get_settings

logger = logging.getLogger("rolegate")


def main() -> int:
    """Validate settings, configure logging, and serve until interrupted."""
    try:
        settings = get_settings()
    except ValidationError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error("Invalid configuration, refusing to start:\n%s", e)
        return 1

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    logger.info("Server running on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run(
        "rolegate.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
