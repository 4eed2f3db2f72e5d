import sys
import os

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import structlog

from userstore.config import get_settings
from userstore.core.logging import configure_logging
from userstore.infrastructure.database import engine, init_db

logger = structlog.get_logger("scripts.init_db")


def main():
    configure_logging()
    settings = get_settings()
    logger.info("Creating user store tables", env=settings.ENVIRONMENT)
    try:
        init_db(engine)
    except Exception:
        logger.exception("Table creation failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
