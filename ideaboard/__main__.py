from __future__ import annotations
import logging
import sys

import uvicorn

from ideaboard.config import settings
from ideaboard.db.database import Database, PersistenceError
from ideaboard.logging_config import configure_logging
from ideaboard.main import create_app

logger = logging.getLogger("ideaboard")

def main() -> int:
    configure_logging(settings.LOG_LEVEL)
    database = Database(settings.DB_PATH, timeout=settings.DB_TIMEOUT)
    try:
        database.init_schema()
    except PersistenceError:
        logger.exception("Failed to start server")
        return 1
    uvicorn.run(create_app(settings, database), host=settings.HOST, port=settings.PORT)
    return 0

if __name__ == "__main__":
    sys.exit(main())
