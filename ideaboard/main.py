from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ideaboard.config import Settings, settings as default_settings
from ideaboard.data.idea_repo import IdeaRepo
from ideaboard.db.database import Database
from ideaboard.logging_config import configure_logging
from ideaboard.service.idea_service import IdeaService
from ideaboard.web.errors import install_error_handlers
from ideaboard.web.routers import health, home, ideas

logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)
    database = database or Database(settings.DB_PATH, timeout=settings.DB_TIMEOUT)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # A failure here aborts startup; the server never serves requests.
        database.init_schema()
        logger.info("Idea board API ready on port %s", settings.PORT)
        logger.info("Database: %s", settings.DB_PATH)
        logger.info("Frontend URL: %s (allowed origins: %s)", settings.FRONTEND_URL, ", ".join(settings.allowed_origins))
        yield

    app = FastAPI(title="Idea Board API", lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database
    app.state.idea_service = IdeaService(IdeaRepo(database))

    # Every origin is accepted; allowed_origins is informational.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    install_error_handlers(app)

    app.include_router(health.router)
    app.include_router(ideas.router)
    app.include_router(home.router)
    return app

app = create_app()
