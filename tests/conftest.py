from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from ideaboard.config import Settings
from ideaboard.data.idea_repo import IdeaRepo
from ideaboard.db.database import Database
from ideaboard.main import create_app
from ideaboard.service.idea_service import IdeaService


@pytest.fixture
def settings(tmp_path):
    return Settings(DB_PATH=tmp_path / "ideas.db", LOG_LEVEL="WARNING")


@pytest.fixture
def database(settings):
    db = Database(settings.DB_PATH, timeout=settings.DB_TIMEOUT)
    db.init_schema()
    return db


@pytest.fixture
def repo(database):
    return IdeaRepo(database)


@pytest.fixture
def service(repo):
    return IdeaService(repo)


@pytest.fixture
def app(settings, database):
    return create_app(settings, database)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
