from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the visitor_api package importable when running from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from visitor_api.app import create_app  # noqa: E402
from visitor_api.core import config as core_config  # noqa: E402
from visitor_api.db.create_tables import create_all  # noqa: E402
from visitor_api.db.session import Base, build_engine, build_sessionmaker  # noqa: E402
from visitor_api.repositories.visitor_repository import VisitorRepository  # noqa: E402


@pytest.fixture()
def db_url(tmp_path, monkeypatch):
    """Points the connection string at a temporary SQLite file and resets cached settings."""
    db_file = tmp_path / "test.db"
    url = f"sqlite:///{db_file}"
    monkeypatch.setenv("POSTGRESQL_CONNECTION_STRING", url)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("CORS_ALLOWED_ORIGINS", raising=False)
    core_config.get_settings.cache_clear()
    yield url
    core_config.get_settings.cache_clear()


@pytest.fixture()
def engine(db_url):
    engine = build_engine(db_url)
    create_all(engine)
    yield engine
    try:
        Base.metadata.drop_all(bind=engine)
    finally:
        engine.dispose()


@pytest.fixture()
def repo(engine):
    return VisitorRepository(build_sessionmaker(engine))


@pytest.fixture()
def app(db_url):
    application = create_app()
    create_all(application.state.engine)
    yield application
    application.state.engine.dispose()


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def app_repo(app):
    """Repository sharing the app's engine, for asserting on stored rows."""
    return VisitorRepository(build_sessionmaker(app.state.engine))
