"""Utility script to create the visitors table on a fresh database."""
from __future__ import annotations

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from visitor_api.core.config import ConfigurationError, get_settings, require_database_url

from .session import Base, build_engine
from . import models  # noqa: F401  # ensure models are imported for metadata


def create_all(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)


if __name__ == "__main__":
    try:
        engine = build_engine(require_database_url(get_settings()))
        create_all(engine)
        print("Database tables created successfully.")
    except ConfigurationError as exc:
        raise SystemExit(str(exc)) from exc
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
