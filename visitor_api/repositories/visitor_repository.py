"""Data access for visitor registrations backed by SQLAlchemy."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import func, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from visitor_api.db.models import Visitor
from visitor_api.services.errors import StorageError
from visitor_api.domain.visitors import ValidVisitor

logger = logging.getLogger(__name__)


class VisitorRepository:
    """Existence check and insert for the visitors table.

    Each call opens its own session from the factory and closes it on every
    exit path.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def _session(self) -> Session:
        return self._session_factory()

    def exists(self, email: str) -> bool:
        """Return True when a visitor with exactly this email is stored.

        Fail-open: a storage error is logged and reported as "not existing" so
        an outage does not block registration. It can let a duplicate through.
        """
        try:
            with self._session() as session:
                stmt = select(func.count()).select_from(Visitor).where(Visitor.email == email)
                count = session.execute(stmt).scalar_one()
                return int(count or 0) > 0
        except SQLAlchemyError:
            logger.exception("Error checking if visitor with email %s exists", email)
            return False

    def insert(self, visitor: ValidVisitor) -> None:
        """Insert one row stamped with the current UTC time or raise StorageError."""
        stmt = insert(Visitor.__table__).values(
            name=visitor.name,
            email=visitor.email,
            registered_at=datetime.now(timezone.utc),
        )
        try:
            with self._session() as session:
                result = session.execute(stmt)
                rows = result.rowcount
                if rows != 1:
                    session.rollback()
                    logger.error(
                        "Insert for visitor %s (%s) affected %s rows",
                        visitor.name,
                        visitor.email,
                        rows,
                    )
                    raise StorageError()
                session.commit()
        except SQLAlchemyError as exc:
            logger.exception("Error saving visitor %s with email %s to database", visitor.name, visitor.email)
            raise StorageError() from exc
        logger.info("Visitor %s with email %s registered successfully", visitor.name, visitor.email)

    # -------------------------- reads --------------------------
    def get_by_email(self, email: str) -> Optional[Visitor]:
        with self._session() as session:
            stmt = select(Visitor).where(Visitor.email == email).limit(1)
            return session.execute(stmt).scalars().first()

    def count(self) -> int:
        with self._session() as session:
            return int(session.execute(select(func.count()).select_from(Visitor)).scalar_one())
