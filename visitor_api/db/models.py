"""SQLAlchemy model for the visitors table."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Text

from .session import Base


class Visitor(Base):
    __tablename__ = "visitors"

    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    registered_at = Column(DateTime(timezone=True), nullable=False)

    # The table has no primary key in the database; email is the identity
    # column for the ORM only, so no uniqueness constraint is emitted.
    __mapper_args__ = {"primary_key": [email]}
