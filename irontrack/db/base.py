"""SQLAlchemy declarative base and metadata."""

from typing import Any

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base for all ORM models."""

    def as_dict(self) -> dict[str, Any]:
        """Column values keyed by attribute name (no relationships)."""
        return {column.key: getattr(self, column.key) for column in self.__table__.columns}
