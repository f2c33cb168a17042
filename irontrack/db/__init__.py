"""Database package: engine, session, base."""

from irontrack.db.session import Database, get_db, transaction

__all__ = ["Database", "get_db", "transaction"]
