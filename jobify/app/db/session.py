"""
Database session configuration
"""
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from jobify.app.core.config import settings


def configure_sqlite(target: Engine) -> Engine:
    """Make LIKE case-sensitive on SQLite so job search matches PostgreSQL."""
    if target.dialect.name != "sqlite":
        return target

    @event.listens_for(target, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA case_sensitive_like = ON")
        cursor.close()

    return target


_connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}
engine = configure_sqlite(create_engine(settings.database_url, echo=False, connect_args=_connect_args))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
