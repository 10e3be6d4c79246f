"""
Database Session Management
============================

Handles database connections and session lifecycle for the
database-backed user source.
"""

import logging
import os
from contextlib import contextmanager
from typing import Callable, ContextManager, Generator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from udc.config import settings
from udc.core.logging_config import enable_sql_logging

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], ContextManager[Session]]


def create_db_engine(database_url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """
    Create and configure the database engine.

    Args:
        database_url: SQLAlchemy URL (defaults to settings.database_url)
        echo: Log every SQL statement at INFO (defaults to settings.app_debug).
            Statements go through logging, never straight to stdout.
    """
    database_url = database_url or settings.database_url
    echo = settings.app_debug if echo is None else echo
    if echo:
        enable_sql_logging()

    # SQLite-specific configuration
    if database_url.startswith("sqlite"):
        # Ensure data directory exists
        if ":///" in database_url:
            db_path = database_url.split(":///")[1]
            if not db_path.startswith(":memory:"):
                db_dir = os.path.dirname(db_path)
                if db_dir and not os.path.exists(db_dir):
                    os.makedirs(db_dir, exist_ok=True)

        # StaticPool keeps one connection, so an in-memory database
        # survives across sessions.
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool
        )

        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    else:
        engine = create_engine(database_url)

    logger.debug("Created database engine for %s", engine.url.render_as_string(hide_password=True))
    return engine


# Create global engine and session factory
engine = create_db_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def make_session_context(session_maker: sessionmaker) -> SessionFactory:
    """
    Build a ``get_db_context``-style factory bound to ``session_maker``.

    Usage:
        factory = make_session_context(sessionmaker(bind=test_engine))
        with factory() as db:
            ...
    """

    @contextmanager
    def session_context() -> Generator[Session, None, None]:
        db = session_maker()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    return session_context


# Commits on success, rolls back on error, always closes.
get_db_context = make_session_context(SessionLocal)
