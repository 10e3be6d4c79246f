"""Database package."""

from udc.database.session import (
    engine,
    SessionLocal,
    SessionFactory,
    create_db_engine,
    make_session_context,
    get_db_context,
)
from udc.models.base import create_all_tables, drop_all_tables

__all__ = [
    "engine",
    "SessionLocal",
    "SessionFactory",
    "create_db_engine",
    "make_session_context",
    "get_db_context",
    "create_all_tables",
    "drop_all_tables",
]
