"""
Database models package.

Contains all SQLAlchemy ORM models.
"""

from udc.models.base import Base, TimestampedRecord, TIMESTAMP_COLUMNS, create_all_tables, drop_all_tables
from udc.models.user import UserRecord, get_all_user_records, count_user_records

__all__ = [
    "Base",
    "TimestampedRecord",
    "TIMESTAMP_COLUMNS",
    "UserRecord",
    "get_all_user_records",
    "count_user_records",
    "create_all_tables",
    "drop_all_tables",
]
