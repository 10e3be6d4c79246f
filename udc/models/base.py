"""
Declarative base and shared columns for the directory tables.
"""

from datetime import datetime
from typing import Any, Dict, Iterable, Optional

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


TIMESTAMP_COLUMNS = frozenset({"created_at", "updated_at"})


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


class TimestampedRecord:
    """
    Adds ``created_at``/``updated_at`` columns and column-wise export.

    Example:
        record.to_dict()                    # every column
        record.to_dict(timestamps=False)    # domain columns only
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )

    def to_dict(self, exclude: Optional[Iterable[str]] = None, timestamps: bool = True) -> Dict[str, Any]:
        """
        Map column names to values.

        Args:
            exclude: Column names to leave out
            timestamps: Include created_at/updated_at (as ISO strings when set)
        """
        skipped = set(exclude or ())
        if not timestamps:
            skipped |= TIMESTAMP_COLUMNS

        data = {}
        for column in self.__table__.columns:
            if column.name in skipped:
                continue
            value = getattr(self, column.name)
            data[column.name] = value.isoformat() if isinstance(value, datetime) else value
        return data


def create_all_tables(engine) -> None:
    """Create every table registered on ``Base``."""
    Base.metadata.create_all(bind=engine)


def drop_all_tables(engine) -> None:
    """Drop every table registered on ``Base``."""
    Base.metadata.drop_all(bind=engine)
