"""
UserRecord model: the persisted form of a directory user.

Rows are never handed out directly; ``to_user()`` copies a row into a
fresh, immutable ``User`` so callers never share ORM state.
"""

from typing import List

from sqlalchemy import Integer, String, Index
from sqlalchemy.orm import Mapped, mapped_column

from udc.models.base import Base, TimestampedRecord
from udc.schemas.user import User


class UserRecord(TimestampedRecord, Base):
    """
    A user row.

    Attributes:
        id: Primary key, doubles as the user's directory id
        name: Full display name
        job: Job or title
        company: Employer
        created_at: When the row was inserted (from TimestampedRecord)
        updated_at: When the row was last modified (from TimestampedRecord)

    Example:
        record = UserRecord(id=1, name="Bob Smith", job="developer", company="awesome sauce inc.")
        db.add(record)
        db.commit()
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=False,
        comment="Directory user id"
    )

    name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        comment="Full display name"
    )

    job: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        default="",
        comment="Job or title at the company"
    )

    company: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        index=True,
        comment="Company the user works at"
    )

    __table_args__ = (
        Index("ix_users_company_job", "company", "job"),
        {"comment": "User directory"}
    )

    def __init__(self, **kwargs):
        """
        Initialize a UserRecord with validation.

        Raises:
            ValueError: If name or company is blank
        """
        super().__init__(**kwargs)

        if not self.name or not self.name.strip():
            raise ValueError("User name cannot be empty")
        if not self.company or not self.company.strip():
            raise ValueError("User company cannot be empty")

    def to_user(self) -> User:
        """Copy this row into a new ``User``."""
        data = self.to_dict(timestamps=False)
        data["job"] = data["job"] or ""
        return User.model_validate(data)

    @classmethod
    def from_user(cls, user: User) -> "UserRecord":
        return cls(id=user.id, name=user.name, job=user.job, company=user.company)

    def __repr__(self) -> str:
        return (
            f"<UserRecord(id={self.id}, name='{self.name}', "
            f"job='{self.job}', company='{self.company}')>"
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.job} @ {self.company})"


def get_all_user_records(db) -> List[UserRecord]:
    """
    Get every user row in id order.

    Args:
        db: Database session

    Returns:
        List of UserRecord instances, lowest id first
    """
    return db.query(UserRecord).order_by(UserRecord.id).all()


def count_user_records(db) -> int:
    return db.query(UserRecord).count()
