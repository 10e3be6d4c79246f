"""
User sources.

A user source is any zero-argument callable returning the full, ordered
list of directory users. Each call builds a new list of new ``User``
values, so callers may keep or discard the result freely.

Two sources ship with the package:
- ``get_all_users``: the seven built-in users
- ``DatabaseUserSource``: rows of the ``users`` table
"""

import logging
from typing import List, Protocol, Sequence

from sqlalchemy.exc import SQLAlchemyError

from udc.core.constants import UserSourceKind
from udc.core.exceptions import UserSourceError
from udc.models.user import get_all_user_records
from udc.schemas.user import User

logger = logging.getLogger(__name__)


class UserSource(Protocol):
    """Supplies every known user, in directory order."""

    def __call__(self) -> Sequence[User]:
        ...


def get_all_users() -> List[User]:
    """
    Get the built-in list of users.

    Returns:
        A new list of the seven built-in users, ordered by id
    """
    return [
        User(id=1, name="Bob Smith", job="developer", company="awesome sauce inc."),
        User(id=2, name="Barb Tillo", job="developer", company="awesome sauce inc."),
        User(id=3, name="May Axix", job="product owner", company="pandance"),
        User(id=4, name="Jane Heartily", job="developer", company="awesome sauce inc."),
        User(id=5, name="Jim Kronn", job="developer", company="pandance"),
        User(id=6, name="Kelly Cruther", job="developer", company="pandance"),
        User(id=7, name="Mark Smith", job="product owner", company="awesome sauce inc."),
    ]


class DatabaseUserSource:
    """
    Reads the directory from the ``users`` table.

    Every call opens its own session, copies the rows into ``User``
    values and closes the session again.

    Example:
        source = DatabaseUserSource()
        users = source()
    """

    def __init__(self, session_factory=None):
        """
        Args:
            session_factory: Zero-argument callable returning a session
                context manager. Defaults to ``udc.database.get_db_context``.
        """
        if session_factory is None:
            from udc.database.session import get_db_context
            session_factory = get_db_context
        self.session_factory = session_factory

    def __call__(self) -> List[User]:
        try:
            with self.session_factory() as db:
                users = [record.to_user() for record in get_all_user_records(db)]
        except SQLAlchemyError as exc:
            raise UserSourceError(f"Could not read users from the database: {exc}") from exc

        logger.debug("Loaded %d users from the database", len(users))
        return users


def get_user_source(kind, session_factory=None) -> UserSource:
    """
    Resolve a source kind into a user source.

    Args:
        kind: A ``UserSourceKind`` or its string value
        session_factory: Session context factory for the database source

    Raises:
        UserSourceError: If ``kind`` names no known source
    """
    try:
        kind = UserSourceKind(kind)
    except ValueError:
        raise UserSourceError(f"Unknown user source: {kind!r}") from None

    if kind is UserSourceKind.DATABASE:
        return DatabaseUserSource(session_factory)
    return get_all_users
