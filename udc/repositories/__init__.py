"""
Data access layer (Repository pattern).

Repositories supply the user directory, isolating the filter service
from where the users are stored.
"""

from udc.repositories.users import UserSource, DatabaseUserSource, get_all_users, get_user_source

__all__ = [
    "UserSource",
    "DatabaseUserSource",
    "get_all_users",
    "get_user_source",
]
