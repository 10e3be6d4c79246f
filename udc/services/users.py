"""
User service: filters the directory by name, job and company.

Matching rules:
- company is required and must equal ``user.company`` exactly
- job, when given, must equal ``user.job`` exactly
- name, when given, must be a suffix of ``user.name`` (so "Smith"
  matches "Bob Smith")

A ``None``, empty or whitespace-only name or job means "don't filter on
this field". All comparisons are case-sensitive and culture independent.
"""

import logging
from typing import List, Optional

from udc.core.exceptions import InvalidArgumentError
from udc.repositories.users import UserSource
from udc.schemas.user import User

logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class UserService:
    """
    Finds users in a user source.

    Example:
        service = UserService(get_all_users)
        smiths = service.find_user(name="Smith", company="awesome sauce inc.")
    """

    def __init__(self, user_source: UserSource):
        """
        Args:
            user_source: Zero-argument callable returning every known user
        """
        self.user_source = user_source

    def find_user(
        self,
        name: Optional[str] = None,
        job: Optional[str] = None,
        company: Optional[str] = None
    ) -> List[User]:
        """
        Filter the users matching every non-blank criterion.

        Args:
            name: Suffix the user's name must end with
            job: Exact job title
            company: Exact company name (required)

        Returns:
            Matching users, in source order

        Raises:
            InvalidArgumentError: If company is None, empty or whitespace
        """
        if _is_blank(company):
            raise InvalidArgumentError.company_required()

        match_name = not _is_blank(name)
        match_job = not _is_blank(job)

        results = [
            user for user in self.user_source()
            if (not match_name or user.name.endswith(name))
            and (not match_job or user.job == job)
            and user.company == company
        ]

        logger.debug(
            "find_user(name=%r, job=%r, company=%r) matched %d users",
            name, job, company, len(results)
        )
        return results
