"""Exceptions raised by the user directory."""

from udc.core.constants import COMPANY_PARAM, COMPANY_REQUIRED_MESSAGE


class UserDirectoryError(Exception):
    """Base class for all user directory errors."""


class InvalidArgumentError(UserDirectoryError, ValueError):
    """
    A required argument is missing or blank.

    Attributes:
        param_name: Name of the offending parameter (e.g. "company")

    Example:
        err = InvalidArgumentError("Company name is required.", "company")
        str(err)  # "Company name is required. (Parameter 'company')"
    """

    def __init__(self, message: str, param_name: str):
        self.param_name = param_name
        super().__init__(f"{message} (Parameter '{param_name}')")

    @classmethod
    def company_required(cls) -> "InvalidArgumentError":
        return cls(COMPANY_REQUIRED_MESSAGE, COMPANY_PARAM)


class UserSourceError(UserDirectoryError):
    """The configured user source cannot be built or read."""
