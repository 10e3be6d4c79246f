"""
Application-wide constants.

Output formats, error messages and the demo queries live here so the
services, the CLI and the tests agree on one definition.
"""

from enum import Enum


# ========================================
# User Sources
# ========================================

class UserSourceKind(str, Enum):
    """
    Where the user directory is read from.

    Usage:
        kind = UserSourceKind("database")
        print(kind == "database")  # True
    """

    STATIC = "static"
    """The seven built-in users, rebuilt on every call."""

    DATABASE = "database"
    """Rows of the ``users`` table, read through SQLAlchemy."""


# ========================================
# Printer Formats
# ========================================

RESULTS_HEADER_FORMAT = "Results: {message}"
USER_LINE_FORMAT = "ID: {id}, Name: {name}, Job: {job}, Company: {company}"

# ========================================
# Error Messages
# ========================================

COMPANY_PARAM = "company"
COMPANY_REQUIRED_MESSAGE = "Company name is required."

# ========================================
# Demo Queries
# ========================================

# (message, name, job, company)
DEMO_QUERIES = (
    ("Developers at Awesome Sauce Inc.", None, "developer", "awesome sauce inc."),
    ("People at Pandance", None, None, "pandance"),
    (
        "Developers With Last Name of Smith Who Work at Awesome Sauce Inc.",
        "Smith",
        "developer",
        "awesome sauce inc.",
    ),
)

SELF_TEST_COMMAND = "test"
