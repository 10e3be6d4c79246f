"""
Pydantic model for a user record.

A ``User`` is a plain, immutable value: once built it can't be changed,
and two users with the same fields compare equal.
"""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    A single entry in the user directory.

    Attributes:
        id: Numeric user identifier
        name: Full display name (e.g. "Bob Smith")
        job: Job or title the user holds at the company
        company: The company at which the user works

    Example:
        user = User(id=1, name="Bob Smith", job="developer", company="awesome sauce inc.")
        user.name.endswith("Smith")  # True
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Bob Smith"])
    job: str = Field(..., examples=["developer"])
    company: str = Field(..., examples=["awesome sauce inc."])
