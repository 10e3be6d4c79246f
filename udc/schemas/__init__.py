"""Pydantic schemas for the user directory."""

from udc.schemas.user import User

__all__ = ["User"]
