"""
Services Package
================

Business logic layer for the user directory.

Available services:
- UserService: Filters users by name, job and company
- Printer: Writes labelled result lists to a line sink
"""

from udc.services.users import UserService
from udc.services.printer import LineSink, ConsoleSink, BufferSink, Printer, format_user

__all__ = [
    "UserService",
    "LineSink",
    "ConsoleSink",
    "BufferSink",
    "Printer",
    "format_user",
]
