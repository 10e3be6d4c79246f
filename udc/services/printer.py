"""
Result printing.

The ``Printer`` formats user lists and hands each line to a ``LineSink``.
``ConsoleSink`` writes to stdout; ``BufferSink`` keeps the lines in
memory.
"""

import sys
from typing import Iterable, List, Optional, Protocol, TextIO

from udc.core.constants import RESULTS_HEADER_FORMAT, USER_LINE_FORMAT
from udc.schemas.user import User


class LineSink(Protocol):
    """Receives output one line at a time."""

    def write_line(self, text: Optional[str] = None) -> None:
        """Write ``text`` followed by a line terminator. ``None`` writes an empty line."""
        ...


class ConsoleSink:
    """Writes lines to a text stream, stdout by default."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def write_line(self, text: Optional[str] = None) -> None:
        # Resolved per call so pytest's capsys and redirect_stdout see the output.
        stream = self._stream or sys.stdout
        stream.write((text or "") + "\n")


class BufferSink:
    """Collects lines in memory."""

    def __init__(self):
        self.lines: List[str] = []

    def write_line(self, text: Optional[str] = None) -> None:
        self.lines.append(text or "")

    def getvalue(self) -> str:
        return "".join(line + "\n" for line in self.lines)

    def __str__(self) -> str:
        return self.getvalue()


def format_user(user: User) -> str:
    """
    Format one user as a result line.

    Example output:
        "ID: 1, Name: Bob Smith, Job: developer, Company: awesome sauce inc."
    """
    return USER_LINE_FORMAT.format(id=user.id, name=user.name, job=user.job, company=user.company)


class Printer:
    """Prints labelled user lists."""

    def __init__(self, sink: Optional[LineSink] = None):
        self.sink = sink if sink is not None else ConsoleSink()

    def print_results(self, message: str, results: Iterable[User]) -> None:
        """
        Print a blank line, a ``Results: <message>`` header, then one line per user.

        Args:
            message: Banner describing the result set
            results: Users to print, in order
        """
        self.sink.write_line()
        self.sink.write_line(RESULTS_HEADER_FORMAT.format(message=message))
        for user in results:
            self.sink.write_line(format_user(user))
