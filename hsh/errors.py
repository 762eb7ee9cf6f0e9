"""Formatting of the shell's error messages."""

from __future__ import annotations

from typing import TextIO


def _count_text(count: int) -> str:
    return str(count) if count else ""


def format_error(
    program: str, count: int, command: str, message: str | OSError
) -> str:
    """Build "program: count: command" followed by *message*.

    An OSError stands for a system error and is rendered as ": reason\\n".
    """
    if isinstance(message, OSError):
        reason = message.strerror or str(message)
        message = f": {reason}\n"
    return f"{program}: {_count_text(count)}: {command}{message}"


def write_error(
    stream: TextIO, program: str, count: int, command: str, message: str | OSError
) -> None:
    """Write a formatted error message to *stream* and flush it."""
    stream.write(format_error(program, count, command, message))
    stream.flush()