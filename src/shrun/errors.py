"""Exceptions raised by shrun."""

from __future__ import annotations

import signal
from typing import Optional, Sequence


class ShellError(Exception):
    """Base class for all shrun errors."""

    pass


class InvalidArgumentCount(ShellError, ValueError):
    """A plain key was passed without a matching value."""

    def __init__(self, message: str = "invalid number of arguments"):
        super().__init__(message)


class ProcessExecutionError(ShellError):
    """The shell process failed to start, exited non-zero, or timed out."""

    def __init__(
        self,
        message: str,
        *,
        argv: Sequence[str],
        returncode: Optional[int] = None,
        stderr: Optional[bytes] = None,
        timed_out: bool = False,
    ):
        super().__init__(message)
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        self.timed_out = timed_out


def describe_returncode(returncode: int) -> str:
    """Render a return code the way a shell user would read it."""
    if returncode < 0:
        try:
            return f"signal: {signal.Signals(-returncode).name}"
        except ValueError:
            return f"signal: {-returncode}"
    return f"exit status {returncode}"


__all__ = [
    "InvalidArgumentCount",
    "ProcessExecutionError",
    "ShellError",
    "describe_returncode",
]
