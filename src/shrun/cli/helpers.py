"""Shared helpers for CLI commands."""

from ..errors import ProcessExecutionError, ShellError


def exit_code_for(error: ShellError) -> int:
    """Exit code to report for a failed script: the child's, else 1."""
    if isinstance(error, ProcessExecutionError) and error.returncode:
        if error.returncode > 0:
            return error.returncode
    return 1
