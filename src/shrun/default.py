"""Process-wide default Environment and the free functions bound to it."""

from __future__ import annotations

from typing import Any, Optional

from .environment import Environment
from .shells import Bash

_DEFAULT: Environment = Environment(Bash())


def default_environment() -> Environment:
    """Return the currently installed default environment."""

    return _DEFAULT


def set_default_environment(env: Environment) -> None:
    """Replace the default environment used by ``run`` and ``output``.

    Not synchronized: install it at startup, before other threads call in.
    """

    global _DEFAULT
    _DEFAULT = env


def run(script: str, *args: Any, timeout: Optional[float] = None) -> None:
    """Run ``script`` in the default environment."""

    _DEFAULT.run(script, *args, timeout=timeout)


def output(script: str, *args: Any, timeout: Optional[float] = None) -> bytes:
    """Run ``script`` in the default environment and return its stdout."""

    return _DEFAULT.output(script, *args, timeout=timeout)


__all__ = ["default_environment", "output", "run", "set_default_environment"]
