"""Shell descriptors: how to hand a script to an interpreter.

A shell is anything with a ``name`` and ``prefix()``/``suffix()`` argument
lists. The command line becomes ``<name> <prefix...> <script> <suffix...>``,
e.g. ``bash -c "<script>"``.
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator


@runtime_checkable
class Shell(Protocol):
    """Capability describing how to invoke an interpreter."""

    @property
    def name(self) -> str: ...

    def prefix(self) -> List[str]: ...

    def suffix(self) -> List[str]: ...


class Bash:
    """GNU bash, invoked as ``bash -c <script>``."""

    @property
    def name(self) -> str:
        return "bash"

    def prefix(self) -> List[str]:
        return ["-c"]

    def suffix(self) -> List[str]:
        return []

    def __repr__(self) -> str:
        return "Bash()"


class Sh:
    """POSIX sh, invoked as ``sh -c <script>``."""

    @property
    def name(self) -> str:
        return "sh"

    def prefix(self) -> List[str]:
        return ["-c"]

    def suffix(self) -> List[str]:
        return []

    def __repr__(self) -> str:
        return "Sh()"


class ShellSpec(BaseModel):
    """Shell described by data, for interpreters without a built-in class."""

    model_config = ConfigDict(frozen=True)

    name: str
    prefix_args: List[str] = Field(default_factory=lambda: ["-c"])
    suffix_args: List[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Shell name cannot be empty")
        return v

    def prefix(self) -> List[str]:
        return list(self.prefix_args)

    def suffix(self) -> List[str]:
        return list(self.suffix_args)


_BUILTIN = {
    "bash": Bash,
    "sh": Sh,
}


def get_shell(name: str) -> Shell:
    """Resolve a shell by executable name.

    Known names return their built-in descriptor; anything else is assumed
    to accept ``-c <script>`` like bash and sh do.
    """
    builtin = _BUILTIN.get(name)
    if builtin is not None:
        return builtin()
    return ShellSpec(name=name)


__all__ = ["Bash", "Sh", "Shell", "ShellSpec", "get_shell"]
