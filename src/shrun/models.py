"""Pydantic models for invocations and environment configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class Invocation(BaseModel):
    """Fully specified child process: what to run, with which environment."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    args: List[str] = Field(default_factory=list)
    env: List[str] = Field(default_factory=list)
    cwd: str | None = None
    stdout: Any = None
    stderr: Any = None

    @property
    def argv(self) -> List[str]:
        return [self.name, *self.args]

    def environ(self) -> Dict[str, str]:
        """Fold the environment vector into a mapping.

        Entries are split on the first ``=``; a later entry for the same key
        replaces an earlier one.
        """
        environ: Dict[str, str] = {}
        for entry in self.env:
            key, _, value = entry.partition("=")
            environ[key] = value
        return environ


class EnvironmentSpec(BaseModel):
    """Serializable configuration for an Environment."""

    shell: str = "bash"
    env: Dict[str, str] = Field(default_factory=dict)
    working_dir: str | None = None

    @classmethod
    def load(cls, path: Path | str) -> "EnvironmentSpec":
        """Load and validate a JSON config file."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.model_validate(data)


__all__ = ["EnvironmentSpec", "Invocation"]
