"""shrun CLI context for passing state between the group and commands."""

import sys
from typing import Optional

import click

from .environment import Environment
from .models import EnvironmentSpec


class ShrunContext:
    def __init__(self):
        self.spec = EnvironmentSpec()
        self.timeout: Optional[float] = None

    def environment(self) -> Environment:
        """Build an Environment from the resolved spec.

        Sinks are looked up at call time so that test runners which swap
        sys.stdout/sys.stderr see the child's output.
        """
        return Environment.from_spec(
            self.spec, stdout=sys.stdout, stderr=sys.stderr
        )


pass_context = click.make_pass_decorator(ShrunContext, ensure=True)
