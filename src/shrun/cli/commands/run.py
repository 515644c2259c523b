"""Run command - execute a script, child output passes through."""

import sys

import click

from ...context import pass_context
from ...errors import ShellError
from ..helpers import exit_code_for


@click.command(context_settings=dict(ignore_unknown_options=True))
@click.argument("script")
@click.argument("args", nargs=-1)
@pass_context
def run(ctx, script, args):
    """Run SCRIPT through the configured shell.

    Remaining arguments are KEY VALUE pairs exported to the script.

    Examples:
        shrun run 'echo hello $WHO' WHO world
        shrun --shell sh run 'ls -l'
        shrun --cwd /tmp run pwd
    """
    try:
        ctx.environment().run(script, *args, timeout=ctx.timeout)
    except ShellError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(exit_code_for(e))
