"""Output command - execute a script, capture stdout, then print it."""

import sys

import click

from ...context import pass_context
from ...errors import ShellError
from ..helpers import exit_code_for


@click.command(context_settings=dict(ignore_unknown_options=True))
@click.argument("script")
@click.argument("args", nargs=-1)
@pass_context
def output(ctx, script, args):
    """Run SCRIPT and print its captured stdout once it exits.

    Remaining arguments are KEY VALUE pairs exported to the script.
    Nothing is printed to stdout if the script fails.
    """
    try:
        data = ctx.environment().output(script, *args, timeout=ctx.timeout)
    except ShellError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(exit_code_for(e))

    click.echo(data, nl=False)
