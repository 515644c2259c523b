"""shrun CLI main entry point with global options."""

import logging
import sys

import click

from ..context import ShrunContext
from ..models import EnvironmentSpec


def _parse_env(values) -> dict:
    env = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(
                f"expected KEY=VALUE, got {item!r}", param_hint="--env"
            )
        env[key] = value
    return env


@click.group()
@click.option(
    "--shell",
    envvar="SHRUN_SHELL",
    help="Shell executable (default: bash, or $SHRUN_SHELL)",
)
@click.option(
    "--config",
    "config_path",
    envvar="SHRUN_CONFIG",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON environment config (overrides $SHRUN_CONFIG)",
)
@click.option("--cwd", type=click.Path(file_okay=False), help="Working directory")
@click.option(
    "--env", "env_items", multiple=True, help="Extra variable as KEY=VALUE"
)
@click.option("--timeout", type=float, help="Kill the script after N seconds")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx, shell, config_path, cwd, env_items, timeout, verbose):
    """shrun - run shell scripts with injected environment variables."""
    ctx.ensure_object(ShrunContext)

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s",
            stream=sys.stderr,
        )

    spec = EnvironmentSpec()
    if config_path:
        try:
            spec = EnvironmentSpec.load(config_path)
        except (OSError, ValueError) as e:
            click.echo(f"Error: invalid config {config_path}: {e}", err=True)
            sys.exit(1)

    updates = {}
    if shell:
        updates["shell"] = shell
    if cwd:
        updates["working_dir"] = cwd
    if env_items:
        updates["env"] = {**spec.env, **_parse_env(env_items)}

    ctx.obj.spec = spec.model_copy(update=updates)
    ctx.obj.timeout = timeout


# Register commands at module level so tests can import cli with commands attached
from .commands.output import output
from .commands.run import run

cli.add_command(run)
cli.add_command(output)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
