"""Pytest configuration and shared fixtures."""

import shutil

import pytest
from click.testing import CliRunner

import shrun.default
from shrun.cli import cli
from shrun.shells import Bash, Sh


@pytest.fixture(autouse=True)
def restore_default_environment():
    """Reinstall the original default environment after each test.

    set_default_environment swaps process-wide state, so a test that
    replaces it would otherwise leak its shell into every later test.
    """
    original = shrun.default.default_environment()
    yield
    shrun.default.set_default_environment(original)


@pytest.fixture(params=[Bash, Sh], ids=["bash", "sh"])
def shell(request):
    """Each built-in shell, skipped when its executable is missing."""
    instance = request.param()
    if shutil.which(instance.name) is None:
        pytest.skip(f"{instance.name} not installed")
    return instance


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional env.

    Usage:
        result = invoke(["run", "echo $X", "X", "v"])
        result = invoke(["output", "pwd"], env={"SHRUN_SHELL": "sh"})
    """

    def _invoke(args, env=None):
        return cli_runner.invoke(cli, args, env=env)

    return _invoke
