"""shrun: run shell scripts with injected environment variables."""

from .args import Arg, normalize_args
from .default import default_environment, output, run, set_default_environment
from .environment import Environment
from .errors import InvalidArgumentCount, ProcessExecutionError, ShellError
from .models import EnvironmentSpec, Invocation
from .shells import Bash, Sh, Shell, ShellSpec, get_shell

__all__ = [
    "__version__",
    "Arg",
    "Bash",
    "Environment",
    "EnvironmentSpec",
    "InvalidArgumentCount",
    "Invocation",
    "ProcessExecutionError",
    "Sh",
    "Shell",
    "ShellError",
    "ShellSpec",
    "default_environment",
    "get_shell",
    "normalize_args",
    "output",
    "run",
    "set_default_environment",
]

__version__ = "0.1.0"
