"""Environment: runs scripts through a shell with extra env vars.

Extra arguments passed to ``run``/``output`` never reach the shell's argv;
they become environment variables of the child process::

    env = Environment(Bash(), stdout=sys.stdout)
    env.run("echo hello $WHO", "WHO", "world")
"""

from __future__ import annotations

import io
import logging
import os
import subprocess
from contextlib import contextmanager
from typing import IO, Any, Dict, Iterator, List, Mapping, Optional, Tuple

from .args import normalize_args
from .errors import ProcessExecutionError, describe_returncode
from .models import EnvironmentSpec, Invocation
from .shells import Shell, get_shell

LOGGER = logging.getLogger(__name__)


def _redirect(sink: Any, *, missing: int) -> Tuple[Any, Optional[Any]]:
    """Pick the subprocess stream argument for a sink.

    Returns ``(stream, pending)``: ``pending`` is the sink that must receive
    captured bytes once the child exits, or None when the child writes to
    the stream itself.
    """
    if sink is None:
        return missing, None
    try:
        sink.fileno()
    except (AttributeError, OSError, ValueError):
        return subprocess.PIPE, sink

    # Flush buffered writes so they land before the child's output
    flush = getattr(sink, "flush", None)
    if flush is not None:
        flush()
    return sink, None


def _deliver(sink: Optional[Any], data: Optional[bytes]) -> None:
    """Write captured output to a sink that has no file descriptor."""
    if sink is None or not data:
        return
    if isinstance(sink, io.TextIOBase):
        encoding = getattr(sink, "encoding", None) or "utf-8"
        sink.write(data.decode(encoding, errors="replace"))
    else:
        sink.write(data)


class Environment:
    """Shell, output sinks, extra variables, and working directory.

    An Environment keeps a scratch argument buffer that every call reuses,
    so a single instance must not be used from several threads at once.
    """

    def __init__(
        self,
        shell: Shell,
        *,
        stdout: Optional[IO[Any]] = None,
        stderr: Optional[IO[Any]] = None,
        env: Optional[Mapping[str, str]] = None,
        working_dir: Optional[str] = None,
    ):
        """Create an environment.

        Args:
            shell: Interpreter used for every script
            stdout: Sink for child stdout (discarded when None)
            stderr: Sink for child stderr (discarded when None)
            env: Extra variables added on top of os.environ
            working_dir: Directory to run in (inherit when empty)
        """
        self.shell = shell
        self.stdout = stdout
        self.stderr = stderr
        self.env: Dict[str, str] = dict(env or {})
        self.working_dir = working_dir

        self._arg_buffer: List[str] = []

    @classmethod
    def from_spec(cls, spec: EnvironmentSpec, **kwargs: Any) -> "Environment":
        """Build an environment from a config model; kwargs set the sinks."""
        return cls(
            get_shell(spec.shell),
            env=spec.env,
            working_dir=spec.working_dir,
            **kwargs,
        )

    def __repr__(self) -> str:
        return (
            f"Environment(shell={self.shell!r}, env={self.env!r}, "
            f"working_dir={self.working_dir!r})"
        )

    @contextmanager
    def _scratch(self) -> Iterator[List[str]]:
        self._arg_buffer.clear()
        try:
            yield self._arg_buffer
        finally:
            self._arg_buffer.clear()

    def command(self, script: str, *args: Any) -> Invocation:
        """Build the invocation for ``script`` without running it.

        The argument vector is ``prefix + [script] + suffix`` of the shell.
        The environment vector is os.environ, then the configured extra
        variables, then ``args`` paired up as KEY=VALUE entries.

        Raises:
            InvalidArgumentCount: ``args`` ends with an unpaired key
        """
        with self._scratch() as buffer:
            buffer.extend(self.shell.prefix())
            buffer.append(script)
            suffix = self.shell.suffix()
            if suffix:
                buffer.extend(suffix)

            envs = [key + "=" + value for key, value in os.environ.items()]
            if self.env:
                envs.extend(key + "=" + value for key, value in self.env.items())
            envs.extend(str(arg) for arg in normalize_args(args))

            invocation = Invocation(
                name=self.shell.name,
                args=list(buffer),
                env=envs,
                cwd=self.working_dir or None,
                stdout=self.stdout,
                stderr=self.stderr,
            )

        LOGGER.debug(
            "Built invocation: %s (cwd=%s, %d env entries)",
            invocation.argv,
            invocation.cwd,
            len(invocation.env),
        )
        return invocation

    def run(
        self, script: str, *args: Any, timeout: Optional[float] = None
    ) -> None:
        """Run ``script`` to completion.

        Child output goes to the configured sinks. A non-zero exit, a
        signal, a spawn failure or a timeout raises ProcessExecutionError.
        """
        with self._scratch():
            invocation = self.command(script, *args)
            self._execute(invocation, capture=False, timeout=timeout)

    def output(
        self, script: str, *args: Any, timeout: Optional[float] = None
    ) -> bytes:
        """Run ``script`` and return its stdout.

        stderr still goes to the configured sink. Without one it is captured
        and attached to the ProcessExecutionError raised on failure.
        """
        with self._scratch():
            invocation = self.command(script, *args)
            return self._execute(invocation, capture=True, timeout=timeout)

    def _execute(
        self,
        invocation: Invocation,
        *,
        capture: bool,
        timeout: Optional[float],
    ) -> bytes:
        argv = invocation.argv
        if capture:
            stdout, stdout_pending = subprocess.PIPE, None
        else:
            stdout, stdout_pending = _redirect(
                invocation.stdout, missing=subprocess.DEVNULL
            )
        stderr, stderr_pending = _redirect(
            invocation.stderr,
            missing=subprocess.PIPE if capture else subprocess.DEVNULL,
        )
        attach_stderr = capture and invocation.stderr is None

        try:
            result = subprocess.run(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=stdout,
                stderr=stderr,
                env=invocation.environ(),
                cwd=invocation.cwd,
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise ProcessExecutionError(
                f"timed out after {timeout}s",
                argv=argv,
                stderr=exc.stderr if attach_stderr else None,
                timed_out=True,
            ) from exc
        except OSError as exc:
            raise ProcessExecutionError(str(exc), argv=argv) from exc

        _deliver(stdout_pending, result.stdout)
        _deliver(stderr_pending, result.stderr)
        LOGGER.debug("%s exited with %d", invocation.name, result.returncode)

        try:
            result.check_returncode()
        except subprocess.CalledProcessError as exc:
            raise ProcessExecutionError(
                describe_returncode(result.returncode),
                argv=argv,
                returncode=result.returncode,
                stderr=result.stderr if attach_stderr else None,
            ) from exc

        return result.stdout if capture else b""


__all__ = ["Environment"]
