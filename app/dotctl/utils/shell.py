"""Shell execution utilities.

Provides subprocess execution helpers and the command runner abstraction
used by every stage that shells out to an external installer.
"""

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass, field
from typing import Protocol

from dotctl.core.errors import ExternalCommandError

logger = logging.getLogger(__name__)


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None


def run_interactive(
    args: list[str],
    *,
    cwd: str | None = None,
    env: dict[str, str] | None = None,
) -> int:
    """Execute a command interactively, inheriting the terminal.

    Output is NOT captured, so the installer's own progress and
    diagnostics reach the user unchanged (sudo password prompts included).

    Args:
        args: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Additional environment variables (merged with current env).

    Returns:
        Exit code of the command.

    Raises:
        FileNotFoundError: If command executable is not found.
        OSError: If command cannot be executed.
    """
    full_env = {**os.environ, **(env or {})}
    result = subprocess.run(
        args,
        check=False,
        cwd=cwd,
        env=full_env,
    )
    return result.returncode


class CommandRunner(Protocol):
    """Narrow interface for running an external command.

    Implementations return the command's exit status and never raise on a
    non-zero status; turning failures into errors is up to the caller
    (see :func:`check_call`).
    """

    def run(self, args: list[str], *, env: dict[str, str] | None = None) -> int: ...


class SubprocessRunner:
    """Runs commands for real, attached to the user's terminal."""

    def run(self, args: list[str], *, env: dict[str, str] | None = None) -> int:
        logger.debug("Running: %s", " ".join(args))
        return run_interactive(args, env=env)


@dataclass
class DryRunRunner:
    """Records commands without executing them.

    Attributes:
        commands: Every command that would have been executed, in order.
    """

    commands: list[list[str]] = field(default_factory=list)

    def run(self, args: list[str], *, env: dict[str, str] | None = None) -> int:
        logger.info("Dry-run: would run %s", " ".join(args))
        self.commands.append(list(args))
        return 0


def check_call(
    runner: CommandRunner,
    args: list[str],
    *,
    env: dict[str, str] | None = None,
) -> None:
    """Run a command and raise if it exits non-zero.

    Args:
        runner: Runner used to execute the command.
        args: Command and arguments.
        env: Additional environment variables.

    Raises:
        ExternalCommandError: If the command returns a non-zero status.
    """
    returncode = runner.run(args, env=env)
    if returncode != 0:
        raise ExternalCommandError(args, returncode)


def shell_pipeline(script: str) -> list[str]:
    """Wrap a shell snippet (e.g. ``curl ... | bash``) as a command.

    Args:
        script: Shell snippet to run under ``/bin/bash -c``.

    Returns:
        Argument list suitable for a CommandRunner.
    """
    return ["/bin/bash", "-c", script]
