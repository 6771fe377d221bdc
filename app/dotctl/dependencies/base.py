"""Idempotent dependency installation.

A dependency is considered present when its marker path exists; only
missing dependencies trigger their external installer.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from dotctl.utils.formatting import print_info
from dotctl.utils.shell import CommandRunner, check_call

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Dependency:
    """A tool installed outside the package manager.

    Attributes:
        name: Human-readable name (e.g. 'Oh My Zsh').
        marker: Path whose existence means the tool is already installed.
        command: External installer to run when the marker is missing.
    """

    name: str
    marker: Path
    command: list[str]

    def __post_init__(self) -> None:
        """Validate dependency data after initialization."""
        if not self.name:
            msg = "Dependency name cannot be empty"
            raise ValueError(msg)
        if not self.command:
            msg = f"Dependency {self.name} has no install command"
            raise ValueError(msg)

    @property
    def is_installed(self) -> bool:
        return self.marker.exists()


def ensure(dependency: Dependency, runner: CommandRunner) -> bool:
    """Install a dependency unless it is already present.

    Args:
        dependency: The dependency to check.
        runner: Runner for the external installer.

    Returns:
        True if the installer ran, False if the dependency was already present.

    Raises:
        ExternalCommandError: If the installer exits non-zero.
    """
    if dependency.is_installed:
        print_info(f"{dependency.name} already installed")
        logger.debug("Skipping %s, found %s", dependency.name, dependency.marker)
        return False

    print_info(f"Installing {dependency.name}...")
    check_call(runner, dependency.command)
    return True
