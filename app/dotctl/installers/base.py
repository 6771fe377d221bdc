"""Abstract base classes for package installers.

This module defines the PackageInstaller interface implemented once per
native package manager.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from dotctl.installers.manifest import read_manifest
from dotctl.models.platform import PackageManagerKind
from dotctl.utils.formatting import print_info
from dotctl.utils.shell import CommandRunner, check_call

logger = logging.getLogger(__name__)


class PackageInstaller(ABC):
    """Abstract base class for all package installers.

    Installers read the package list for their manager from the dotfiles
    repository (or fall back to built-in defaults) and install it through a
    CommandRunner. Any failing command raises ExternalCommandError and
    aborts the run.

    Example:
        >>> installer = AptInstaller(Path("~/dotfiles"), SubprocessRunner())
        >>> installer.install()
    """

    def __init__(self, dotfiles_dir: Path, runner: CommandRunner) -> None:
        """Initialize the installer.

        Args:
            dotfiles_dir: Root of the dotfiles repository.
            runner: Runner used for every package manager invocation.
        """
        self._dotfiles_dir = dotfiles_dir
        self._runner = runner

    @property
    @abstractmethod
    def kind(self) -> PackageManagerKind:
        """Return the package manager this installer drives."""

    @abstractmethod
    def install(self) -> None:
        """Install the declared packages.

        Raises:
            ExternalCommandError: If any package manager command fails.
        """

    def _run(self, args: list[str]) -> None:
        check_call(self._runner, args)


class LinuxPackageInstaller(PackageInstaller):
    """Installer for Linux managers that take a plain text manifest.

    The manifest ``packages/<kind>.txt`` is parsed here and each package is
    installed with its own invocation, so a bad package name points at
    itself in the manager's output. Without a manifest the built-in default
    list is installed in one invocation.

    Subclasses set ``default_packages`` and build the two install commands.
    """

    default_packages: tuple[str, ...] = ()

    @property
    def manifest_path(self) -> Path:
        """Path to this manager's manifest (packages/<kind>.txt)."""
        return self._dotfiles_dir / "packages" / f"{self.kind.value}.txt"

    def install(self) -> None:
        print_info(f"Installing packages with {self.kind.value}...")
        self.prepare()

        manifest = self.manifest_path
        if manifest.is_file():
            packages = read_manifest(manifest)
            logger.info("Installing %d package(s) from %s", len(packages), manifest)
            for package in packages:
                self._run(self.install_one_command(package))
        else:
            logger.info("No manifest at %s, installing default packages", manifest)
            self._run(self.install_defaults_command())

    def prepare(self) -> None:
        """Hook run before any install (e.g. refreshing package indexes)."""

    @abstractmethod
    def install_one_command(self, package: str) -> list[str]:
        """Build the command installing a single manifest package."""

    @abstractmethod
    def install_defaults_command(self) -> list[str]:
        """Build the command installing the built-in default packages."""
