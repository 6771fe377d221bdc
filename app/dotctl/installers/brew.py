"""Homebrew package installer implementation."""

import logging
from pathlib import Path

from dotctl.installers.base import PackageInstaller
from dotctl.models.platform import PackageManagerKind
from dotctl.utils.formatting import print_info
from dotctl.utils.shell import CommandRunner

logger = logging.getLogger(__name__)

# Bundle files at the dotfiles root, installed in this order when present.
BREWFILES: tuple[str, ...] = ("Brewfile", "Brewfile.macos")


class BrewInstaller(PackageInstaller):
    """Installer for macOS using Homebrew.

    Brewfiles are handed to ``brew bundle`` unparsed; Homebrew reads them
    itself. Without any Brewfile the default package list is installed.
    """

    default_packages = ("git", "zsh", "curl", "neovim", "htop", "gh", "go", "gnupg")

    def __init__(self, dotfiles_dir: Path, runner: CommandRunner, brew: str = "brew") -> None:
        """Initialize the installer.

        Args:
            dotfiles_dir: Root of the dotfiles repository.
            runner: Runner used for brew invocations.
            brew: brew executable; a full path right after bootstrapping,
                when brew is not yet on PATH.
        """
        super().__init__(dotfiles_dir, runner)
        self._brew = brew

    @property
    def kind(self) -> PackageManagerKind:
        """Return Homebrew as the package manager."""
        return PackageManagerKind.BREW

    def brewfiles(self) -> list[Path]:
        """Bundle files present in the dotfiles repository."""
        return [path for name in BREWFILES if (path := self._dotfiles_dir / name).is_file()]

    def install(self) -> None:
        brewfiles = self.brewfiles()
        if not brewfiles:
            print_info("No Brewfile found, installing default packages with brew...")
            self._run([self._brew, "install", *self.default_packages])
            return

        for brewfile in brewfiles:
            print_info(f"Installing packages from {brewfile.name}...")
            self._run([self._brew, "bundle", f"--file={brewfile}"])
