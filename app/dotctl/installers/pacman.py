"""Pacman package installer implementation."""

from dotctl.installers.base import LinuxPackageInstaller
from dotctl.models.platform import PackageManagerKind


class PacmanInstaller(LinuxPackageInstaller):
    """Installer for Arch systems using pacman. Requires sudo.

    The default install also upgrades the system (``-Syu``) since Arch
    does not support partial upgrades.
    """

    default_packages = ("git", "zsh", "curl", "neovim", "htop", "github-cli", "go", "gnupg")

    @property
    def kind(self) -> PackageManagerKind:
        """Return pacman as the package manager."""
        return PackageManagerKind.PACMAN

    def install_one_command(self, package: str) -> list[str]:
        return ["sudo", "pacman", "-S", "--noconfirm", package]

    def install_defaults_command(self) -> list[str]:
        return ["sudo", "pacman", "-Syu", "--noconfirm", *self.default_packages]
