"""DNF package installer implementation."""

from dotctl.installers.base import LinuxPackageInstaller
from dotctl.models.platform import PackageManagerKind


class DnfInstaller(LinuxPackageInstaller):
    """Installer for Fedora systems using dnf. Requires sudo."""

    default_packages = ("git", "zsh", "curl", "neovim", "htop", "gh", "golang", "gnupg2")

    @property
    def kind(self) -> PackageManagerKind:
        """Return DNF as the package manager."""
        return PackageManagerKind.DNF

    def install_one_command(self, package: str) -> list[str]:
        return ["sudo", "dnf", "install", "-y", package]

    def install_defaults_command(self) -> list[str]:
        return ["sudo", "dnf", "install", "-y", *self.default_packages]
