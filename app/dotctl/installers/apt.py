"""APT package installer implementation."""

from dotctl.installers.base import LinuxPackageInstaller
from dotctl.models.platform import PackageManagerKind


class AptInstaller(LinuxPackageInstaller):
    """Installer for Debian/Ubuntu systems using apt-get.

    Refreshes the package index before installing. Requires sudo.
    """

    default_packages = ("git", "zsh", "curl", "neovim", "htop", "gh", "golang-go", "gnupg")

    @property
    def kind(self) -> PackageManagerKind:
        """Return APT as the package manager."""
        return PackageManagerKind.APT

    def prepare(self) -> None:
        self._run(["sudo", "apt-get", "update"])

    def install_one_command(self, package: str) -> list[str]:
        return ["sudo", "apt-get", "install", "-y", package]

    def install_defaults_command(self) -> list[str]:
        return ["sudo", "apt-get", "install", "-y", *self.default_packages]
