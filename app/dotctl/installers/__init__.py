"""Package installers for the supported native package managers.

Use :func:`get_installer` to obtain the installer matching the detected
platform.
"""

from pathlib import Path

from dotctl.installers.apt import AptInstaller
from dotctl.installers.base import LinuxPackageInstaller, PackageInstaller
from dotctl.installers.brew import BrewInstaller
from dotctl.installers.dnf import DnfInstaller
from dotctl.installers.manifest import filter_package_names, read_manifest
from dotctl.installers.pacman import PacmanInstaller
from dotctl.models.platform import PackageManagerKind, PlatformInfo
from dotctl.utils.shell import CommandRunner

_LINUX_INSTALLERS: dict[PackageManagerKind, type[LinuxPackageInstaller]] = {
    PackageManagerKind.APT: AptInstaller,
    PackageManagerKind.DNF: DnfInstaller,
    PackageManagerKind.PACMAN: PacmanInstaller,
}


def get_installer(
    platform: PlatformInfo,
    dotfiles_dir: Path,
    runner: CommandRunner,
    *,
    brew: str = "brew",
) -> PackageInstaller | None:
    """Get the package installer for a platform.

    Args:
        platform: Detected platform.
        dotfiles_dir: Root of the dotfiles repository.
        runner: Runner for package manager invocations.
        brew: brew executable to use on macOS.

    Returns:
        The matching installer, or None if the package manager is unknown.
    """
    if platform.package_manager == PackageManagerKind.BREW:
        return BrewInstaller(dotfiles_dir, runner, brew=brew)

    installer_cls = _LINUX_INSTALLERS.get(platform.package_manager)
    if installer_cls is None:
        return None
    return installer_cls(dotfiles_dir, runner)


__all__ = [
    "AptInstaller",
    "BrewInstaller",
    "DnfInstaller",
    "LinuxPackageInstaller",
    "PackageInstaller",
    "PacmanInstaller",
    "filter_package_names",
    "get_installer",
    "read_manifest",
]
