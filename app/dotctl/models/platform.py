"""Platform models.

Describes the host operating system and its native package manager as
determined once at startup.
"""

from dataclasses import dataclass
from enum import Enum


class OperatingSystem(str, Enum):
    """Host operating system family."""

    MACOS = "macos"
    LINUX = "linux"
    UNSUPPORTED = "unsupported"


class Distro(str, Enum):
    """Linux distribution family, inferred from the package manager."""

    DEBIAN = "debian"
    FEDORA = "fedora"
    ARCH = "arch"
    UNKNOWN = "unknown"


class PackageManagerKind(str, Enum):
    """Native package manager used for package installation."""

    BREW = "brew"
    APT = "apt"
    DNF = "dnf"
    PACMAN = "pacman"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class PlatformInfo:
    """Detected platform.

    Attributes:
        os: Operating system family.
        distro: Linux distribution family (UNKNOWN on macOS).
        package_manager: Native package manager (NONE if not recognized).
        kernel: Raw kernel name as reported by the OS (e.g. 'Darwin').
    """

    os: OperatingSystem
    distro: Distro = Distro.UNKNOWN
    package_manager: PackageManagerKind = PackageManagerKind.NONE
    kernel: str = ""

    def __post_init__(self) -> None:
        """Validate platform data after initialization."""
        if self.os == OperatingSystem.MACOS and self.package_manager != PackageManagerKind.BREW:
            msg = "macOS always uses Homebrew"
            raise ValueError(msg)

    @property
    def is_macos(self) -> bool:
        return self.os == OperatingSystem.MACOS

    @property
    def is_linux(self) -> bool:
        return self.os == OperatingSystem.LINUX

    @property
    def is_supported(self) -> bool:
        return self.os != OperatingSystem.UNSUPPORTED

    def summary_lines(self) -> list[str]:
        """Lines describing the platform, for help output and the banner."""
        if not self.is_supported:
            return [f"Platform: unsupported ({self.kernel or 'unknown'})"]
        lines = [f"Platform: {self.os.value}"]
        if self.is_linux:
            lines.append(f"Distro:   {self.distro.value}")
            lines.append(f"Package manager: {self.package_manager.value}")
        return lines
