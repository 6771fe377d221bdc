"""Platform detection.

Identifies the host OS and, on Linux, the native package manager. Detection
only reads the environment and never raises; an unsupported OS is reported
through PlatformInfo and rejected separately by require_supported().
"""

import logging
import platform

from dotctl.core.errors import UnsupportedPlatformError
from dotctl.models.platform import Distro, OperatingSystem, PackageManagerKind, PlatformInfo
from dotctl.utils.shell import command_exists

logger = logging.getLogger(__name__)

# Probed in order; the first binary found on PATH wins.
LINUX_PACKAGE_MANAGERS: tuple[tuple[str, Distro, PackageManagerKind], ...] = (
    ("apt-get", Distro.DEBIAN, PackageManagerKind.APT),
    ("dnf", Distro.FEDORA, PackageManagerKind.DNF),
    ("pacman", Distro.ARCH, PackageManagerKind.PACMAN),
)


def detect(system: str | None = None) -> PlatformInfo:
    """Detect the host platform.

    Args:
        system: Kernel name override (as returned by ``uname -s``).
            Defaults to platform.system().

    Returns:
        PlatformInfo describing the host.
    """
    kernel = system if system is not None else platform.system()

    if kernel == "Darwin":
        info = PlatformInfo(
            os=OperatingSystem.MACOS,
            package_manager=PackageManagerKind.BREW,
            kernel=kernel,
        )
    elif kernel == "Linux":
        info = _detect_linux(kernel)
    else:
        info = PlatformInfo(os=OperatingSystem.UNSUPPORTED, kernel=kernel)

    logger.debug("Detected platform: %s", info)
    return info


def _detect_linux(kernel: str) -> PlatformInfo:
    for binary, distro, manager in LINUX_PACKAGE_MANAGERS:
        if command_exists(binary):
            return PlatformInfo(
                os=OperatingSystem.LINUX,
                distro=distro,
                package_manager=manager,
                kernel=kernel,
            )
    return PlatformInfo(os=OperatingSystem.LINUX, kernel=kernel)


def require_supported(info: PlatformInfo) -> None:
    """Reject platforms the installer cannot handle.

    Raises:
        UnsupportedPlatformError: If the OS is neither macOS nor Linux.
    """
    if not info.is_supported:
        raise UnsupportedPlatformError(info.kernel or "unknown")
