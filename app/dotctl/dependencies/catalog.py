"""The dependencies bootstrapped by dotctl.

Builds Dependency objects for Oh My Zsh, its plugins, and NVM from the run
configuration, and handles the Homebrew bootstrap on macOS.
"""

import logging
import shutil
from pathlib import Path

from dotctl.core.config import InstallConfig
from dotctl.dependencies.base import Dependency
from dotctl.utils.formatting import print_info
from dotctl.utils.shell import CommandRunner, check_call, shell_pipeline

logger = logging.getLogger(__name__)

HOMEBREW_INSTALL_URL = "https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh"
OH_MY_ZSH_INSTALL_URL = "https://raw.githubusercontent.com/ohmyzsh/ohmyzsh/master/tools/install.sh"
NVM_INSTALL_URL = "https://raw.githubusercontent.com/nvm-sh/nvm/{version}/install.sh"

# Apple Silicon prefix first, then Intel.
BREW_LOCATIONS: tuple[Path, ...] = (
    Path("/opt/homebrew/bin/brew"),
    Path("/usr/local/bin/brew"),
)


def oh_my_zsh(config: InstallConfig) -> Dependency:
    """Oh My Zsh, installed unattended so it leaves the shell and .zshrc alone."""
    return Dependency(
        name="Oh My Zsh",
        marker=config.oh_my_zsh_dir,
        command=shell_pipeline(f'sh -c "$(curl -fsSL {OH_MY_ZSH_INSTALL_URL})" "" --unattended'),
    )


def zsh_plugins(config: InstallConfig) -> list[Dependency]:
    """One dependency per configured Oh My Zsh plugin, cloned with git."""
    plugins_dir = config.zsh_custom / "plugins"
    return [
        Dependency(
            name=name,
            marker=plugins_dir / name,
            command=["git", "clone", url, str(plugins_dir / name)],
        )
        for name, url in config.settings.zsh_plugins.items()
    ]


def nvm(config: InstallConfig) -> Dependency:
    """Node Version Manager."""
    url = NVM_INSTALL_URL.format(version=config.settings.nvm_version)
    return Dependency(
        name="NVM",
        marker=config.nvm_dir,
        command=shell_pipeline(f"curl -o- {url} | bash"),
    )


def find_brew() -> str | None:
    """Locate the brew executable.

    Returns:
        brew's path, or None if Homebrew is not installed.
    """
    found = shutil.which("brew")
    if found:
        return found
    for location in BREW_LOCATIONS:
        if location.exists():
            return str(location)
    return None


def ensure_homebrew(runner: CommandRunner) -> str:
    """Install Homebrew unless it is already present.

    A fresh install is not on PATH for this process yet, so the known
    install prefixes are searched afterwards.

    Args:
        runner: Runner for the Homebrew installer.

    Returns:
        The brew executable to use for package installation.

    Raises:
        ExternalCommandError: If the installer exits non-zero.
    """
    brew = find_brew()
    if brew:
        print_info("Homebrew already installed")
        return brew

    print_info("Installing Homebrew...")
    check_call(runner, shell_pipeline(f'/bin/bash -c "$(curl -fsSL {HOMEBREW_INSTALL_URL})"'))

    brew = find_brew()
    if brew is None:
        # Dry-run, or an installer that put brew somewhere unexpected.
        logger.warning("brew not found after install, falling back to PATH lookup")
        return "brew"
    return brew
