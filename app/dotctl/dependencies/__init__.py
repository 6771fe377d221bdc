"""Shell framework, plugin, and version manager bootstrap.

Use :func:`install_dependencies` to bring every dependency up to date in
the fixed order: Oh My Zsh, its plugins, NVM, then the login shell.
"""

from dotctl.core.config import InstallConfig
from dotctl.dependencies.base import Dependency, ensure
from dotctl.dependencies.catalog import (
    ensure_homebrew,
    find_brew,
    nvm,
    oh_my_zsh,
    zsh_plugins,
)
from dotctl.dependencies.default_shell import ensure_default_shell
from dotctl.models.platform import PlatformInfo
from dotctl.utils.shell import CommandRunner


def get_dependencies(config: InstallConfig) -> list[Dependency]:
    """All marker-checked dependencies, in install order."""
    return [oh_my_zsh(config), *zsh_plugins(config), nvm(config)]


def install_dependencies(
    config: InstallConfig,
    platform: PlatformInfo,
    runner: CommandRunner,
) -> None:
    """Install every missing dependency and switch the login shell to zsh.

    Raises:
        ExternalCommandError: On the first installer that fails.
    """
    for dependency in get_dependencies(config):
        ensure(dependency, runner)
    ensure_default_shell(config, platform, runner)


__all__ = [
    "Dependency",
    "ensure",
    "ensure_default_shell",
    "ensure_homebrew",
    "find_brew",
    "get_dependencies",
    "install_dependencies",
    "nvm",
    "oh_my_zsh",
    "zsh_plugins",
]
