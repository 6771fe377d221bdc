"""Switching the login shell to zsh."""

import logging
import shutil
from pathlib import Path

from dotctl.core.config import InstallConfig
from dotctl.models.platform import PlatformInfo
from dotctl.utils.formatting import print_info, print_warning
from dotctl.utils.shell import CommandRunner, check_call

logger = logging.getLogger(__name__)

ETC_SHELLS = Path("/etc/shells")


def _is_registered(shell_path: str, shells_file: Path) -> bool:
    try:
        lines = shells_file.read_text(encoding="utf-8").splitlines()
    except OSError as e:
        logger.debug("Could not read %s: %s", shells_file, e)
        return False
    return shell_path in (line.strip() for line in lines)


def ensure_default_shell(
    config: InstallConfig,
    platform: PlatformInfo,
    runner: CommandRunner,
    *,
    shells_file: Path = ETC_SHELLS,
) -> bool:
    """Make zsh the user's login shell.

    Nothing happens when $SHELL already names zsh. On Linux, zsh is added to
    /etc/shells first if it is missing there, since chsh refuses unlisted
    shells.

    Args:
        config: Run configuration (provides the current $SHELL).
        platform: Detected platform.
        runner: Runner for sudo/chsh.
        shells_file: The system's list of valid login shells.

    Returns:
        True if chsh was run, False if nothing needed to change.

    Raises:
        ExternalCommandError: If registering the shell or chsh fails.
    """
    if "zsh" in config.shell:
        logger.debug("Login shell is already zsh (%s)", config.shell)
        return False

    zsh = shutil.which("zsh")
    if zsh is None:
        print_warning("zsh not found on PATH, leaving the default shell unchanged.")
        return False

    print_info("Setting zsh as default shell...")
    if platform.is_linux and not _is_registered(zsh, shells_file):
        check_call(runner, ["sudo", "sh", "-c", f"echo '{zsh}' >> {shells_file}"])

    check_call(runner, ["chsh", "-s", zsh])
    return True
