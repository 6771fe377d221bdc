"""Installer stage assembly.

Turns the run configuration, detected platform, and CLI options into the
ordered pipeline: packages, then dependencies, then links. The link stage
always runs; the other two can be skipped.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dotctl.core.pipeline import Step
from dotctl.dependencies import ensure_homebrew, install_dependencies
from dotctl.installers import get_installer
from dotctl.links import link_dotfiles
from dotctl.utils.formatting import print_warning

if TYPE_CHECKING:
    from dotctl.cli.types import CliOptions
    from dotctl.core.config import InstallConfig
    from dotctl.links.reconciler import SymlinkReconciler
    from dotctl.models.platform import PlatformInfo
    from dotctl.utils.shell import CommandRunner

logger = logging.getLogger(__name__)


def install_packages(
    config: InstallConfig,
    platform: PlatformInfo,
    runner: CommandRunner,
) -> None:
    """Install packages with the platform's native package manager.

    On macOS Homebrew is bootstrapped first. An unrecognized Linux package
    manager only produces a warning.

    Raises:
        ExternalCommandError: If the bootstrap or any install command fails.
    """
    brew = ensure_homebrew(runner) if platform.is_macos else "brew"

    installer = get_installer(platform, config.dotfiles_dir, runner, brew=brew)
    if installer is None:
        print_warning("Unknown package manager. Please install packages manually.")
        return
    installer.install()


def build_steps(
    config: InstallConfig,
    platform: PlatformInfo,
    options: CliOptions,
    runner: CommandRunner,
    reconciler: SymlinkReconciler,
) -> list[Step]:
    """Build the installer pipeline for this run.

    Args:
        config: Run configuration.
        platform: Detected platform.
        options: Stages selected on the command line.
        runner: Runner for every external command.
        reconciler: Reconciler used by the link stage.

    Returns:
        Steps in execution order.
    """
    steps: list[Step] = []

    if not options.skip_packages:
        steps.append(Step("packages", lambda: install_packages(config, platform, runner)))
    else:
        logger.debug("Skipping package installation")

    if not options.skip_deps:
        steps.append(Step("dependencies", lambda: install_dependencies(config, platform, runner)))
    else:
        logger.debug("Skipping dependency installation")

    steps.append(Step("links", lambda: link_dotfiles(config, reconciler)))
    return steps
