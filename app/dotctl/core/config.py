"""Run configuration.

All ambient inputs (HOME, SHELL, ZSH_CUSTOM, the dotfiles location and the
run's start time) are captured once into an immutable InstallConfig that
every stage receives explicitly. Tests build one around a temporary home.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from dotctl.core.paths import get_run_backup_dir, get_settings_path
from dotctl.core.settings import Settings, load_settings


@dataclass(frozen=True, slots=True)
class InstallConfig:
    """Immutable configuration for a single installer run.

    Attributes:
        home: Destination root for links and dependency installs.
        dotfiles_dir: Root of the dotfiles repository (link sources).
        zsh_custom: Oh My Zsh custom directory (plugins go under plugins/).
        shell: The user's current login shell, empty if unknown.
        started_at: Run start time; names the backup directory.
        settings: Settings loaded from the repository's dotctl.toml.
        dry_run: If True, no command runs and the filesystem is untouched.
    """

    home: Path
    dotfiles_dir: Path
    zsh_custom: Path
    shell: str
    started_at: datetime
    settings: Settings = field(default_factory=Settings)
    dry_run: bool = False

    @property
    def backup_dir(self) -> Path:
        """Backup directory for this run (created lazily by the reconciler)."""
        return get_run_backup_dir(self.home, self.started_at, self.settings.backup_dir_name)

    @property
    def oh_my_zsh_dir(self) -> Path:
        return self.home / ".oh-my-zsh"

    @property
    def nvm_dir(self) -> Path:
        return self.home / ".nvm"

    @classmethod
    def from_environment(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        dotfiles_dir: Path | None = None,
        dry_run: bool = False,
        now: datetime | None = None,
    ) -> "InstallConfig":
        """Build the configuration from environment variables.

        Args:
            env: Environment to read. Defaults to os.environ.
            dotfiles_dir: Dotfiles repository root. Defaults to $DOTFILES_DIR,
                then the current working directory.
            dry_run: Whether this run only reports what it would do.
            now: Run start time. Defaults to the current local time.

        Returns:
            InstallConfig for this run.

        Raises:
            SettingsError: If the repository's dotctl.toml is invalid.
        """
        environ = os.environ if env is None else env

        home_value = environ.get("HOME")
        # Link destinations must be absolute; a relative $HOME is taken from cwd.
        home = Path(home_value).expanduser().absolute() if home_value else Path.home()

        if dotfiles_dir is None:
            env_dir = environ.get("DOTFILES_DIR")
            dotfiles_dir = Path(env_dir) if env_dir else Path.cwd()
        dotfiles_dir = dotfiles_dir.expanduser().resolve()

        custom = environ.get("ZSH_CUSTOM")
        zsh_custom = Path(custom).absolute() if custom else home / ".oh-my-zsh" / "custom"

        return cls(
            home=home,
            dotfiles_dir=dotfiles_dir,
            zsh_custom=zsh_custom,
            shell=environ.get("SHELL", ""),
            started_at=now or datetime.now(),
            settings=load_settings(get_settings_path(dotfiles_dir)),
            dry_run=dry_run,
        )
