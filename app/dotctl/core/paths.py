"""Path management for dotctl.

Resolves the XDG configuration directory used for the theme override
and the backup locations under the user's home directory.

Defaults:
- Config: ~/.config/dotctl/
- Backups: ~/.dotfiles_backup/<YYYYmmdd_HHMMSS>/
"""

import os
from datetime import datetime
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "dotctl"

BACKUP_DIR_NAME = ".dotfiles_backup"

# Timestamp format for a run's backup directory (e.g. 20260131_142500)
BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

SETTINGS_FILE_NAME = "dotctl.toml"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/dotctl/ (or XDG_CONFIG_HOME/dotctl/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_backup_root(home: Path, dir_name: str = BACKUP_DIR_NAME) -> Path:
    """Get the directory holding every run's backups.

    Args:
        home: The user's home directory.
        dir_name: Name of the backup directory under home.

    Returns:
        Path to ~/.dotfiles_backup/.
    """
    return home / dir_name


def get_run_backup_dir(home: Path, started_at: datetime, dir_name: str = BACKUP_DIR_NAME) -> Path:
    """Get the backup directory for a single run.

    The directory is named after the run's start time. It is only created
    once the first real file has to be moved out of the way.

    Args:
        home: The user's home directory.
        started_at: When the run started.
        dir_name: Name of the backup directory under home.

    Returns:
        Path to ~/.dotfiles_backup/<YYYYmmdd_HHMMSS>/.
    """
    return get_backup_root(home, dir_name) / started_at.strftime(BACKUP_TIMESTAMP_FORMAT)


def get_settings_path(dotfiles_dir: Path) -> Path:
    """Get the optional settings file inside the dotfiles repository.

    Returns:
        Path to <dotfiles_dir>/dotctl.toml.
    """
    return dotfiles_dir / SETTINGS_FILE_NAME
