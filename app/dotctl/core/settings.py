"""User-tunable installer settings.

Settings are optional and live in ``dotctl.toml`` at the root of the
dotfiles repository. Every field has a default, so a repository without
the file behaves exactly like the stock installer.

Example::

    nvm_version = "v0.40.1"
    backup_dir_name = ".dotfiles_backup"

    [zsh_plugins]
    zsh-autosuggestions = "https://github.com/zsh-users/zsh-autosuggestions"
"""

import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dotctl.core.errors import SettingsError
from dotctl.core.paths import BACKUP_DIR_NAME

DEFAULT_NVM_VERSION = "v0.40.1"

# Oh My Zsh plugins cloned into $ZSH_CUSTOM/plugins/<name>
DEFAULT_ZSH_PLUGINS: dict[str, str] = {
    "zsh-autosuggestions": "https://github.com/zsh-users/zsh-autosuggestions",
    "zsh-syntax-highlighting": "https://github.com/zsh-users/zsh-syntax-highlighting.git",
    "autoupdate": "https://github.com/TamCore/autoupdate-oh-my-zsh-plugins",
}


class Settings(BaseModel):
    """Installer settings.

    Attributes:
        nvm_version: Tag of the NVM install script to fetch.
        zsh_plugins: Plugin directory name mapped to its git clone URL.
        backup_dir_name: Directory under HOME that receives backups.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    nvm_version: Annotated[
        str,
        Field(min_length=1, description="NVM release tag"),
    ] = DEFAULT_NVM_VERSION
    zsh_plugins: Annotated[
        dict[str, str],
        Field(
            default_factory=lambda: dict(DEFAULT_ZSH_PLUGINS),
            description="Oh My Zsh plugins (name -> git URL)",
        ),
    ]
    backup_dir_name: Annotated[
        str,
        Field(min_length=1, description="Backup directory name under HOME"),
    ] = BACKUP_DIR_NAME

    @field_validator("zsh_plugins")
    @classmethod
    def validate_plugin_names(cls, v: dict[str, str]) -> dict[str, str]:
        """Plugin names become directory names, so they must be plain."""
        for name, url in v.items():
            if not name or "/" in name or name in (".", ".."):
                msg = f"Invalid plugin name: {name!r}"
                raise ValueError(msg)
            if not url:
                msg = f"Plugin {name!r} has no URL"
                raise ValueError(msg)
        return v

    @field_validator("backup_dir_name")
    @classmethod
    def validate_backup_dir_name(cls, v: str) -> str:
        """The backup directory must sit directly under HOME."""
        if "/" in v or v in (".", ".."):
            msg = f"backup_dir_name must be a single path component, got {v!r}"
            raise ValueError(msg)
        return v


def load_settings(path: Path) -> Settings:
    """Load settings from a TOML file, falling back to defaults.

    Args:
        path: Path to the settings file. A missing file yields defaults.

    Returns:
        Validated Settings object.

    Raises:
        SettingsError: If the file cannot be read, parsed, or validated.
    """
    if not path.exists():
        return Settings()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"Invalid TOML syntax in {path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings {path}: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {path}: {e}") from e
