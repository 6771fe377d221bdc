"""Unit tests for InstallConfig."""

from datetime import datetime
from pathlib import Path

import pytest
from dotctl.core.config import InstallConfig
from dotctl.core.errors import SettingsError

STARTED = datetime(2026, 3, 4, 5, 6, 7)


class TestFromEnvironment:
    """Tests for InstallConfig.from_environment."""

    def test_reads_home_and_shell(self, tmp_path: Path) -> None:
        """HOME and SHELL come from the given environment."""
        env = {"HOME": str(tmp_path / "home"), "SHELL": "/bin/bash"}

        config = InstallConfig.from_environment(env, dotfiles_dir=tmp_path, now=STARTED)

        assert config.home == tmp_path / "home"
        assert config.shell == "/bin/bash"

    def test_relative_home_made_absolute(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A relative HOME is anchored at the working directory."""
        monkeypatch.chdir(tmp_path)

        config = InstallConfig.from_environment(
            {"HOME": "relhome"}, dotfiles_dir=tmp_path, now=STARTED
        )

        assert config.home == tmp_path / "relhome"
        assert config.home.is_absolute()
        assert config.zsh_custom.is_absolute()

    def test_zsh_custom_default(self, tmp_path: Path) -> None:
        """ZSH_CUSTOM defaults to ~/.oh-my-zsh/custom."""
        env = {"HOME": str(tmp_path)}

        config = InstallConfig.from_environment(env, dotfiles_dir=tmp_path, now=STARTED)

        assert config.zsh_custom == tmp_path / ".oh-my-zsh" / "custom"

    def test_zsh_custom_override(self, tmp_path: Path) -> None:
        """ZSH_CUSTOM is honored when set."""
        env = {"HOME": str(tmp_path), "ZSH_CUSTOM": "/opt/zsh-custom"}

        config = InstallConfig.from_environment(env, dotfiles_dir=tmp_path, now=STARTED)

        assert config.zsh_custom == Path("/opt/zsh-custom")

    def test_missing_shell_is_empty(self, tmp_path: Path) -> None:
        """An unset SHELL is treated as unknown."""
        config = InstallConfig.from_environment(
            {"HOME": str(tmp_path)}, dotfiles_dir=tmp_path, now=STARTED
        )

        assert config.shell == ""

    def test_dotfiles_dir_from_env(self, tmp_path: Path) -> None:
        """DOTFILES_DIR is used when no directory is passed."""
        repo = tmp_path / "repo"
        repo.mkdir()
        env = {"HOME": str(tmp_path), "DOTFILES_DIR": str(repo)}

        config = InstallConfig.from_environment(env, now=STARTED)

        assert config.dotfiles_dir == repo.resolve()

    def test_dotfiles_dir_defaults_to_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without DOTFILES_DIR the working directory is the repository."""
        monkeypatch.chdir(tmp_path)

        config = InstallConfig.from_environment({"HOME": str(tmp_path)}, now=STARTED)

        assert config.dotfiles_dir == tmp_path.resolve()

    def test_backup_dir_named_after_start_time(self, tmp_path: Path) -> None:
        """Backups go to ~/.dotfiles_backup/<YYYYmmdd_HHMMSS>."""
        config = InstallConfig.from_environment(
            {"HOME": str(tmp_path)}, dotfiles_dir=tmp_path, now=STARTED
        )

        assert config.backup_dir == tmp_path / ".dotfiles_backup" / "20260304_050607"

    def test_loads_repository_settings(self, tmp_path: Path) -> None:
        """dotctl.toml in the repository is applied."""
        (tmp_path / "dotctl.toml").write_text('nvm_version = "v0.39.7"\nbackup_dir_name = ".bak"\n')

        config = InstallConfig.from_environment(
            {"HOME": str(tmp_path)}, dotfiles_dir=tmp_path, now=STARTED
        )

        assert config.settings.nvm_version == "v0.39.7"
        assert config.backup_dir == tmp_path / ".bak" / "20260304_050607"

    def test_invalid_settings_raise(self, tmp_path: Path) -> None:
        """A broken dotctl.toml is fatal."""
        (tmp_path / "dotctl.toml").write_text("nvm_version = \n")

        with pytest.raises(SettingsError):
            InstallConfig.from_environment({"HOME": str(tmp_path)}, dotfiles_dir=tmp_path)

    def test_config_is_immutable(self, install_config: InstallConfig) -> None:
        """Fields cannot be reassigned after construction."""
        with pytest.raises(AttributeError):
            install_config.home = Path("/elsewhere")  # type: ignore[misc]
