"""Unit tests for link_dotfiles and the link table."""

from pathlib import Path

import pytest
from dotctl.core.config import InstallConfig
from dotctl.core.errors import MissingLinkSourceError
from dotctl.links import DEFAULT_LINKS, build_link_specs, link_dotfiles
from dotctl.links.reconciler import SymlinkReconciler
from dotctl.models.link import LinkKind, OccupantState


class TestBuildLinkSpecs:
    """Tests for build_link_specs function."""

    def test_resolves_against_repo_and_home(self, install_config: InstallConfig) -> None:
        """Sources live under the repo, destinations under HOME."""
        specs = build_link_specs(install_config)

        assert len(specs) == len(DEFAULT_LINKS)
        for spec in specs:
            assert spec.source.is_relative_to(install_config.dotfiles_dir)
            assert spec.destination.is_relative_to(install_config.home)

    def test_nvim_is_a_directory_link(self, install_config: InstallConfig) -> None:
        """The Neovim config is linked as a whole directory."""
        specs = {s.destination: s for s in build_link_specs(install_config)}
        nvim = specs[install_config.home / ".config" / "nvim"]

        assert nvim.kind == LinkKind.DIRECTORY
        assert nvim.source == install_config.dotfiles_dir / "nvim"


class TestLinkDotfiles:
    """Tests for link_dotfiles function."""

    def test_links_everything_into_empty_home(self, install_config: InstallConfig) -> None:
        """Every destination becomes a symlink; no backup dir is created."""
        reconciler = SymlinkReconciler(install_config.backup_dir)

        results = link_dotfiles(install_config, reconciler)

        assert all(r.success for r in results)
        for result in results:
            assert result.spec.destination.is_symlink()
            assert result.spec.destination.readlink() == result.spec.source
        assert not install_config.backup_dir.exists()

    def test_gitconfig_scenario(self, install_config: InstallConfig) -> None:
        """A missing ~/.gitconfig becomes a link to repo/git/.gitconfig."""
        reconciler = SymlinkReconciler(install_config.backup_dir)

        link_dotfiles(install_config, reconciler)

        gitconfig = install_config.home / ".gitconfig"
        assert gitconfig.is_symlink()
        assert gitconfig.readlink() == install_config.dotfiles_dir / "git" / ".gitconfig"
        assert not (install_config.home / ".dotfiles_backup").exists()

    def test_zshrc_scenario(self, install_config: InstallConfig) -> None:
        """A real ~/.zshrc ends up in the timestamped backup directory."""
        zshrc = install_config.home / ".zshrc"
        zshrc.write_text("export X=1")
        reconciler = SymlinkReconciler(install_config.backup_dir)

        link_dotfiles(install_config, reconciler)

        assert zshrc.readlink() == install_config.dotfiles_dir / "zsh" / ".zshrc"
        backup = install_config.home / ".dotfiles_backup" / "20260131_142500" / ".zshrc"
        assert backup.read_text() == "export X=1"

    def test_second_run_relinks_without_new_backups(self, install_config: InstallConfig) -> None:
        """Running twice replaces the links and backs nothing else up."""
        (install_config.home / ".zshrc").write_text("export X=1")
        link_dotfiles(install_config, SymlinkReconciler(install_config.backup_dir))

        second = SymlinkReconciler(install_config.backup_dir)
        results = link_dotfiles(install_config, second)

        assert all(r.previous == OccupantState.SYMLINK for r in results)
        assert second.has_backups is False

    def test_missing_source_links_others_then_raises(
        self, install_config: InstallConfig, dotfiles_dir: Path
    ) -> None:
        """A missing source does not stop the remaining links."""
        (dotfiles_dir / "htop" / "htoprc").unlink()
        reconciler = SymlinkReconciler(install_config.backup_dir)

        with pytest.raises(MissingLinkSourceError) as exc_info:
            link_dotfiles(install_config, reconciler)

        assert exc_info.value.sources == [str(dotfiles_dir / "htop" / "htoprc")]
        assert (install_config.home / ".zshrc").is_symlink()
        assert not (install_config.home / ".config" / "htop" / "htoprc").exists()
