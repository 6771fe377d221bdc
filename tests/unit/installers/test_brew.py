"""Unit tests for BrewInstaller."""

from pathlib import Path

import pytest
from dotctl.core.errors import ExternalCommandError
from dotctl.installers import BrewInstaller, get_installer
from dotctl.models.platform import OperatingSystem, PackageManagerKind, PlatformInfo


class TestBrewInstaller:
    """Tests for BrewInstaller class."""

    def test_kind_is_brew(self, tmp_path: Path, fake_runner) -> None:
        """Installer reports Homebrew as its package manager."""
        assert BrewInstaller(tmp_path, fake_runner).kind == PackageManagerKind.BREW

    def test_bundles_brewfile_unparsed(self, tmp_path: Path, fake_runner) -> None:
        """The Brewfile is handed to brew bundle as-is."""
        brewfile = tmp_path / "Brewfile"
        brewfile.write_text('brew "git"\n# comment\ncask "wezterm"\n')

        BrewInstaller(tmp_path, fake_runner).install()

        assert fake_runner.calls == [["brew", "bundle", f"--file={brewfile}"]]

    def test_bundles_both_brewfiles_in_order(self, tmp_path: Path, fake_runner) -> None:
        """Brewfile runs before Brewfile.macos."""
        (tmp_path / "Brewfile").write_text('brew "git"\n')
        (tmp_path / "Brewfile.macos").write_text('cask "rectangle"\n')

        BrewInstaller(tmp_path, fake_runner).install()

        assert fake_runner.calls == [
            ["brew", "bundle", f"--file={tmp_path / 'Brewfile'}"],
            ["brew", "bundle", f"--file={tmp_path / 'Brewfile.macos'}"],
        ]

    def test_only_macos_brewfile(self, tmp_path: Path, fake_runner) -> None:
        """Brewfile.macos alone is enough to skip the defaults."""
        (tmp_path / "Brewfile.macos").write_text('cask "rectangle"\n')

        BrewInstaller(tmp_path, fake_runner).install()

        assert fake_runner.calls == [["brew", "bundle", f"--file={tmp_path / 'Brewfile.macos'}"]]

    def test_defaults_without_brewfile(self, tmp_path: Path, fake_runner) -> None:
        """Without any Brewfile the default list is installed."""
        BrewInstaller(tmp_path, fake_runner).install()

        assert fake_runner.calls[0][:2] == ["brew", "install"]
        assert "neovim" in fake_runner.calls[0]

    def test_uses_given_brew_path(self, tmp_path: Path, fake_runner) -> None:
        """A freshly bootstrapped brew is invoked by full path."""
        BrewInstaller(tmp_path, fake_runner, brew="/opt/homebrew/bin/brew").install()

        assert fake_runner.calls[0][0] == "/opt/homebrew/bin/brew"

    def test_bundle_failure_propagates(self, tmp_path: Path, make_fake_runner) -> None:
        """A failing brew bundle aborts with its exit code."""
        (tmp_path / "Brewfile").write_text('brew "nope"\n')
        (tmp_path / "Brewfile.macos").write_text('cask "rectangle"\n')
        runner = make_fake_runner({"Brewfile": 1})

        with pytest.raises(ExternalCommandError) as exc_info:
            BrewInstaller(tmp_path, runner).install()

        assert exc_info.value.returncode == 1
        assert len(runner.calls) == 1

    def test_get_installer_for_macos(self, tmp_path: Path, fake_runner) -> None:
        """macOS maps to BrewInstaller."""
        platform = PlatformInfo(os=OperatingSystem.MACOS, package_manager=PackageManagerKind.BREW)

        assert isinstance(get_installer(platform, tmp_path, fake_runner), BrewInstaller)
