"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest
from dotctl.core.config import InstallConfig
from dotctl.links.catalog import DEFAULT_LINKS
from dotctl.models.link import LinkKind

RUN_STARTED_AT = datetime(2026, 1, 31, 14, 25, 0)


class FakeRunner:
    """CommandRunner that records commands and returns canned exit codes.

    Attributes:
        calls: Every command run, in order.
        failures: Exit code to return for any command containing the key.
    """

    def __init__(self, failures: dict[str, int] | None = None) -> None:
        self.calls: list[list[str]] = []
        self.envs: list[dict[str, str] | None] = []
        self.failures = failures or {}

    def run(self, args: list[str], *, env: dict[str, str] | None = None) -> int:
        self.calls.append(list(args))
        self.envs.append(env)
        command = " ".join(args)
        for needle, code in self.failures.items():
            if needle in command:
                return code
        return 0

    @property
    def commands(self) -> list[str]:
        """Recorded commands joined into strings."""
        return [" ".join(call) for call in self.calls]


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A FakeRunner where every command succeeds."""
    return FakeRunner()


@pytest.fixture
def make_fake_runner() -> Callable[..., FakeRunner]:
    """Factory for FakeRunners with canned failures."""
    return FakeRunner


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Synthetic home directory."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def dotfiles_dir(tmp_path: Path) -> Path:
    """Synthetic dotfiles repository containing every linked source."""
    root = tmp_path / "dotfiles"
    for source, _destination, kind in DEFAULT_LINKS:
        path = root / source
        if kind == LinkKind.DIRECTORY:
            path.mkdir(parents=True, exist_ok=True)
            (path / "init.lua").write_text("-- nvim\n")
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(f"# {source}\n")
    return root


@pytest.fixture
def install_config(home: Path, dotfiles_dir: Path) -> InstallConfig:
    """InstallConfig rooted at the synthetic home and repository."""
    return InstallConfig(
        home=home,
        dotfiles_dir=dotfiles_dir,
        zsh_custom=home / ".oh-my-zsh" / "custom",
        shell="/bin/bash",
        started_at=RUN_STARTED_AT,
    )
