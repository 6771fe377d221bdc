"""Shared types for the CLI."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Which installer stages to skip.

    Attributes:
        skip_packages: Skip the package manager stage.
        skip_deps: Skip Oh My Zsh, plugins, NVM, and the login shell.
    """

    skip_packages: bool = False
    skip_deps: bool = False

    @classmethod
    def from_flags(
        cls,
        *,
        skip_packages: bool = False,
        skip_deps: bool = False,
        links_only: bool = False,
    ) -> "CliOptions":
        """Build options from command-line flags; --links-only implies both skips."""
        return cls(
            skip_packages=skip_packages or links_only,
            skip_deps=skip_deps or links_only,
        )

    @property
    def links_only(self) -> bool:
        return self.skip_packages and self.skip_deps
