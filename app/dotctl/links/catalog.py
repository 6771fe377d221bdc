"""The fixed set of dotfiles linked into the home directory."""

from dotctl.core.config import InstallConfig
from dotctl.models.link import LinkKind, LinkSpec

# (source relative to the dotfiles root, destination relative to HOME, kind)
DEFAULT_LINKS: tuple[tuple[str, str, LinkKind], ...] = (
    # Shell
    ("zsh/.zshrc", ".zshrc", LinkKind.FILE),
    ("zsh/.zprofile", ".zprofile", LinkKind.FILE),
    # Git
    ("git/.gitconfig", ".gitconfig", LinkKind.FILE),
    # WezTerm
    ("wezterm/.wezterm.lua", ".wezterm.lua", LinkKind.FILE),
    # Neovim
    ("nvim", ".config/nvim", LinkKind.DIRECTORY),
    # Zed
    ("zed/settings.json", ".config/zed/settings.json", LinkKind.FILE),
    ("zed/keymap.json", ".config/zed/keymap.json", LinkKind.FILE),
    # GitHub CLI
    ("gh/config.yml", ".config/gh/config.yml", LinkKind.FILE),
    # htop
    ("htop/htoprc", ".config/htop/htoprc", LinkKind.FILE),
)


def build_link_specs(
    config: InstallConfig,
    links: tuple[tuple[str, str, LinkKind], ...] = DEFAULT_LINKS,
) -> list[LinkSpec]:
    """Resolve the link table against the dotfiles root and HOME.

    Args:
        config: Run configuration.
        links: Link table to resolve.

    Returns:
        Absolute LinkSpecs in table order.
    """
    return [
        LinkSpec(
            source=config.dotfiles_dir / source,
            destination=config.home / destination,
            kind=kind,
        )
        for source, destination, kind in links
    ]
