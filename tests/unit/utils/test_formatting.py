"""Unit tests for console formatting helpers."""

from pathlib import Path
from unittest.mock import MagicMock, patch

from dotctl.utils.formatting import print_backed_up, print_info, print_linked


class TestLinkMessages:
    """Tests for the link and backup messages."""

    @patch("dotctl.utils.formatting.console")
    def test_linked_uses_linked_style(self, mock_console: MagicMock) -> None:
        """Created links are highlighted with the linked color."""
        print_linked(Path("/repo/zsh/.zshrc"), Path("/home/u/.zshrc"))

        message = mock_console.print.call_args.args[0]
        assert "[linked]Linked[/linked]" in message
        assert "/repo/zsh/.zshrc -> /home/u/.zshrc" in message

    @patch("dotctl.utils.formatting.err_console")
    def test_backed_up_uses_backed_up_style(self, mock_console: MagicMock) -> None:
        """Backups go to stderr with the backed_up color."""
        print_backed_up(Path("/home/u/.gitconfig"), Path("/home/u/.dotfiles_backup/20260101_000000"))

        message = mock_console.print.call_args.args[0]
        assert "[backed_up]Backed up[/backed_up]" in message
        assert "/home/u/.dotfiles_backup/20260101_000000" in message

    @patch("dotctl.utils.formatting.console")
    def test_paths_are_escaped(self, mock_console: MagicMock) -> None:
        """Brackets in paths are not read as markup."""
        print_linked(Path("/repo/[bold]x"), Path("/home/u/x"))

        message = mock_console.print.call_args.args[0]
        assert "\\[bold]x" in message


@patch("dotctl.utils.formatting.console")
def test_print_info_prefix(mock_console: MagicMock) -> None:
    """Info messages carry the [INFO] prefix."""
    print_info("Linking dotfiles...")

    message = mock_console.print.call_args.args[0]
    assert message == "[info]\\[INFO][/] Linking dotfiles..."
