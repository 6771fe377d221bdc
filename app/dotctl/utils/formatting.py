"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from dotctl.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def configure_logging(verbose: bool = False) -> None:
    """Route library logging to stderr through Rich.

    Args:
        verbose: If True, show DEBUG records; otherwise only warnings.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=verbose, markup=False)],
        force=True,
    )


def print_header(title: str) -> None:
    """Print a framed section header."""
    rule = "=" * (len(title) + 4)
    console.print(f"\n[bold_header]{rule}[/]")
    console.print(f"[bold_header]  {title}[/]")
    console.print(f"[bold_header]{rule}[/]\n")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]\\[INFO][/] {escape(message)}", highlight=False)


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]\\[WARN][/] {escape(message)}", highlight=False)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]\\[ERROR][/] {escape(message)}", highlight=False)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")


def print_linked(source: Path, destination: Path) -> None:
    """Print a created symlink."""
    console.print(
        f"[info]\\[INFO][/] [linked]Linked[/linked] {escape(str(source))} -> "
        f"{escape(str(destination))}",
        highlight=False,
    )


def print_backed_up(path: Path, backup_dir: Path) -> None:
    """Print a real file or directory moved into the backup directory."""
    err_console.print(
        f"[warning]\\[WARN][/] [backed_up]Backed up[/backed_up] existing {escape(str(path))} "
        f"to {escape(str(backup_dir))}",
        highlight=False,
    )
