"""Main CLI application entry point.

Defines the single ``dotctl`` command: install packages and dependencies,
then link the dotfiles into place.
"""

from pathlib import Path
from typing import Annotated

import typer
from typer.core import TyperCommand

from dotctl import __version__
from dotctl.cli.display import print_banner, print_completion
from dotctl.cli.types import CliOptions
from dotctl.core.config import InstallConfig
from dotctl.core.detect import detect, require_supported
from dotctl.core.errors import DotctlError
from dotctl.core.executor import build_steps
from dotctl.core.pipeline import run_pipeline
from dotctl.links.reconciler import SymlinkReconciler
from dotctl.utils.formatting import configure_logging, print_error
from dotctl.utils.shell import CommandRunner, DryRunRunner, SubprocessRunner


HELP_FLAGS = ("-h", "--help")

# Exit status click assigns to usage errors (bad option, bad value).
CLICK_USAGE_EXIT_CODE = 2


class InstallCommand(TyperCommand):
    """Command class that reports usage errors with exit code 1.

    Arguments are treated left to right: a help flag that appears before
    the first invalid argument still prints help and exits 0.
    """

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except Exception as e:
            if getattr(e, "exit_code", None) != CLICK_USAGE_EXIT_CODE:
                raise
            if self._help_comes_first(ctx, args):
                print_help(ctx)
                raise typer.Exit() from None
            e.exit_code = 1  # type: ignore[attr-defined]
            raise

    def _help_comes_first(self, ctx: typer.Context, args: list[str]) -> bool:
        known: set[str] = set()
        takes_value: set[str] = set()
        for param in self.get_params(ctx):
            names = [*param.opts, *param.secondary_opts]
            known.update(names)
            if not getattr(param, "is_flag", False):
                takes_value.update(names)

        expect_value = False
        for arg in args:
            if expect_value:
                expect_value = False
                continue
            if arg in HELP_FLAGS:
                return True
            name, has_value, _ = arg.partition("=")
            if name not in known:
                return False
            expect_value = name in takes_value and not has_value
        return False


app = typer.Typer(
    name="dotctl",
    help="Bootstrap a development environment and link dotfiles into place.",
    add_completion=False,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dotctl version {__version__}")
        raise typer.Exit()


def print_help(ctx: typer.Context) -> None:
    """Print usage followed by the detected platform."""
    help_text = ctx.get_help()
    if help_text:
        typer.echo(help_text)
    typer.echo("")
    for line in detect().summary_lines():
        typer.echo(line)


def help_callback(ctx: typer.Context, value: bool) -> None:
    """Print help and exit."""
    if not value or ctx.resilient_parsing:
        return
    print_help(ctx)
    raise typer.Exit()


def make_runner(dry_run: bool) -> CommandRunner:
    """Get the command runner for this run."""
    if dry_run:
        return DryRunRunner()
    return SubprocessRunner()


@app.command(cls=InstallCommand, add_help_option=False)
def install(
    skip_packages: Annotated[
        bool,
        typer.Option("--skip-packages", help="Skip package installation."),
    ] = False,
    skip_deps: Annotated[
        bool,
        typer.Option("--skip-deps", help="Skip Oh My Zsh/plugins/NVM installation."),
    ] = False,
    links_only: Annotated[
        bool,
        typer.Option("--links-only", help="Only create symlinks (skip all installations)."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be done without changing anything."),
    ] = False,
    dotfiles_dir: Annotated[
        Path | None,
        typer.Option(
            "--dotfiles-dir",
            help="Dotfiles repository root (default: $DOTFILES_DIR or the current directory).",
            file_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    show_help: Annotated[
        bool | None,
        typer.Option(
            "--help",
            "-h",
            callback=help_callback,
            is_eager=True,
            help="Show this message and exit.",
        ),
    ] = None,
) -> None:
    """Install packages and dependencies, then link dotfiles.

    Packages come from Brewfile (macOS) or packages/<manager>.txt (Linux),
    falling back to a built-in list. Existing files at link destinations are
    moved to ~/.dotfiles_backup/<timestamp>/ before being replaced.
    """
    configure_logging(verbose)
    options = CliOptions.from_flags(
        skip_packages=skip_packages,
        skip_deps=skip_deps,
        links_only=links_only,
    )

    platform = detect()
    try:
        require_supported(platform)
        config = InstallConfig.from_environment(dotfiles_dir=dotfiles_dir, dry_run=dry_run)
    except DotctlError as e:
        print_error(str(e))
        raise typer.Exit(code=e.exit_code) from e

    print_banner(platform)

    reconciler = SymlinkReconciler(config.backup_dir, dry_run=config.dry_run)
    steps = build_steps(config, platform, options, make_runner(config.dry_run), reconciler)
    result = run_pipeline(steps)

    failed = result.failed
    if failed is not None:
        print_error(f"{failed.name} failed: {failed.message}")
        raise typer.Exit(code=failed.exit_code)

    print_completion(reconciler, dry_run=config.dry_run)


if __name__ == "__main__":
    app()
