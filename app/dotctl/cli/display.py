"""Banner and completion messages for the install command."""

from dotctl.links.reconciler import SymlinkReconciler
from dotctl.models.platform import PlatformInfo
from dotctl.utils.formatting import console, print_header, print_info, print_success


def print_banner(platform: PlatformInfo) -> None:
    """Print the title banner and the detected platform."""
    print_header("Dotfiles Installation Script")
    print_info(f"Detected OS: {platform.os.value}")
    if platform.is_linux:
        print_info(f"Detected distro: {platform.distro.value} ({platform.package_manager.value})")
    console.print()


def print_completion(reconciler: SymlinkReconciler, dry_run: bool = False) -> None:
    """Print the closing summary.

    Args:
        reconciler: The run's reconciler (knows whether backups were made).
        dry_run: Whether nothing was actually changed.
    """
    console.print()
    if dry_run:
        print_success("Dry run complete. Nothing was changed.")
        return

    print_success("Installation complete!")
    if reconciler.has_backups:
        print_info(f"Backups saved to: {reconciler.backup_dir}")
    console.print()
    print_info("Please restart your terminal or run: source ~/.zshrc")
