"""Dotfile linking.

Use :func:`link_dotfiles` to reconcile every managed destination with its
source in the dotfiles repository.
"""

from dotctl.core.config import InstallConfig
from dotctl.core.errors import MissingLinkSourceError
from dotctl.links.catalog import DEFAULT_LINKS, build_link_specs
from dotctl.links.reconciler import SymlinkReconciler, classify_occupant
from dotctl.models.link import LinkResult, LinkSpec, OccupantState
from dotctl.utils.formatting import print_backed_up, print_info, print_linked, print_warning


def _report(result: LinkResult, reconciler: SymlinkReconciler) -> None:
    spec = result.spec
    if result.failed:
        print_warning(f"Skipping {spec.destination}: {result.error}")
        return
    if result.dry_run:
        print_info(f"Would link {spec.source} -> {spec.destination} (currently {result.previous.value})")
        return
    if result.previous == OccupantState.SYMLINK:
        print_info(f"Replaced existing symlink {spec.destination}")
    elif result.backup_path is not None:
        print_backed_up(spec.destination, reconciler.backup_dir)
    print_linked(spec.source, spec.destination)


def link_dotfiles(
    config: InstallConfig,
    reconciler: SymlinkReconciler,
    specs: list[LinkSpec] | None = None,
) -> list[LinkResult]:
    """Link every managed dotfile.

    Specs whose source is missing are skipped while the rest are still
    linked; the missing ones are reported together at the end.

    Args:
        config: Run configuration.
        reconciler: Reconciler shared by the whole run.
        specs: Links to reconcile. Defaults to the built-in table.

    Returns:
        One LinkResult per spec.

    Raises:
        MissingLinkSourceError: If any spec's source did not exist.
        OSError: If a filesystem operation fails (remaining specs are not processed).
    """
    print_info("Linking dotfiles...")
    if specs is None:
        specs = build_link_specs(config)

    results: list[LinkResult] = []
    for spec in specs:
        result = reconciler.reconcile(spec)
        _report(result, reconciler)
        results.append(result)

    missing = [str(r.spec.source) for r in results if r.failed]
    if missing:
        raise MissingLinkSourceError(missing)
    return results


__all__ = [
    "DEFAULT_LINKS",
    "SymlinkReconciler",
    "build_link_specs",
    "classify_occupant",
    "link_dotfiles",
]
