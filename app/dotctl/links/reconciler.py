"""Symlink reconciliation.

Brings a destination path into agreement with a desired symlink, whatever
currently occupies it:

- nothing: the link is created;
- a symlink (valid or broken): it is replaced, no backup is taken;
- a real file or directory: it is moved into the run's backup directory
  first, then the link is created.

Filesystem errors propagate; links created earlier in the run are left
in place.
"""

import logging
import shutil
from pathlib import Path

from dotctl.models.link import LinkKind, LinkResult, LinkSpec, OccupantState

logger = logging.getLogger(__name__)


def classify_occupant(path: Path) -> OccupantState:
    """Classify what currently sits at a path.

    The symlink check comes first so that broken links (for which
    ``exists()`` is False) are still treated as links.

    Args:
        path: Path to inspect.

    Returns:
        The occupant state.
    """
    if path.is_symlink():
        return OccupantState.SYMLINK
    if path.exists():
        return OccupantState.REAL
    return OccupantState.ABSENT


class SymlinkReconciler:
    """Replaces link destinations with symlinks, backing up real content.

    One reconciler is used per run so that all backups share a single
    timestamped directory, which is created only when first needed.

    Attributes:
        _backup_dir: This run's backup directory.
        _dry_run: If True, report what would happen without touching anything.
    """

    def __init__(self, backup_dir: Path, *, dry_run: bool = False) -> None:
        """Initialize the reconciler.

        Args:
            backup_dir: Directory receiving displaced real content.
            dry_run: If True, classify destinations but change nothing.
        """
        self._backup_dir = backup_dir
        self._dry_run = dry_run
        self._backups: list[Path] = []

    @property
    def backup_dir(self) -> Path:
        return self._backup_dir

    @property
    def has_backups(self) -> bool:
        """Whether any real content was moved into the backup directory."""
        return bool(self._backups)

    def link(self, source: Path, destination: Path, kind: LinkKind = LinkKind.FILE) -> LinkResult:
        """Make ``destination`` a symlink to ``source``.

        Args:
            source: Absolute path the link should point at.
            destination: Absolute path of the link.
            kind: Whether the source is a file or a directory.

        Returns:
            LinkResult describing what was replaced.

        Raises:
            OSError: If creating directories, moving, or linking fails.
        """
        return self.reconcile(LinkSpec(source=source, destination=destination, kind=kind))

    def reconcile(self, spec: LinkSpec) -> LinkResult:
        """Reconcile a single LinkSpec. See :meth:`link`."""
        destination = spec.destination
        previous = classify_occupant(destination)

        if not spec.source.exists():
            logger.warning("Source %s does not exist, not linking %s", spec.source, destination)
            return LinkResult(
                spec=spec,
                previous=previous,
                success=False,
                error=f"Source does not exist: {spec.source}",
            )

        if self._dry_run:
            logger.info("Dry-run: would link %s -> %s (%s)", spec.source, destination, previous.value)
            return LinkResult(spec=spec, previous=previous, success=True, dry_run=True)

        destination.parent.mkdir(parents=True, exist_ok=True)

        backup_path: Path | None = None
        if previous == OccupantState.SYMLINK:
            logger.debug("Removing existing symlink %s", destination)
            destination.unlink()
        elif previous == OccupantState.REAL:
            backup_path = self._backup(destination)

        destination.symlink_to(spec.source, target_is_directory=spec.kind == LinkKind.DIRECTORY)
        logger.debug("Linked %s -> %s", spec.source, destination)

        return LinkResult(spec=spec, previous=previous, success=True, backup_path=backup_path)

    def _backup(self, path: Path) -> Path:
        """Move real content out of the way, keeping its base name.

        Returns:
            Where the content now lives.
        """
        self._backup_dir.mkdir(parents=True, exist_ok=True)

        target = self._backup_dir / path.name
        suffix = 1
        while target.exists() or target.is_symlink():
            target = self._backup_dir / f"{path.name}.{suffix}"
            suffix += 1

        # A rename when both paths share a filesystem, copy+delete otherwise.
        shutil.move(str(path), str(target))
        self._backups.append(target)
        logger.info("Backed up %s to %s", path, target)
        return target
