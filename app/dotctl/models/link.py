"""Symlink models.

Describes which repository file is linked where, what occupied the
destination beforehand, and the outcome of reconciling it.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class LinkKind(str, Enum):
    """Kind of source a link points at."""

    FILE = "file"
    DIRECTORY = "directory"


class OccupantState(str, Enum):
    """What currently sits at a link destination.

    Attributes:
        ABSENT: Nothing exists at the path.
        SYMLINK: A symbolic link, valid or broken.
        REAL: A regular file or directory (user content).
    """

    ABSENT = "absent"
    SYMLINK = "symlink"
    REAL = "real"


@dataclass(frozen=True, slots=True)
class LinkSpec:
    """A (source, destination) pair to reconcile.

    Attributes:
        source: Absolute path inside the dotfiles repository.
        destination: Absolute path under the home/config tree.
        kind: Whether the source is a file or a directory.
    """

    source: Path
    destination: Path
    kind: LinkKind = LinkKind.FILE

    def __post_init__(self) -> None:
        """Validate link paths after initialization."""
        if not self.source.is_absolute():
            msg = f"Link source must be absolute, got {self.source}"
            raise ValueError(msg)
        if not self.destination.is_absolute():
            msg = f"Link destination must be absolute, got {self.destination}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class LinkResult:
    """Result of reconciling a single link.

    Attributes:
        spec: The link that was reconciled.
        previous: What occupied the destination before.
        success: Whether the destination now links to the source.
        backup_path: Where real prior content was moved, if any.
        error: Error message if the link was not created.
        dry_run: Whether this was a dry-run (nothing changed).
    """

    spec: LinkSpec
    previous: OccupantState
    success: bool
    backup_path: Path | None = None
    error: str | None = None
    dry_run: bool = False

    @property
    def failed(self) -> bool:
        return not self.success
