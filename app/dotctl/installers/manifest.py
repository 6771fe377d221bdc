"""Package manifest parsing.

A manifest is a UTF-8 text file listing one package per line. Blank lines
and lines starting with ``#`` are ignored.
"""

from collections.abc import Iterable
from pathlib import Path


def filter_package_names(lines: Iterable[str]) -> list[str]:
    """Drop comments and blank lines from manifest lines.

    Applying this to its own output returns the same list.

    Args:
        lines: Raw manifest lines.

    Returns:
        Package names in manifest order.
    """
    packages: list[str] = []
    for line in lines:
        name = line.strip()
        if not name or name.startswith("#"):
            continue
        packages.append(name)
    return packages


def read_manifest(path: Path) -> list[str]:
    """Read and filter a package manifest.

    Args:
        path: Manifest file.

    Returns:
        Package names in manifest order.

    Raises:
        OSError: If the file cannot be read.
    """
    return filter_package_names(path.read_text(encoding="utf-8").splitlines())
