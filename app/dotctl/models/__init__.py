"""Data models for dotctl.

This module exports the core data structures used throughout the application.
"""

from dotctl.models.link import LinkKind, LinkResult, LinkSpec, OccupantState
from dotctl.models.platform import Distro, OperatingSystem, PackageManagerKind, PlatformInfo

__all__ = [
    "Distro",
    "LinkKind",
    "LinkResult",
    "LinkSpec",
    "OccupantState",
    "OperatingSystem",
    "PackageManagerKind",
    "PlatformInfo",
]
