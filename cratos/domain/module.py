"""
Module domain objects for cratos.

A module is a directory holding both git metadata and a package manifest.
These objects are immutable and carry no I/O.
"""

from dataclasses import dataclass
from typing import Tuple

VCS_DIR = '.git'
MANIFEST_FILE = 'package.json'


@dataclass(frozen=True)
class Dirent:
    """One immediate child of a directory."""
    name: str
    is_dir: bool


@dataclass(frozen=True)
class DirectoryNode:
    """Snapshot of a directory's immediate children."""
    path: str
    dirents: Tuple[Dirent, ...] = ()

    @property
    def names(self) -> frozenset:
        return frozenset(d.name for d in self.dirents)

    @property
    def is_module(self) -> bool:
        """True if the directory contains both .git and package.json."""
        names = self.names
        return VCS_DIR in names and MANIFEST_FILE in names


@dataclass(frozen=True)
class ModuleRecord:
    """
    Package identity and git status for one discovered module.

    Built by ModuleInfoAggregator and discarded when the command ends.
    """
    path: str
    package_name: str
    package_version: str
    git_status_branch: str
    git_status_files: Tuple[str, ...] = ()

    @property
    def identifier(self) -> str:
        """name-version, as printed by ``cratos list``."""
        return f"{self.package_name}-{self.package_version}"

    @property
    def git_status_file_names(self) -> Tuple[str, ...]:
        """File paths from the status entries, without the 2-char code."""
        return tuple(line[3:] for line in self.git_status_files)
