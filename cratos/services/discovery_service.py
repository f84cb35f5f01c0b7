"""
Module discovery for cratos.

Walks root directories looking for modules (directories holding both
.git and package.json). A module is a leaf: the walk never descends
into it, even if more modules are nested below.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Set
import logging
import os

from ..domain import Dirent, DirectoryNode

logger = logging.getLogger(__name__)


# Directories never descended into during discovery
IGNORE_DIRS = frozenset({'.git', 'node_modules'})


def read_directory(path: str) -> DirectoryNode:
    """
    Snapshot the immediate children of path.

    An unreadable directory (permission denied, missing, not a
    directory) yields a node with no children instead of raising.
    Symlinks are not followed when classifying children.
    """
    try:
        with os.scandir(path) as entries:
            dirents = tuple(
                Dirent(name=entry.name, is_dir=entry.is_dir(follow_symlinks=False))
                for entry in entries
            )
    except OSError as e:
        logger.debug(f"UnreadableDirectoryWarning: {path}: {e.strerror or e}")
        return DirectoryNode(path=path)
    return DirectoryNode(path=path, dirents=dirents)


class ModuleDiscovery:
    """
    Finds module directories beneath one or more roots.

    Sibling directories are read concurrently, one tree level at a time.

    Example:
        discovery = ModuleDiscovery()
        for path in discovery.discover_all(["/home/user/code"]):
            print(path)
    """

    def __init__(self, max_workers: int = 8, ignore_dirs: Optional[Iterable[str]] = None):
        """
        Initialize ModuleDiscovery.

        Args:
            max_workers: Directory reads in flight at once
            ignore_dirs: Directory names to skip (default: .git, node_modules)
        """
        self.max_workers = max_workers
        self.ignore_dirs = frozenset(IGNORE_DIRS if ignore_dirs is None else ignore_dirs)

    def _children(self, node: DirectoryNode) -> List[str]:
        return [
            os.path.join(node.path, d.name)
            for d in node.dirents
            if d.is_dir and d.name not in self.ignore_dirs
        ]

    def _walk(self, roots: Iterable[str]) -> Set[str]:
        found: Set[str] = set()
        visited: Set[str] = set()
        frontier = [os.path.abspath(r) for r in roots]
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            while frontier:
                # overlapping roots can reach the same directory twice
                frontier = [p for p in dict.fromkeys(frontier) if p not in visited]
                visited.update(frontier)
                next_frontier = []
                for node in executor.map(read_directory, frontier):
                    if node.is_module:
                        found.add(node.path)
                    else:
                        next_frontier.extend(self._children(node))
                frontier = next_frontier
        return found

    def discover(self, root: str) -> List[str]:
        """
        Discover modules beneath a single root.

        Args:
            root: Directory to search (made absolute)

        Returns:
            Sorted list of absolute module paths
        """
        return sorted(self._walk([root]))

    def discover_all(self, roots: Iterable[str]) -> List[str]:
        """
        Discover modules beneath every root.

        Overlapping roots report each module once.

        Returns:
            Sorted list of absolute module paths
        """
        modules = sorted(self._walk(roots))
        logger.debug(f"Discovered {len(modules)} modules")
        return modules
