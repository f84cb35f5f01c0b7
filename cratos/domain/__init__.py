"""
Domain layer for cratos.

Contains pure domain objects with no I/O or side effects:
- DirectoryNode: One directory's immediate children
- ModuleRecord: Package identity plus git status of a module
- Command: The command selected from parsed argv
"""

from .module import Dirent, DirectoryNode, ModuleRecord, VCS_DIR, MANIFEST_FILE
from .command import Command

__all__ = [
    'Dirent',
    'DirectoryNode',
    'ModuleRecord',
    'VCS_DIR',
    'MANIFEST_FILE',
    'Command',
]
