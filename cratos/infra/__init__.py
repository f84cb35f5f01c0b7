"""
Infrastructure layer for cratos.

Contains abstractions for external systems:
- GitClient: Git command execution
- ManifestReader: package.json access

These provide clean interfaces that can be mocked for testing.
"""

from .git_client import GitClient, GitStatusOutput
from .manifest_reader import ManifestReader, PackageManifest

__all__ = [
    'GitClient',
    'GitStatusOutput',
    'ManifestReader',
    'PackageManifest',
]
