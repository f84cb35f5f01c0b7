"""
Module information aggregation for cratos.

Combines a module's package manifest with its git status into a single
ModuleRecord. A record is only produced when both sources succeed.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional
import logging

from ..domain import ModuleRecord
from ..infra import GitClient, ManifestReader

logger = logging.getLogger(__name__)


class ModuleInfoAggregator:
    """
    Builds ModuleRecords for discovered module paths.

    Example:
        aggregator = ModuleInfoAggregator()
        record = aggregator.aggregate("/path/to/module")
        print(record.package_name, record.git_status_branch)
    """

    def __init__(
        self,
        git_client: Optional[GitClient] = None,
        manifest_reader: Optional[ManifestReader] = None,
        max_workers: int = 8,
    ):
        """
        Initialize ModuleInfoAggregator.

        Args:
            git_client: Git client instance (creates default if None)
            manifest_reader: Manifest reader instance (creates default if None)
            max_workers: Modules aggregated at once by aggregate_all
        """
        self.git = git_client or GitClient()
        self.manifests = manifest_reader or ManifestReader()
        self.max_workers = max_workers

    def aggregate(self, path: str) -> ModuleRecord:
        """
        Read the manifest and git status of one module concurrently.

        Args:
            path: Absolute module path

        Returns:
            ModuleRecord

        Raises:
            ManifestError: If package.json is missing or invalid
            VcsError: If git status fails
        """
        with ThreadPoolExecutor(max_workers=2) as executor:
            manifest_future = executor.submit(self.manifests.read, path)
            status_future = executor.submit(self.git.status_porcelain, path)
            manifest = manifest_future.result()
            status = status_future.result()

        return ModuleRecord(
            path=path,
            package_name=manifest.name,
            package_version=manifest.version,
            git_status_branch=status.branch,
            git_status_files=status.files,
        )

    def aggregate_all(self, paths: Iterable[str]) -> List[ModuleRecord]:
        """
        Aggregate many modules concurrently.

        Returns:
            Records in the same order as paths

        Raises:
            ManifestError, VcsError: The first failure, in path order
        """
        paths = list(paths)
        if not paths:
            return []
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            records = list(executor.map(self.aggregate, paths))
        logger.debug(f"Aggregated {len(records)} modules")
        return records
