"""
Service layer for cratos.

Services orchestrate infrastructure and domain objects:
- ModuleDiscovery: Finds module directories under root paths
- ModuleInfoAggregator: Builds ModuleRecords from manifests and git status
"""

from .discovery_service import ModuleDiscovery, read_directory, IGNORE_DIRS
from .module_service import ModuleInfoAggregator

__all__ = [
    'ModuleDiscovery',
    'read_directory',
    'IGNORE_DIRS',
    'ModuleInfoAggregator',
]
