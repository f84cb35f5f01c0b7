"""
cratos - list, status and branch across git + package.json modules.

cratos walks one or more root directories looking for modules: directories
holding both a .git directory and a package.json manifest. For every module
it reads the package name and version and the git working-tree status.

Quick Start:
    from cratos import ModuleDiscovery, ModuleInfoAggregator

    paths = ModuleDiscovery().discover_all(["~/code"])
    for record in ModuleInfoAggregator().aggregate_all(paths):
        print(record.package_name, record.git_status_branch)

Commands:
    cratos list      name-version per module
    cratos status    one line per changed file per module
    cratos branch    branch description per module

Roots come from --path=<path>, else CRATOS_PATH, else HOME.
"""

__version__ = "0.0.2"

# Domain objects
from .domain import ModuleRecord, DirectoryNode, Command

# Argv handling
from .argv import ParsedArgv, parse_argv

# Services
from .services import ModuleDiscovery, ModuleInfoAggregator
from .commands import CommandDispatcher, get_usage

# Configuration
from .config import resolve_root_spec, load_settings

# Errors
from .exit_codes import CommandError, RootResolutionError, ManifestError, VcsError

__all__ = [
    # Version
    "__version__",
    # Domain objects
    "ModuleRecord",
    "DirectoryNode",
    "Command",
    # Argv handling
    "ParsedArgv",
    "parse_argv",
    # Services
    "ModuleDiscovery",
    "ModuleInfoAggregator",
    "CommandDispatcher",
    "get_usage",
    # Configuration
    "resolve_root_spec",
    "load_settings",
    # Errors
    "CommandError",
    "RootResolutionError",
    "ManifestError",
    "VcsError",
]
