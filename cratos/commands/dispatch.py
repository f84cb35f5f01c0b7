"""
Command dispatch for cratos.

Selects a command from parsed argv and produces its output lines. The
list, status and branch commands each discover modules under the configured
roots, aggregate every module, and format one line per record.
"""

from typing import Iterator, List, Mapping, Optional
import logging

from .. import __version__
from ..argv import ParsedArgv, flag_value
from ..config import resolve_root_spec
from ..domain import Command, ModuleRecord
from ..services import ModuleDiscovery, ModuleInfoAggregator
from .usage import USAGE

logger = logging.getLogger(__name__)


class CommandDispatcher:
    """
    Runs the command selected by parsed argv.

    Example:
        dispatcher = CommandDispatcher()
        for line in dispatcher.run(parse_argv(sys.argv)):
            print(line)
    """

    def __init__(
        self,
        discovery: Optional[ModuleDiscovery] = None,
        aggregator: Optional[ModuleInfoAggregator] = None,
        environ: Optional[Mapping[str, str]] = None,
        version: str = __version__,
    ):
        """
        Initialize CommandDispatcher.

        Args:
            discovery: Module discovery (creates default if None)
            aggregator: Module aggregator (creates default if None)
            environ: Environment mapping for root resolution (os.environ if None)
            version: Version reported by --version
        """
        self.discovery = discovery or ModuleDiscovery()
        self.aggregator = aggregator or ModuleInfoAggregator()
        self.environ = environ
        self.version = version

    def find_modules(self, parsed: ParsedArgv) -> List[ModuleRecord]:
        """
        Discover and aggregate every module under the resolved roots.

        Raises:
            RootResolutionError: If no root source is available
            ManifestError, VcsError: If any module fails to aggregate
        """
        roots = resolve_root_spec(flag_value(parsed, '--path'), self.environ)
        logger.debug(f"Searching roots: {', '.join(roots)}")
        paths = self.discovery.discover_all(roots)
        return self.aggregator.aggregate_all(paths)

    def command_list(self, parsed: ParsedArgv) -> Iterator[str]:
        for record in self.find_modules(parsed):
            yield record.identifier

    def command_status(self, parsed: ParsedArgv) -> Iterator[str]:
        for record in self.find_modules(parsed):
            for file in record.git_status_files:
                yield f"{record.package_name} {file}"

    def command_branch(self, parsed: ParsedArgv) -> Iterator[str]:
        for record in self.find_modules(parsed):
            yield f"{record.package_name} {record.git_status_branch}"

    def run(self, parsed: ParsedArgv) -> Iterator[str]:
        """
        Produce the output lines for parsed argv.

        Unknown commands yield a diagnostic followed by the usage text;
        they are not an error.
        """
        if parsed.has_flag('--dry-run', '-n'):
            logger.debug("Dry run requested; list, status and branch are read-only")

        command = Command.from_argv(parsed)
        logger.debug(f"Dispatching {command.value}")

        if command is Command.VERSION:
            yield f"v{self.version}"
        elif command is Command.HELP:
            yield USAGE
        elif command is Command.LIST:
            yield from self.command_list(parsed)
        elif command is Command.STATUS:
            yield from self.command_status(parsed)
        elif command is Command.BRANCH:
            yield from self.command_branch(parsed)
        else:
            yield f"{parsed.arguments[0]} is not a cratos command\n{USAGE}"
