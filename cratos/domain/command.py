"""
Command selection for cratos.

Maps parsed argv onto one of a closed set of commands using a fixed
precedence order; the first matching rule wins.
"""

from enum import Enum

from ..argv import ParsedArgv


class Command(Enum):
    VERSION = "version"
    HELP = "help"
    LIST = "list"
    STATUS = "status"
    BRANCH = "branch"
    UNKNOWN = "unknown"

    @classmethod
    def from_argv(cls, parsed: ParsedArgv) -> "Command":
        """
        Select the command for parsed argv.

        Precedence:
        1. --version / -v
        2. --help / -h, or no positional arguments
        3. list / ls
        4. status / s
        5. branch / b
        Anything else is UNKNOWN.
        """
        if parsed.has_flag('--version', '-v'):
            return cls.VERSION
        if parsed.has_flag('--help', '-h') or not parsed.arguments:
            return cls.HELP
        return COMMAND_ALIASES.get(parsed.arguments[0], cls.UNKNOWN)

    @property
    def walks_modules(self) -> bool:
        """True for the commands that discover and aggregate modules."""
        return self in (Command.LIST, Command.STATUS, Command.BRANCH)


COMMAND_ALIASES = {
    'list': Command.LIST,
    'ls': Command.LIST,
    'status': Command.STATUS,
    's': Command.STATUS,
    'branch': Command.BRANCH,
    'b': Command.BRANCH,
}
