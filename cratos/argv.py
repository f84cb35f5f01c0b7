"""
Command-line token classification for cratos.

cratos owns its own small flag grammar instead of delegating to click's
option parser, so unknown long options are dropped rather than rejected.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

FLAGS = frozenset({
    '-h', '--help',
    '-n', '--dry-run',
    '-v', '--version',
    '--path',
})

# interpreter + script, e.g. ("python", "cratos")
INVOCATION_PREFIX = 2


@dataclass(frozen=True)
class ParsedArgv:
    """Positional arguments and recognized flags, in input order."""
    arguments: Tuple[str, ...] = ()
    flags: Tuple[str, ...] = ()

    def has_flag(self, *names: str) -> bool:
        """True if any of the exact flag tokens in names was given."""
        return any(flag in names for flag in self.flags)


def is_flag(token: str) -> bool:
    """A token is a flag if its part before any '=' is a recognized flag."""
    return token.split('=', 1)[0] in FLAGS


def parse_argv(tokens: Iterable[str]) -> ParsedArgv:
    """
    Classify raw tokens into arguments and flags.

    Tokens starting with '-' that are not recognized flags are dropped.
    The first two positional tokens are the invocation prefix and are
    not reported as arguments.

    Args:
        tokens: Full argv including the invocation prefix

    Returns:
        ParsedArgv
    """
    tokens = list(tokens)
    arguments = [t for t in tokens if not t.startswith('-') and not is_flag(t)]
    flags = [t for t in tokens if is_flag(t)]
    return ParsedArgv(
        arguments=tuple(arguments[INVOCATION_PREFIX:]),
        flags=tuple(flags),
    )


def flag_value(parsed: ParsedArgv, name: str) -> Optional[str]:
    """Return the value of the last ``name=value`` flag, or None."""
    value = None
    for flag in parsed.flags:
        key, sep, rest = flag.partition('=')
        if key == name and sep:
            value = rest
    return value
