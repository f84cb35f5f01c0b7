#!/usr/bin/env python3

import sys

import click

from cratos.argv import ParsedArgv, parse_argv
from cratos.commands import CommandDispatcher
from cratos.cli_utils import standard_command
from cratos.config import configure_logging, load_settings
from cratos.domain import Command
from cratos.infra import GitClient
from cratos.services import ModuleDiscovery, ModuleInfoAggregator

# Tokens parse_argv treats as the invocation prefix
PROGRAM_PREFIX = ("python", "cratos")

CONTEXT_SETTINGS = {
    'ignore_unknown_options': True,
    'allow_extra_args': True,
}


def build_dispatcher(parsed: ParsedArgv) -> CommandDispatcher:
    """
    Create the dispatcher for parsed argv.

    Settings from the environment are only read for commands that walk
    modules, so a bad CRATOS_WORKERS cannot break --version or --help.
    """
    if not Command.from_argv(parsed).walks_modules:
        return CommandDispatcher()

    settings = load_settings()
    configure_logging(settings)
    return CommandDispatcher(
        discovery=ModuleDiscovery(max_workers=settings.workers),
        aggregator=ModuleInfoAggregator(
            git_client=GitClient(timeout=settings.git_timeout),
            max_workers=settings.workers,
        ),
    )


@click.command(name='cratos', context_settings=CONTEXT_SETTINGS, add_help_option=False)
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@standard_command
def cli(tokens):
    """cratos - list, status and branch for git + package.json modules.

    Flags and commands are interpreted by cratos itself; run
    `cratos --help` for the command list.
    """
    parsed = parse_argv(PROGRAM_PREFIX + tuple(tokens))
    return build_dispatcher(parsed).run(parsed)


def main():
    cli()

if __name__ == "__main__":
    sys.exit(main() or 0)
