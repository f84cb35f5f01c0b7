"""
Common CLI utilities and decorators for consistent command behavior.
"""

import sys
import click
from functools import wraps

from .config import logger
from .exit_codes import (
    SUCCESS, INTERRUPTED,
    get_exit_code_for_exception, CommandError
)


def standard_command(func):
    """
    Decorator that provides standard CLI behavior:
    - Lines yielded by the command are echoed to stdout
    - CommandError messages go to stderr with the error's exit code
    - Ctrl+C exits with INTERRUPTED

    Output is written only after the command produced every line, so a
    failing module leaves stdout empty.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            lines = list(func(*args, **kwargs) or [])
        except KeyboardInterrupt:
            click.echo("Interrupted by user", err=True)
            sys.exit(INTERRUPTED)
        except click.ClickException:
            # Click exceptions already have their exit code
            raise
        except CommandError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(e.exit_code)
        except Exception as e:
            logger.debug("Unexpected exception", exc_info=True)
            click.echo(f"Command failed: {type(e).__name__}: {e}", err=True)
            sys.exit(get_exit_code_for_exception(e))

        for line in lines:
            click.echo(line)
        sys.exit(SUCCESS)

    return wrapper
