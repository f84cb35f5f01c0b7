"""Command dispatch and usage text for the cratos CLI."""

from .dispatch import CommandDispatcher
from .usage import USAGE, get_usage

__all__ = ['CommandDispatcher', 'USAGE', 'get_usage']
