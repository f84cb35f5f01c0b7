#!/usr/bin/env python3

import os
import logging
import sys
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .exit_codes import ConfigError, RootResolutionError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr) # Default to stderr
    ]
)
logger = logging.getLogger("cratos")

PATH_ENV = "CRATOS_PATH"
HOME_ENV = "HOME"
GIT_TIMEOUT_ENV = "CRATOS_GIT_TIMEOUT"
WORKERS_ENV = "CRATOS_WORKERS"
LOG_LEVEL_ENV = "CRATOS_LOG_LEVEL"

DEFAULT_GIT_TIMEOUT = 30.0
DEFAULT_WORKERS = 8


@dataclass(frozen=True)
class Settings:
    """Tunables read from the environment."""
    git_timeout: float = DEFAULT_GIT_TIMEOUT
    workers: int = DEFAULT_WORKERS
    log_level: str = "INFO"


def _positive_number(environ: Mapping[str, str], name: str, default, cast):
    raw = environ.get(name)
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Settings instance

    Raises:
        ConfigError: If a numeric setting is not a positive number
    """
    if environ is None:
        environ = os.environ

    log_level = environ.get(LOG_LEVEL_ENV, "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"{LOG_LEVEL_ENV} is not a logging level: {log_level!r}")

    return Settings(
        git_timeout=_positive_number(environ, GIT_TIMEOUT_ENV, DEFAULT_GIT_TIMEOUT, float),
        workers=_positive_number(environ, WORKERS_ENV, DEFAULT_WORKERS, int),
        log_level=log_level,
    )


def configure_logging(settings: Settings) -> None:
    """Apply the configured level to the cratos logger."""
    logger.setLevel(settings.log_level)


def resolve_root_spec(
    path_flag: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Tuple[str, ...]:
    """
    Resolve the root directories to search for modules.

    Checks in order:
    1. --path=<value> flag
    2. CRATOS_PATH environment variable
    3. HOME environment variable (logs a warning)

    Exactly one source is used. Values are colon-delimited; each
    segment is resolved to an absolute path.

    Raises:
        RootResolutionError: If none of the three sources is set
    """
    if environ is None:
        environ = os.environ

    if path_flag:
        delimited = path_flag
    elif environ.get(PATH_ENV):
        delimited = environ[PATH_ENV]
    elif environ.get(HOME_ENV):
        logger.warning(f"{PATH_ENV} not set; finding modules from {HOME_ENV}")
        delimited = environ[HOME_ENV]
    else:
        raise RootResolutionError()

    return tuple(os.path.abspath(part) for part in delimited.split(":") if part)
