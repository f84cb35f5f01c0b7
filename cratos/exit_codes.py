"""
Standard exit codes for cratos commands.

Following Unix/POSIX conventions for command-line tools.
"""
from typing import Optional

# Standard POSIX exit codes
SUCCESS = 0              # Successful termination
GENERAL_ERROR = 1        # General errors

# Application-specific exit codes (64-113 are typically available)
CONFIG_ERROR = 66        # No root source or invalid settings
PERMISSION_ERROR = 67    # Insufficient permissions
DATA_ERROR = 70          # Manifest format or validation error
VCS_ERROR = 72           # git reported a failure
INTERRUPTED = 130        # Terminated by Ctrl+C (SIGINT)

# Exit code mappings for common exceptions
EXCEPTION_EXIT_CODES = {
    'FileNotFoundError': GENERAL_ERROR,
    'PermissionError': PERMISSION_ERROR,
    'ValueError': DATA_ERROR,
    'KeyError': DATA_ERROR,
    'JSONDecodeError': DATA_ERROR,
    'KeyboardInterrupt': INTERRUPTED,
}


def get_exit_code_for_exception(exc: Exception) -> int:
    """
    Get the appropriate exit code for an exception.

    Args:
        exc: The exception that occurred

    Returns:
        Appropriate exit code
    """
    if isinstance(exc, CommandError):
        return exc.exit_code
    exc_name = exc.__class__.__name__
    return EXCEPTION_EXIT_CODES.get(exc_name, GENERAL_ERROR)


class CommandError(Exception):
    """
    Exception that commands can raise to indicate specific exit codes.
    """
    def __init__(self, message: str, exit_code: int = GENERAL_ERROR):
        super().__init__(message)
        self.exit_code = exit_code


class ConfigError(CommandError):
    """Raised when a setting from the environment is invalid."""
    def __init__(self, message: str):
        super().__init__(message, CONFIG_ERROR)


class RootResolutionError(ConfigError):
    """Raised when no --path flag, CRATOS_PATH or HOME is available."""
    def __init__(self, message: str = (
        "no entrypoint found; CRATOS_PATH or HOME environment variables required"
    )):
        super().__init__(message)


class ManifestError(CommandError):
    """Raised when a module's package.json is missing or unparsable."""
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, DATA_ERROR)
        self.path = path


class VcsError(CommandError):
    """Raised when git fails for a module. The message is git's stderr."""
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, VCS_ERROR)
        self.path = path
