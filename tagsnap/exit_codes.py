"""
Standard exit codes for tagsnap.

Following Unix/POSIX conventions for command-line tools.
"""

# Standard POSIX exit codes
GENERAL_ERROR = 1        # General errors

# Application-specific exit codes (64-113 are typically available)
TAG_NOT_FOUND = 64       # Requested start tag is not among the enumerated tags
GIT_ERROR = 65           # A fatal git query failed (e.g. tag enumeration)
CONFIG_ERROR = 66        # Configuration file error
INTERRUPTED = 130        # Terminated by Ctrl+C (SIGINT)

# Exit code mappings for common exceptions
EXCEPTION_EXIT_CODES = {
    'CalledProcessError': GIT_ERROR,
    'FileNotFoundError': GENERAL_ERROR,
}


def get_exit_code_for_exception(exc: BaseException) -> int:
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


class TagNotFoundError(CommandError):
    """Raised when --start-from names a tag that was not enumerated."""
    def __init__(self, tag: str):
        super().__init__(f"Version {tag} not found", TAG_NOT_FOUND)
        self.tag = tag


class TagEnumerationError(CommandError):
    """Raised when the source repository's tags cannot be listed."""
    def __init__(self, message: str):
        super().__init__(message, GIT_ERROR)


class ConfigError(CommandError):
    """Raised when there's a configuration error."""
    def __init__(self, message: str):
        super().__init__(message, CONFIG_ERROR)
