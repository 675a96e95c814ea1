"""Error hierarchy for the command-line tool.

SwiftFormatError
├── UsageError          bad or missing flag value, conflicting paths
├── FormatIOError       filesystem failures
│   ├── CacheIOError
│   ├── OutputWriteError
│   └── StdinTimeoutError
└── ParseError          the engine rejected its input
"""

from . import exit_codes


class SwiftFormatError(Exception):
    """Base for every error the CLI reports to the user."""

    exit_code = exit_codes.IO_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def render(self) -> str:
        return f"error: {self.message}"


class UsageError(SwiftFormatError):
    exit_code = exit_codes.USAGE_ERROR


class FormatIOError(SwiftFormatError):
    exit_code = exit_codes.IO_ERROR


class CacheIOError(FormatIOError):
    pass


class OutputWriteError(FormatIOError):
    pass


class StdinTimeoutError(FormatIOError):
    """The background stdin task did not finish within the allowed time."""


class ParseError(SwiftFormatError):
    exit_code = exit_codes.PARSE_ERROR
