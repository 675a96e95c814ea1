from pathlib import Path


class FormatError(Exception):
    """Raised when the engine cannot make sense of its input."""

    def __init__(self, message: str, line: int = 0):
        super().__init__(message)
        self.line = line


class FormatWriteError(OSError):
    """Raised when formatted output cannot be written to disk."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"failed to write file: {path}, {reason}")
        self.path = path


class CacheError(OSError):
    """Raised when the incremental cache cannot be opened or updated."""
