from .batch import BatchProcessor
from .engine import FormatterEngine
from .errors import CacheError, FormatError, FormatWriteError
from .inference import command_line_arguments, format_arguments, infer_options
from .models import BatchResults, ErrorKind, FileError, FormatOptions, FormatResult, IndentMode

__all__ = [
    "BatchProcessor",
    "BatchResults",
    "CacheError",
    "ErrorKind",
    "FileError",
    "FormatError",
    "FormatOptions",
    "FormatResult",
    "FormatWriteError",
    "FormatterEngine",
    "IndentMode",
    "command_line_arguments",
    "format_arguments",
    "infer_options",
]
