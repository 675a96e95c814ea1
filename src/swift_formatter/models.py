from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


class IndentMode(str, Enum):
    """How lines between #if/#else/#endif are indented."""
    INDENT = "indent"
    NOINDENT = "noindent"
    OUTDENT = "outdent"


class ErrorKind(str, Enum):
    """Whether a file failed because of the filesystem or because its source was rejected."""
    IO = "io"
    PARSE = "parse"


@dataclass
class FormatOptions:
    indent: str = "    "
    allman_braces: bool = False
    allow_inline_semicolons: bool = True
    trailing_commas: bool = True
    indent_comments: bool = True
    linebreak: str = "\n"
    space_around_range_operators: bool = True
    use_void: bool = True
    truncate_blank_lines: bool = True
    insert_blank_lines: bool = True
    remove_blank_lines: bool = True
    strip_header: bool = False
    ifdef_indent: IndentMode = IndentMode.INDENT
    uppercase_hex: bool = True
    experimental_rules: bool = False
    fragment: bool = False

@dataclass
class FormatResult:
    source: str
    modified: bool
    errors: List[str] = field(default_factory=list)

@dataclass
class FileError:
    file_path: Path
    message: str
    kind: ErrorKind = ErrorKind.IO

@dataclass
class BatchResults:
    checked: int = 0
    written: int = 0
    errors: List[FileError] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def count(self, kind: ErrorKind) -> int:
        return sum(1 for error in self.errors if error.kind is kind)
