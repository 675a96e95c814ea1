"""Masks string literals and comments so rules can reason about code only.

``mask_source`` returns a copy of the source with the same length in which
every character inside a comment is replaced with a space and every
character inside a string literal with ``_``. Newlines are always kept, so
masked lines line up column for column with the real ones.
"""
from dataclasses import dataclass
from typing import List

from .errors import FormatError

CODE = "code"
STRING = "string"
COMMENT = "comment"

OPENERS = "{(["
CLOSERS = "})]"
PAIRS = {"}": "{", ")": "(", "]": "["}


@dataclass
class MaskedSource:
    masked: str
    line_states: List[str]
    is_code: List[bool]

    @property
    def lines(self) -> List[str]:
        return self.masked.split("\n")


def _line_of(source: str, offset: int) -> int:
    return source.count("\n", 0, offset) + 1


def _block_comment_end(source: str, start: int) -> int:
    depth = 0
    i = start
    while i < len(source):
        if source.startswith("/*", i):
            depth += 1
            i += 2
        elif source.startswith("*/", i):
            depth -= 1
            i += 2
            if depth == 0:
                return i
        else:
            i += 1
    raise FormatError("unterminated block comment", _line_of(source, start))


def _interpolation_end(source: str, start: int) -> int:
    depth = 1
    i = start
    while i < len(source):
        c = source[i]
        if c == '"':
            i = _string_end(source, i)
            continue
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
            if depth == 0:
                return i + 1
        elif c == "\n":
            break
        i += 1
    raise FormatError("unterminated string interpolation", _line_of(source, start))


def _string_end(source: str, start: int) -> int:
    if source.startswith('"""', start):
        i = start + 3
        while i < len(source):
            if source[i] == "\\":
                i += 2
            elif source.startswith('"""', i):
                return i + 3
            else:
                i += 1
        raise FormatError("unterminated multiline string literal", _line_of(source, start))

    i = start + 1
    while i < len(source):
        c = source[i]
        if c == "\\":
            if source.startswith("\\(", i):
                i = _interpolation_end(source, i + 2)
            else:
                i += 2
            continue
        if c == '"':
            return i + 1
        if c == "\n":
            break
        i += 1
    raise FormatError("unterminated string literal", _line_of(source, start))


def mask_source(source: str) -> MaskedSource:
    """Mask strings and comments. Raises FormatError on unterminated ones."""
    chars = list(source)
    states = [CODE]
    is_code = [True] * len(source)

    def blank(start: int, end: int, fill: str, kind: str) -> None:
        for j in range(start, end):
            if chars[j] == "\n":
                states.append(kind)
            else:
                chars[j] = fill
                is_code[j] = False

    i = 0
    while i < len(source):
        c = source[i]
        if c == "\n":
            states.append(CODE)
            i += 1
        elif source.startswith("//", i):
            end = source.find("\n", i)
            end = len(source) if end == -1 else end
            blank(i, end, " ", COMMENT)
            i = end
        elif source.startswith("/*", i):
            end = _block_comment_end(source, i)
            blank(i, end, " ", COMMENT)
            i = end
        elif c == '"':
            end = _string_end(source, i)
            blank(i, end, "_", STRING)
            i = end
        else:
            i += 1

    return MaskedSource(masked="".join(chars), line_states=states, is_code=is_code)


def check_balanced(source: str, masked: str) -> None:
    """Raise FormatError if brackets in the masked source do not pair up."""
    stack = []
    for offset, c in enumerate(masked):
        if c in OPENERS:
            stack.append((c, offset))
        elif c in CLOSERS:
            if not stack or stack[-1][0] != PAIRS[c]:
                raise FormatError(f"unexpected '{c}'", _line_of(source, offset))
            stack.pop()
    if stack:
        c, offset = stack[-1]
        raise FormatError(f"unbalanced '{c}'", _line_of(source, offset))


def code_segments(masked: MaskedSource):
    """Yield (start, end) spans that are code, not strings or comments."""
    start = None
    for i, is_code in enumerate(masked.is_code):
        if is_code and start is None:
            start = i
        elif not is_code and start is not None:
            yield start, i
            start = None
    if start is not None:
        yield start, len(masked.is_code)
