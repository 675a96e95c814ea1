import re
from typing import List, Optional, Tuple

from ..lexer import CLOSERS, CODE, OPENERS
from .base import FormattingContext, LineRule


class SemicolonRule(LineRule):
    """Drops statement-terminating semicolons; splits inline ones with --semicolons never."""

    @property
    def rule_id(self) -> str: return "F009"
    @property
    def name(self) -> str: return "semicolons"

    def rewrite_lines(self, context: FormattingContext, lines: List[str], code: List[str], states: List[str]) -> List[str]:
        result = []
        for line, code_line, state in zip(lines, code, states):
            if state != CODE:
                result.append(line)
                continue
            end = len(code_line.rstrip())
            if end and code_line[end - 1] == ";":
                line = line[:end - 1].rstrip() + line[end:]
                code_line = code_line[:end - 1].rstrip() + code_line[end:]
            if self.options.allow_inline_semicolons:
                result.append(line)
            else:
                result.extend(self._split_statements(line, code_line))
        return result

    def _split_statements(self, line: str, code_line: str) -> List[str]:
        indent = line[:len(line) - len(line.lstrip())]
        parts = []
        depth = 0
        start = 0
        for index, c in enumerate(code_line):
            if c in OPENERS:
                depth += 1
            elif c in CLOSERS:
                depth -= 1
            elif c == ";" and depth <= 0:
                parts.append(line[start:index].rstrip())
                start = index + 1
        if not parts:
            return [line]
        parts.append(line[start:])
        return [parts[0]] + [indent + part.strip() for part in parts[1:] if part.strip()]


# Words that can precede a collection literal rather than a subscripted value
_LITERAL_CONTEXT = {"return", "in", "case", "try", "await", "throw", "else", "where", "is", "as", "yield"}
_TRAILING_WORD = re.compile(r"([A-Za-z_]\w*)$")


class TrailingCommaRule(LineRule):
    """Adds or removes the comma after the last element of multiline collection literals."""

    @property
    def rule_id(self) -> str: return "F010"
    @property
    def name(self) -> str: return "trailing-commas"

    def rewrite_lines(self, context: FormattingContext, lines: List[str], code: List[str], states: List[str]) -> List[str]:
        result = list(lines)
        for index, code_line in enumerate(code):
            if states[index] != CODE or not code_line.strip().startswith("]"):
                continue
            previous = index - 1
            while previous >= 0 and not code[previous].strip():
                previous -= 1
            if previous < 0 or self._closes_subscript(code, index):
                continue
            end = len(code[previous].rstrip())
            last = code[previous][end - 1]
            if last in "[(:{":
                continue
            if self.options.trailing_commas and last != ",":
                result[previous] = result[previous][:end] + "," + result[previous][end:]
            elif not self.options.trailing_commas and last == ",":
                result[previous] = result[previous][:end - 1] + result[previous][end:]
        return result

    @staticmethod
    def _find_opener(code: List[str], index: int) -> Optional[Tuple[int, int]]:
        """Line and column of the '[' matched by the ']' that starts line ``index``."""
        depth = 0
        column = code[index].index("]")
        while index >= 0:
            text = code[index]
            for position in range(column, -1, -1):
                c = text[position]
                if c in CLOSERS:
                    depth += 1
                elif c in OPENERS:
                    depth -= 1
                    if depth == 0:
                        return index, position
            index -= 1
            column = len(code[index]) - 1 if index >= 0 else -1
        return None

    def _closes_subscript(self, code: List[str], index: int) -> bool:
        opener = self._find_opener(code, index)
        if opener is None:
            return False
        line, column = opener
        before = code[line][:column].rstrip()
        if not before:
            return False
        if before[-1] in ")]?!":
            return True
        word = _TRAILING_WORD.search(before)
        return word is not None and word.group(1) not in _LITERAL_CONTEXT
