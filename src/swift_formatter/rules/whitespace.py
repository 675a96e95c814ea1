from typing import List

from ..lexer import CODE, STRING
from .base import FormattingContext, LineRule, is_blank
from .keywords import is_declaration


class TrailingSpaceRule(LineRule):
    """Removes trailing whitespace; whitespace-only lines follow --trimwhitespace."""

    @property
    def rule_id(self) -> str: return "F001"
    @property
    def name(self) -> str: return "trailing-space"

    def rewrite_lines(self, context: FormattingContext, lines: List[str], code: List[str], states: List[str]) -> List[str]:
        result = []
        for line, state in zip(lines, states):
            if state == STRING:
                result.append(line)
            elif is_blank(line):
                result.append("" if self.options.truncate_blank_lines else line)
            else:
                result.append(line.rstrip())
        return result


class BlankLinesRule(LineRule):
    """Collapses runs of blank lines and manages blank lines around scopes."""

    @property
    def rule_id(self) -> str: return "F002"
    @property
    def name(self) -> str: return "blank-lines"

    def rewrite_lines(self, context: FormattingContext, lines: List[str], code: List[str], states: List[str]) -> List[str]:
        kept = []  # (line, code) pairs
        for line, code_line, state in zip(lines, code, states):
            if state != STRING and is_blank(line):
                if not kept and not self.options.fragment:
                    continue
                if kept and is_blank(kept[-1][0]):
                    continue
                if self.options.remove_blank_lines and kept and kept[-1][1].rstrip().endswith("{"):
                    continue
                kept.append((line, code_line))
                continue

            if state == CODE and self.options.remove_blank_lines and code_line.strip().startswith("}"):
                while kept and is_blank(kept[-1][0]):
                    kept.pop()

            if (
                state == CODE
                and self.options.insert_blank_lines
                and kept
                and kept[-1][1].strip() == "}"
                and is_declaration(code_line)
            ):
                kept.append(("", ""))

            kept.append((line, code_line))
        return [line for line, _ in kept]


class HeaderRule(LineRule):
    """Strips the comment block at the top of a file when --header strip is set."""

    @property
    def rule_id(self) -> str: return "F003"
    @property
    def name(self) -> str: return "file-header"

    def rewrite_lines(self, context: FormattingContext, lines: List[str], code: List[str], states: List[str]) -> List[str]:
        if not self.options.strip_header or self.options.fragment:
            return lines
        end = 0
        while end < len(lines) and lines[end].strip() and not code[end].strip():
            end += 1
        if end == 0:
            return lines
        # Comments attached to the first declaration are doc comments, not a header.
        if end < len(lines) and not is_blank(lines[end]):
            return lines
        while end < len(lines) and is_blank(lines[end]):
            end += 1
        return lines[end:]
