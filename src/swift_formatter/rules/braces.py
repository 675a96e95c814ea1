import re
from typing import List

from ..lexer import CODE
from .base import FormattingContext, LineRule, is_blank
from .keywords import DECLARATION_KEYWORDS, STATEMENT_KEYWORDS, first_keyword

_CLOSE_THEN_CONTINUATION = re.compile(r"^(\s*\})\s*(?=(else|catch)\b)")
_CONTINUATION = re.compile(r"(else|catch)\b")


class BraceStyleRule(LineRule):
    """K&R braces by default, Allman braces with --allman true."""

    @property
    def rule_id(self) -> str: return "F008"
    @property
    def name(self) -> str: return "brace-style"

    def rewrite_lines(self, context: FormattingContext, lines: List[str], code: List[str], states: List[str]) -> List[str]:
        if self.options.allman_braces:
            return self._allman(lines, code, states)
        return self._knr(lines, code, states)

    def _knr(self, lines, code, states):
        result, result_code = [], []
        for line, code_line, state in zip(lines, code, states):
            stripped = code_line.strip()
            if state == CODE and result and not is_blank(result[-1]):
                prev, prev_code = result[-1], result_code[-1]
                ends_in_code = len(prev.rstrip()) == len(prev_code.rstrip())
                if line.strip() == "{" and ends_in_code and prev_code.rstrip()[-1] not in "{};,":
                    result[-1] = prev.rstrip() + " {"
                    result_code[-1] = prev_code.rstrip() + " {"
                    continue
                if _CONTINUATION.match(stripped) and prev.strip() == "}" and prev_code.strip() == "}":
                    result[-1] = prev.rstrip() + " " + line.lstrip()
                    result_code[-1] = prev_code.rstrip() + " " + code_line.lstrip()
                    continue
            result.append(line)
            result_code.append(code_line)
        return result

    def _allman(self, lines, code, states):
        result = []
        for line, code_line, state in zip(lines, code, states):
            if state != CODE:
                result.append(line)
                continue
            match = _CLOSE_THEN_CONTINUATION.match(code_line)
            if match:
                result.append(line[:match.end(1)])
                line, code_line = line[match.end():], code_line[match.end():]
            end = len(code_line.rstrip())
            if (
                end > 1
                and code_line[end - 1] == "{"
                and code_line[:end - 1].strip()
                and first_keyword(code_line[:end - 1]) in DECLARATION_KEYWORDS | STATEMENT_KEYWORDS
            ):
                indent = line[:len(line) - len(line.lstrip())]
                result.append(line[:end - 1].rstrip())
                result.append(indent + "{" + line[end:])
                continue
            result.append(line)
        return result
