import re
from typing import List

from ..lexer import CODE
from .base import FormattingContext, LineRule

_PARENTHESIZED_CONDITION = re.compile(
    r"^(\s*(?:\}\s*)?(?:else\s+)?(?:if|while|switch|guard)[ \t]*)\((.*)\)([ \t]*(?:\{|else\b).*)$"
)


def _wraps_whole(inner: str) -> bool:
    depth = 0
    for c in inner:
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


class RedundantParensRule(LineRule):
    """Removes parentheses around if/while/switch/guard conditions."""

    experimental = True

    @property
    def rule_id(self) -> str: return "X001"
    @property
    def name(self) -> str: return "redundant-parens"

    def rewrite_lines(self, context: FormattingContext, lines: List[str], code: List[str], states: List[str]) -> List[str]:
        result = []
        for line, code_line, state in zip(lines, code, states):
            match = _PARENTHESIZED_CONDITION.match(code_line) if state == CODE else None
            if match:
                inner = code_line[match.start(2):match.end(2)]
                if inner.strip() and "{" not in inner and _wraps_whole(inner):
                    line = (
                        line[:match.end(1)].rstrip() + " "
                        + line[match.start(2):match.end(2)].strip() + " "
                        + line[match.start(3):].lstrip()
                    )
            result.append(line)
        return result
