import re
from typing import List, Tuple

from ..lexer import CLOSERS, COMMENT, OPENERS, STRING
from ..models import IndentMode
from .base import FormattingContext, LineRule

_DIRECTIVE = re.compile(r"#(if|elseif|else|endif)\b")
_CASE_LABEL = re.compile(r"(case\b|default\s*:)")
_SWITCH = re.compile(r"\s*(\}\s*)?switch\b")


class _Scope:
    """One indentation level. A line opening several brackets adds a single level."""

    def __init__(self, open_count: int, is_switch: bool):
        self.open_count = open_count
        self.is_switch = is_switch


class IndentationRule(LineRule):
    """Re-indents every code line from bracket depth.

    Lines inside multiline strings are left alone. Block comment bodies are
    re-indented only with --comments indent. Switch cases sit at the level
    of their switch, and chained lines starting with '.' get one extra
    level. #if/#else/#endif follow --ifdef.
    """

    @property
    def rule_id(self) -> str: return "F011"
    @property
    def name(self) -> str: return "indentation"

    def rewrite_lines(self, context: FormattingContext, lines: List[str], code: List[str], states: List[str]) -> List[str]:
        unit = self.options.indent
        mode = self.options.ifdef_indent
        scopes: List[_Scope] = []
        ifdef_depth = 0
        result = []

        for line, code_line, state in zip(lines, code, states):
            body = line.lstrip()
            if state == STRING or not body:
                self._track(code_line, scopes)
                result.append(line)
                continue

            if state == COMMENT:
                depth = len(scopes) + ifdef_depth
                self._track(code_line, scopes)
                if self.options.indent_comments:
                    line = unit * depth + (" " if body.startswith("*") else "") + body
                result.append(line)
                continue

            stripped = code_line.strip()
            directive = _DIRECTIVE.match(stripped)
            if directive:
                kind = directive.group(1)
                if mode is IndentMode.OUTDENT:
                    depth = 0
                elif mode is IndentMode.NOINDENT:
                    depth = len(scopes)
                elif kind == "if":
                    depth = len(scopes) + ifdef_depth
                    ifdef_depth += 1
                elif kind == "endif":
                    ifdef_depth = max(ifdef_depth - 1, 0)
                    depth = len(scopes) + ifdef_depth
                else:
                    depth = len(scopes) + max(ifdef_depth - 1, 0)
                result.append(unit * depth + body)
                continue

            depth, in_switch = self._track(code_line, scopes)
            depth += ifdef_depth
            if in_switch and _CASE_LABEL.match(stripped):
                depth -= 1
            elif stripped.startswith(".") and not stripped.startswith(".."):
                depth += 1
            result.append(unit * max(depth, 0) + body)
        return result

    def _track(self, code_line: str, scopes: List[_Scope]) -> Tuple[int, bool]:
        """Update scopes for one line; return the line's depth and whether it sits directly in a switch."""
        opened = 0
        depth = None
        in_switch = False
        for c in code_line:
            if depth is None and not c.isspace() and c not in CLOSERS:
                depth = len(scopes)
                in_switch = bool(scopes) and scopes[-1].is_switch
            if c in OPENERS:
                opened += 1
            elif c in CLOSERS:
                if opened:
                    opened -= 1
                elif scopes:
                    scopes[-1].open_count -= 1
                    if scopes[-1].open_count == 0:
                        scopes.pop()
        if depth is None:
            depth = len(scopes)
            in_switch = bool(scopes) and scopes[-1].is_switch
        if opened:
            scopes.append(_Scope(opened, is_switch=bool(_SWITCH.match(code_line))))
        return depth, in_switch
