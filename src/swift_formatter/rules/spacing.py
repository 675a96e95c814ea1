import re

from .base import CodeRule

_INFIX_OPERATOR = re.compile(
    r"[ \t]*(?<![<>!=+\-*/%&|^~.?])(===|!==|==|!=|<=|>=|\+=|-=|\*=|/=|%=|&&|\|\||=)(?!=)[ \t]*"
)
_RANGE_OPERATOR = re.compile(r"([\w)\]])[ \t]*(\.\.\.|\.\.<)[ \t]*([\w(\[-])")
_HEX_LITERAL = re.compile(r"\b0x([0-9A-Fa-f_]+)\b")
_EMPTY_TUPLE_RETURN = re.compile(r"->[ \t]*\([ \t]*\)")
_VOID_RETURN = re.compile(r"->[ \t]*Void\b")


class OperatorSpacingRule(CodeRule):
    """Puts exactly one space around assignment, comparison and logical operators."""

    @property
    def rule_id(self) -> str: return "F004"
    @property
    def name(self) -> str: return "operator-spacing"

    def rewrite_code(self, code: str) -> str:
        return _INFIX_OPERATOR.sub(lambda m: f" {m.group(1)} ", code)


class RangeOperatorRule(CodeRule):
    @property
    def rule_id(self) -> str: return "F005"
    @property
    def name(self) -> str: return "range-operators"

    def rewrite_code(self, code: str) -> str:
        if self.options.space_around_range_operators:
            return _RANGE_OPERATOR.sub(r"\1 \2 \3", code)
        return _RANGE_OPERATOR.sub(r"\1\2\3", code)


class HexLiteralRule(CodeRule):
    @property
    def rule_id(self) -> str: return "F006"
    @property
    def name(self) -> str: return "hex-literals"

    def rewrite_code(self, code: str) -> str:
        def recase(match):
            digits = match.group(1)
            return "0x" + (digits.upper() if self.options.uppercase_hex else digits.lower())
        return _HEX_LITERAL.sub(recase, code)


class VoidRule(CodeRule):
    """Writes empty return types as 'Void' or '()'."""

    @property
    def rule_id(self) -> str: return "F007"
    @property
    def name(self) -> str: return "void"

    def rewrite_code(self, code: str) -> str:
        if self.options.use_void:
            return _EMPTY_TUPLE_RETURN.sub("-> Void", code)
        return _VOID_RETURN.sub("-> ()", code)
