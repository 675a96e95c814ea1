from typing import List

from ..models import FormatOptions
from .base import CodeRule, FormattingContext, FormattingRule, LineRule, Transformation
from .braces import BraceStyleRule
from .experimental import RedundantParensRule
from .indentation import IndentationRule
from .punctuation import SemicolonRule, TrailingCommaRule
from .spacing import HexLiteralRule, OperatorSpacingRule, RangeOperatorRule, VoidRule
from .whitespace import BlankLinesRule, HeaderRule, TrailingSpaceRule


def default_rules(options: FormatOptions) -> List[FormattingRule]:
    """The rule set in application order. Indentation always runs last."""
    return [
        HeaderRule(options),
        SemicolonRule(options),
        OperatorSpacingRule(options),
        RangeOperatorRule(options),
        HexLiteralRule(options),
        VoidRule(options),
        RedundantParensRule(options),
        TrailingCommaRule(options),
        BraceStyleRule(options),
        BlankLinesRule(options),
        TrailingSpaceRule(options),
        IndentationRule(options),
    ]


__all__ = [
    "BlankLinesRule",
    "BraceStyleRule",
    "CodeRule",
    "FormattingContext",
    "FormattingRule",
    "HeaderRule",
    "HexLiteralRule",
    "IndentationRule",
    "LineRule",
    "OperatorSpacingRule",
    "RangeOperatorRule",
    "RedundantParensRule",
    "SemicolonRule",
    "TrailingCommaRule",
    "TrailingSpaceRule",
    "Transformation",
    "VoidRule",
    "default_rules",
]
