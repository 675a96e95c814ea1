from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from ..lexer import MaskedSource, code_segments, mask_source
from ..models import FormatOptions


@dataclass
class Transformation:
    start: int
    end: int
    new_content: str
    priority: int = 0


@dataclass
class FormattingContext:
    source: str
    options: FormatOptions
    _masked: Optional[MaskedSource] = field(default=None, repr=False)

    @property
    def masked(self) -> MaskedSource:
        if self._masked is None:
            self._masked = mask_source(self.source)
        return self._masked

    @property
    def lines(self) -> List[str]:
        return self.source.split("\n")

    @property
    def code_lines(self) -> List[str]:
        """Lines with strings replaced by '_' and comments by spaces."""
        return self.masked.lines

    @property
    def line_states(self) -> List[str]:
        """Lexer state at the start of each line (code, string or comment)."""
        return self.masked.line_states


class FormattingRule(ABC):
    experimental = False

    def __init__(self, options: FormatOptions):
        self.options = options

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g. 'F001')."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable rule name (e.g. 'trailing-space')."""

    @abstractmethod
    def analyze(self, context: FormattingContext) -> List[Transformation]:
        """Return the edits this rule wants to make to context.source."""


class CodeRule(FormattingRule):
    """Rewrites code segments only; strings and comments are never touched."""

    def analyze(self, context: FormattingContext) -> List[Transformation]:
        transformations = []
        for start, end in code_segments(context.masked):
            segment = context.source[start:end]
            rewritten = self.rewrite_code(segment)
            if rewritten != segment:
                transformations.append(Transformation(start, end, rewritten))
        return transformations

    @abstractmethod
    def rewrite_code(self, code: str) -> str:
        pass


class LineRule(FormattingRule):
    """Rewrites the source line by line using the masked view for structure."""

    def analyze(self, context: FormattingContext) -> List[Transformation]:
        lines = context.lines
        new_lines = self.rewrite_lines(context, lines, context.code_lines, context.line_states)
        if new_lines == lines:
            return []
        return [Transformation(0, len(context.source), "\n".join(new_lines))]

    @abstractmethod
    def rewrite_lines(
        self, context: FormattingContext, lines: List[str], code: List[str], states: List[str]
    ) -> List[str]:
        pass


def is_blank(line: str) -> bool:
    return not line.strip()
