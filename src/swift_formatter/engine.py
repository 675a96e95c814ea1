from typing import List, Optional

from .errors import FormatError
from .lexer import check_balanced, mask_source
from .models import FormatOptions, FormatResult
from .rules import FormattingContext, FormattingRule, Transformation, default_rules


class FormatterEngine:
    """Core engine for formatting Swift source text through an ordered rule set."""

    def __init__(self, options: FormatOptions, rules: Optional[List[FormattingRule]] = None):
        self.options = options
        self.rules: List[FormattingRule] = list(rules) if rules is not None else default_rules(options)

    def add_rule(self, rule: FormattingRule) -> None:
        """Register a new formatting rule after the existing ones."""
        self.rules.append(rule)

    def format_string(self, source: str) -> FormatResult:
        """Format a source string. Parse failures are reported in FormatResult.errors."""
        current = source.replace("\r\n", "\n").replace("\r", "\n")

        try:
            masked = mask_source(current)
            if not self.options.fragment:
                check_balanced(current, masked.masked)

            max_passes = 2
            for _ in range(max_passes):
                pass_modified = False
                for rule in self.rules:
                    if rule.experimental and not self.options.experimental_rules:
                        continue
                    context = FormattingContext(source=current, options=self.options)
                    transforms = rule.analyze(context)
                    if transforms:
                        new_source = self._apply_transformations(current, transforms)
                        if new_source != current:
                            current = new_source
                            pass_modified = True
                if not pass_modified:
                    break

            current = self._finish(current)
        except FormatError as e:
            message = f"{e} on line {e.line}" if e.line else str(e)
            return FormatResult(source=source, modified=False, errors=[message])

        formatted = current.replace("\n", self.options.linebreak)
        return FormatResult(source=formatted, modified=formatted != source)

    def _finish(self, source: str) -> str:
        """Exactly one linebreak at the end of a whole file; fragments are left open."""
        if self.options.fragment:
            return source
        if not source.strip():
            return ""
        return source.rstrip("\n") + "\n"

    def _apply_transformations(self, source: str, transforms: List[Transformation]) -> str:
        """Applies non-overlapping character-based transformations in a single pass."""
        sorted_transforms = sorted(transforms, key=lambda t: (t.start, t.end, t.priority))
        result = []
        last_offset = 0
        for t in sorted_transforms:
            if t.start < last_offset:
                continue
            result.append(source[last_offset:t.start])
            result.append(t.new_content)
            last_offset = t.end
        result.append(source[last_offset:])
        return "".join(result)
