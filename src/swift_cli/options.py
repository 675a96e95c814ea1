"""Maps flag values onto FormatOptions.

OPTION_TABLE is the whole vocabulary: for each flag, the FormatOptions field
it sets and either a table of accepted (lowercase) values or a parser.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from swift_formatter.models import FormatOptions, IndentMode

from .arguments import RawArguments
from .exceptions import UsageError


@dataclass(frozen=True)
class OptionSpec:
    field: str
    values: Mapping[str, Any] = field(default_factory=dict)
    parse: Callable[[str], Any] | None = None

    def convert(self, value: str) -> Any:
        """Map a lowercased value to the field value; ValueError if not accepted."""
        if self.parse is not None:
            return self.parse(value)
        try:
            return self.values[value]
        except KeyError:
            raise ValueError(value) from None


def _switch(on, off) -> dict[str, bool]:
    values = {name: True for name in on}
    values.update({name: False for name in off})
    return values


def _parse_indent(value: str) -> str:
    if value in ("tab", "tabs", "tabbed"):
        return "\t"
    if value.isascii() and value.isdigit():
        return " " * int(value)
    raise ValueError(value)


OPTION_TABLE: dict[str, OptionSpec] = {
    "indent": OptionSpec("indent", parse=_parse_indent),
    "allman": OptionSpec("allman_braces", _switch(("true", "enabled"), ("false", "disabled"))),
    "semicolons": OptionSpec("allow_inline_semicolons", _switch(("inline",), ("never", "false"))),
    "commas": OptionSpec("trailing_commas", _switch(("always", "true"), ("inline", "false"))),
    "comments": OptionSpec("indent_comments", _switch(("indent", "indented"), ("ignore",))),
    "linebreaks": OptionSpec("linebreak", {"cr": "\r", "lf": "\n", "crlf": "\r\n"}),
    "ranges": OptionSpec("space_around_range_operators", _switch(("space", "spaced", "spaces"), ("nospace",))),
    "empty": OptionSpec("use_void", _switch(("void",), ("tuple", "tuples"))),
    "trimwhitespace": OptionSpec(
        "truncate_blank_lines",
        _switch(
            ("always",),
            (
                "nonblank-lines", "nonblank", "non-blank-lines", "non-blank",
                "nonempty-lines", "nonempty", "non-empty-lines", "non-empty",
            ),
        ),
    ),
    "insertlines": OptionSpec("insert_blank_lines", _switch(("enabled", "true"), ("disabled", "false"))),
    "removelines": OptionSpec("remove_blank_lines", _switch(("enabled", "true"), ("disabled", "false"))),
    "header": OptionSpec("strip_header", _switch(("strip",), ("ignore",))),
    "ifdef": OptionSpec("ifdef_indent", parse=IndentMode),
    "hexliterals": OptionSpec("uppercase_hex", _switch(("uppercase", "upper"), ("lowercase", "lower"))),
    "experimental": OptionSpec("experimental_rules", _switch(("enabled", "true"), ("disabled", "false"))),
    "fragment": OptionSpec("fragment", _switch(("true", "enabled"), ("false", "disabled"))),
}


def resolve_options(arguments: RawArguments) -> FormatOptions:
    """Build FormatOptions from the flags present in arguments.

    Raises UsageError on the first empty or unsupported value; nothing is
    returned in that case, so a partly applied configuration never escapes.
    """
    options = FormatOptions()
    for key, spec in OPTION_TABLE.items():
        value = arguments.get(key)
        if value is None:
            continue
        if not value:
            raise UsageError(f"--{key} option expects a value.")
        try:
            setattr(options, spec.field, spec.convert(value.lower()))
        except ValueError:
            raise UsageError(f"unsupported --{key} value: {value}.") from None
    return options
