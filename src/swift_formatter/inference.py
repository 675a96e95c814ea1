"""Guesses formatting options from existing source files.

Most heuristics count competing conventions across all files and keep the
built-in default when neither side wins.
"""
import re
from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from .batch import DEFAULT_EXTENSIONS
from .errors import FormatError
from .files import iter_source_files, read_source
from .lexer import CODE, mask_source
from .models import FormatOptions, IndentMode

_HEX_DIGITS = re.compile(r"\b0x([0-9A-Fa-f_]+)\b")
_SPACED_RANGE = re.compile(r"[\w)\]] (\.\.\.|\.\.<) [\w(\[-]")
_UNSPACED_RANGE = re.compile(r"[\w)\]](\.\.\.|\.\.<)[\w(\[-]")
_VOID_RETURN = re.compile(r"->\s*Void\b")
_TUPLE_RETURN = re.compile(r"->\s*\(\s*\)")
_DIRECTIVE = re.compile(r"\s*#(if|else|elseif|endif)\b")


def infer_options(root: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> Tuple[int, FormatOptions]:
    """Return the number of files examined and the options inferred from them."""
    sources = []
    for path in iter_source_files(Path(root), extensions):
        try:
            sources.append(read_source(path))
        except (OSError, UnicodeDecodeError):
            continue
    return len(sources), infer_options_from_sources(sources)


def _prefer(yes: int, no: int, default: bool) -> bool:
    if yes == no:
        return default
    return yes > no


def infer_options_from_sources(sources: List[str]) -> FormatOptions:
    options = FormatOptions()
    counts: Counter = Counter()
    indent_steps: Counter = Counter()

    for source in sources:
        counts["crlf"] += source.count("\r\n")
        counts["cr"] += source.count("\r") - source.count("\r\n")
        counts["lf"] += source.count("\n") - source.count("\r\n")
        text = source.replace("\r\n", "\n").replace("\r", "\n")
        try:
            masked = mask_source(text)
        except FormatError:
            continue
        lines = text.split("\n")
        code_lines = masked.lines
        code_text = masked.masked

        for digits in _HEX_DIGITS.findall(code_text):
            letters = [c for c in digits if c.isalpha()]
            counts["hex_upper"] += sum(1 for c in letters if c.isupper())
            counts["hex_lower"] += sum(1 for c in letters if c.islower())
        counts["range_spaced"] += len(_SPACED_RANGE.findall(code_text))
        counts["range_unspaced"] += len(_UNSPACED_RANGE.findall(code_text))
        counts["void"] += len(_VOID_RETURN.findall(code_text))
        counts["tuple"] += len(_TUPLE_RETURN.findall(code_text))

        previous_indent = None
        for index, (line, code_line) in enumerate(zip(lines, code_lines)):
            if masked.line_states[index] != CODE:
                continue
            stripped = code_line.strip()
            if not line.strip():
                counts["blank_with_space" if line else "blank_empty"] += 1
                continue
            if not stripped:
                continue
            if stripped == "{":
                counts["allman"] += 1
            elif stripped.endswith("{"):
                counts["knr"] += 1
            if ";" in stripped.rstrip(";"):
                counts["inline_semicolons"] += 1
            if stripped.startswith("]") and index > 0:
                above = code_lines[index - 1].strip()
                if above and above[-1] not in "[(:{":
                    counts["trailing_comma" if above.endswith(",") else "no_trailing_comma"] += 1
            if _DIRECTIVE.match(code_line) and index + 1 < len(lines):
                own = len(line) - len(line.lstrip())
                following = lines[index + 1]
                if following.strip():
                    counts["ifdef_outdent" if own == 0 and following[0].isspace() else "ifdef_other"] += 1

            indent = line[:len(line) - len(line.lstrip())]
            if indent.startswith("\t"):
                counts["tabs"] += 1
            elif indent:
                counts["spaces"] += 1
            if previous_indent is not None and " " in indent and len(indent) > previous_indent:
                indent_steps[len(indent) - previous_indent] += 1
            previous_indent = len(indent)

    if counts["tabs"] > counts["spaces"]:
        options.indent = "\t"
    elif indent_steps:
        options.indent = " " * indent_steps.most_common(1)[0][0]

    linebreak, seen = max((("\n", counts["lf"]), ("\r\n", counts["crlf"]), ("\r", counts["cr"])), key=lambda p: p[1])
    if seen:
        options.linebreak = linebreak

    options.allman_braces = _prefer(counts["allman"], counts["knr"], options.allman_braces)
    options.allow_inline_semicolons = counts["inline_semicolons"] > 0
    options.trailing_commas = _prefer(counts["trailing_comma"], counts["no_trailing_comma"], options.trailing_commas)
    options.space_around_range_operators = _prefer(
        counts["range_spaced"], counts["range_unspaced"], options.space_around_range_operators
    )
    options.use_void = _prefer(counts["void"], counts["tuple"], options.use_void)
    options.truncate_blank_lines = _prefer(
        counts["blank_empty"], counts["blank_with_space"], options.truncate_blank_lines
    )
    options.uppercase_hex = _prefer(counts["hex_upper"], counts["hex_lower"], options.uppercase_hex)
    if counts["ifdef_outdent"] > counts["ifdef_other"]:
        options.ifdef_indent = IndentMode.OUTDENT
    return options


def command_line_arguments(options: FormatOptions) -> Dict[str, str]:
    """Render options as the flag values that would reproduce them."""
    linebreaks = {"\r": "cr", "\n": "lf", "\r\n": "crlf"}
    return {
        "indent": "tab" if options.indent == "\t" else str(len(options.indent)),
        "allman": "true" if options.allman_braces else "false",
        "linebreaks": linebreaks.get(options.linebreak, "lf"),
        "semicolons": "inline" if options.allow_inline_semicolons else "never",
        "commas": "always" if options.trailing_commas else "inline",
        "comments": "indent" if options.indent_comments else "ignore",
        "ranges": "spaced" if options.space_around_range_operators else "nospace",
        "empty": "void" if options.use_void else "tuple",
        "trimwhitespace": "always" if options.truncate_blank_lines else "nonblank-lines",
        "insertlines": "enabled" if options.insert_blank_lines else "disabled",
        "removelines": "enabled" if options.remove_blank_lines else "disabled",
        "header": "strip" if options.strip_header else "ignore",
        "ifdef": options.ifdef_indent.value,
        "hexliterals": "uppercase" if options.uppercase_hex else "lowercase",
        "experimental": "enabled" if options.experimental_rules else "disabled",
        "fragment": "true" if options.fragment else "false",
    }


def format_arguments(options: FormatOptions) -> str:
    """The flag string form, e.g. '--indent 4 --allman false ...'."""
    return " ".join(f"--{key} {value}" for key, value in command_line_arguments(options).items())
