from swift_cli.arguments import RawArguments
from swift_cli.options import resolve_options
from swift_formatter.inference import (
    command_line_arguments,
    format_arguments,
    infer_options,
    infer_options_from_sources,
)
from swift_formatter.models import FormatOptions, IndentMode


def test_infers_two_space_indent_and_crlf():
    source = "func f() {\r\n  if x {\r\n    foo()\r\n  }\r\n}\r\n"
    options = infer_options_from_sources([source])
    assert options.indent == "  "
    assert options.linebreak == "\r\n"


def test_infers_allman_and_inline_semicolons():
    source = "func f()\n{\n    a(); b()\n}\n"
    options = infer_options_from_sources([source])
    assert options.allman_braces is True
    assert options.allow_inline_semicolons is True


def test_infers_style_counts():
    source = (
        "let r = 0..<n\n"
        "let h = 0xab\n"
        "func f() -> () {\n}\n"
        "let a = [\n    1,\n    2\n]\n"
    )
    options = infer_options_from_sources([source])
    assert options.space_around_range_operators is False
    assert options.uppercase_hex is False
    assert options.use_void is False
    assert options.trailing_commas is False


def test_no_evidence_keeps_defaults():
    options = infer_options_from_sources([])
    assert options.indent == FormatOptions().indent
    assert options.linebreak == "\n"
    assert options.ifdef_indent is IndentMode.INDENT


def test_infer_options_counts_files(tmp_path):
    (tmp_path / "a.swift").write_text("func a() {\n\tfoo()\n}\n")
    (tmp_path / "b.swift").write_text("func b() {\n\tbar()\n}\n")
    (tmp_path / "README.md").write_text("# readme\n")
    count, options = infer_options(tmp_path)
    assert count == 2
    assert options.indent == "\t"


def test_flag_string_rendering():
    rendered = format_arguments(FormatOptions())
    assert rendered.startswith("--indent 4 --allman false --linebreaks lf")
    assert "--ifdef indent" in rendered


def test_rendered_flags_resolve_back_to_the_same_options():
    options = FormatOptions(
        indent="\t",
        allman_braces=True,
        linebreak="\r",
        trailing_commas=False,
        ifdef_indent=IndentMode.OUTDENT,
        uppercase_hex=False,
        truncate_blank_lines=False,
    )
    flags = command_line_arguments(options)
    assert resolve_options(RawArguments(flags=flags)) == options
