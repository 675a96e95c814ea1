from swift_formatter.engine import FormatterEngine
from swift_formatter.models import FormatOptions, IndentMode


def fmt(source, **options):
    result = FormatterEngine(FormatOptions(**options)).format_string(source)
    assert result.errors == []
    return result.source


def test_indentation_nested_scopes():
    source = "func f() {\nif x {\nfoo()\n}\n}\n"
    assert fmt(source) == "func f() {\n    if x {\n        foo()\n    }\n}\n"


def test_indentation_with_tabs_and_two_spaces():
    source = "func f() {\nfoo()\n}\n"
    assert fmt(source, indent="\t") == "func f() {\n\tfoo()\n}\n"
    assert fmt(source, indent="  ") == "func f() {\n  foo()\n}\n"


def test_switch_cases_align_with_switch():
    source = "switch x {\ncase 1:\nfoo()\ndefault:\nbar()\n}\n"
    assert fmt(source) == "switch x {\ncase 1:\n    foo()\ndefault:\n    bar()\n}\n"


def test_knr_braces():
    source = "if x\n{\nfoo()\n}\nelse\n{\nbar()\n}\n"
    assert fmt(source) == "if x {\n    foo()\n} else {\n    bar()\n}\n"


def test_allman_braces():
    source = "if x {\nfoo()\n} else {\nbar()\n}\n"
    expected = "if x\n{\n    foo()\n}\nelse\n{\n    bar()\n}\n"
    assert fmt(source, allman_braces=True) == expected


def test_trailing_semicolons_removed():
    source = "let a = 1;\nlet b = 2; let c = 3\n"
    assert fmt(source) == "let a = 1\nlet b = 2; let c = 3\n"


def test_inline_semicolons_split_when_disallowed():
    source = "let a = 1;\nlet b = 2; let c = 3\n"
    assert fmt(source, allow_inline_semicolons=False) == "let a = 1\nlet b = 2\nlet c = 3\n"


def test_semicolons_in_strings_kept():
    assert fmt('let s = "a;b";\n', allow_inline_semicolons=False) == 'let s = "a;b"\n'


def test_trailing_comma_added():
    assert fmt("let a = [\n1,\n2\n]\n") == "let a = [\n    1,\n    2,\n]\n"


def test_trailing_comma_removed():
    source = "let a = [\n    1,\n    2,\n]\n"
    assert fmt(source, trailing_commas=False) == "let a = [\n    1,\n    2\n]\n"


def test_trailing_comma_skips_multiline_subscripts():
    source = "let v = dict[\n    key\n]\nlet w = f()[\n    0\n]\n"
    assert fmt(source) == source


def test_trailing_comma_after_return():
    assert fmt("return [\n1\n]\n") == "return [\n    1,\n]\n"


def test_range_spacing():
    assert fmt("let r = 1...5\n") == "let r = 1 ... 5\n"
    assert fmt("let r = 0..<n\n") == "let r = 0 ..< n\n"
    assert fmt("let r = 1 ... 5\n", space_around_range_operators=False) == "let r = 1...5\n"


def test_variadic_parameters_untouched():
    assert fmt("func f(_ xs: Int...) {\n}\n") == "func f(_ xs: Int...) {\n}\n"


def test_hex_literal_case():
    assert fmt("let c = 0xff00aa\n") == "let c = 0xFF00AA\n"
    assert fmt("let c = 0xABCDEF\n", uppercase_hex=False) == "let c = 0xabcdef\n"


def test_void_return_types():
    assert fmt("func f() -> () {\n}\n") == "func f() -> Void {\n}\n"
    assert fmt("func f() -> Void {\n}\n", use_void=False) == "func f() -> () {\n}\n"


def test_operator_spacing():
    assert fmt("let a=b==c&&d\n") == "let a = b == c && d\n"
    assert fmt("x+=1\n") == "x += 1\n"
    assert fmt("x >>= 1\n") == "x >>= 1\n"


def test_header_stripped():
    source = "// Header\n// Copyright\n\nimport Foundation\n"
    assert fmt(source, strip_header=True) == "import Foundation\n"
    assert fmt(source) == source


def test_doc_comment_is_not_a_header():
    source = "/// Doc\nfunc f() {\n}\n"
    assert fmt(source, strip_header=True) == source


def test_blank_lines_removed_and_inserted():
    source = "func a() {\n\n    foo()\n\n}\nfunc b() {\n}\n"
    assert fmt(source) == "func a() {\n    foo()\n}\n\nfunc b() {\n}\n"
    unchanged = fmt(source, insert_blank_lines=False, remove_blank_lines=False)
    assert unchanged == source


def test_blank_line_runs_collapse():
    assert fmt("let a = 1\n\n\n\nlet b = 2\n") == "let a = 1\n\nlet b = 2\n"


def test_trim_whitespace_policy():
    source = "func f() {\n    foo()\n    \n    bar()\n}\n"
    assert fmt(source, truncate_blank_lines=False) == source
    assert fmt(source) == "func f() {\n    foo()\n\n    bar()\n}\n"


def test_ifdef_modes():
    source = "#if DEBUG\nlet x = 1\n#endif\n"
    assert fmt(source) == "#if DEBUG\n    let x = 1\n#endif\n"
    assert fmt(source, ifdef_indent=IndentMode.NOINDENT) == source
    nested = "func f() {\n    #if DEBUG\n    foo()\n    #endif\n}\n"
    expected = "func f() {\n#if DEBUG\n    foo()\n#endif\n}\n"
    assert fmt(nested, ifdef_indent=IndentMode.OUTDENT) == expected


def test_block_comment_indentation():
    source = "func f() {\n/*\n * note\n */\nfoo()\n}\n"
    assert fmt(source) == "func f() {\n    /*\n     * note\n     */\n    foo()\n}\n"
    assert fmt(source, indent_comments=False) == "func f() {\n    /*\n * note\n */\n    foo()\n}\n"
