from swift_formatter.engine import FormatterEngine
from swift_formatter.models import FormatOptions, FormatResult
from swift_formatter.rules import CodeRule


class ReplaceRule(CodeRule):
    @property
    def rule_id(self) -> str: return "T001"
    @property
    def name(self) -> str: return "replace"

    def rewrite_code(self, code):
        return code.replace("old", "new")


def test_engine_applies_custom_rules():
    options = FormatOptions()
    engine = FormatterEngine(options, rules=[ReplaceRule(options)])
    result = engine.format_string("let old = 1\n")
    assert isinstance(result, FormatResult)
    assert result.source == "let new = 1\n"
    assert result.modified is True


def test_code_rules_skip_strings_and_comments():
    options = FormatOptions()
    engine = FormatterEngine(options, rules=[ReplaceRule(options)])
    source = 'let s = "old" // old\n'
    result = engine.format_string(source)
    assert result.source == source
    assert result.modified is False


def test_add_rule_appends():
    options = FormatOptions()
    engine = FormatterEngine(options, rules=[])
    engine.add_rule(ReplaceRule(options))
    assert engine.format_string("old\n").source == "new\n"


def test_whitespace_cleanup():
    engine = FormatterEngine(FormatOptions())
    result = engine.format_string("let x = 1   \nlet y = 2")
    assert result.source == "let x = 1\nlet y = 2\n"
    assert result.modified is True


def test_already_formatted_is_unchanged():
    engine = FormatterEngine(FormatOptions())
    source = "let x = 1\n"
    first = engine.format_string(source)
    assert first.modified is False
    assert engine.format_string(first.source).source == source


def test_default_formatting_of_assignment():
    engine = FormatterEngine(FormatOptions())
    assert engine.format_string("let x=1").source == "let x = 1\n"


def test_unterminated_string_is_rejected():
    engine = FormatterEngine(FormatOptions())
    source = 'let s = "abc\n'
    result = engine.format_string(source)
    assert result.errors == ["unterminated string literal on line 1"]
    assert result.source == source
    assert result.modified is False


def test_unbalanced_braces_are_rejected():
    engine = FormatterEngine(FormatOptions())
    result = engine.format_string("func f() {\n}\n}\n")
    assert result.errors
    assert "unexpected '}'" in result.errors[0]


def test_fragment_tolerates_unbalanced_braces():
    engine = FormatterEngine(FormatOptions(fragment=True))
    result = engine.format_string("}\nfoo()")
    assert result.errors == []
    assert result.source == "}\nfoo()"


def test_linebreaks_are_normalized():
    engine = FormatterEngine(FormatOptions(linebreak="\r\n"))
    assert engine.format_string("let x = 1\nlet y = 2\r").source == "let x = 1\r\nlet y = 2\r\n"
    engine = FormatterEngine(FormatOptions())
    assert engine.format_string("let x = 1\r\nlet y = 2\r\n").source == "let x = 1\nlet y = 2\n"


def test_experimental_rules_need_opt_in():
    source = "if (x > 1) {\nfoo()\n}\n"
    assert FormatterEngine(FormatOptions()).format_string(source).source == "if (x > 1) {\n    foo()\n}\n"
    enabled = FormatterEngine(FormatOptions(experimental_rules=True))
    assert enabled.format_string(source).source == "if x > 1 {\n    foo()\n}\n"


def test_multiline_string_contents_are_preserved():
    source = 'let s = """\n  a=b  \n"""\n'
    assert FormatterEngine(FormatOptions()).format_string(source).source == source
