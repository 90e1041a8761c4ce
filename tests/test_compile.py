"""
End-to-end tests for the compile() pipeline.

These tests verify the whole pipeline:
- Calls, nested calls and strings
- Top-level literals
- Errors from each stage propagating unchanged
"""

import io
import pytest
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import sexpc
from errors import (
    CompileError, NestingTooDeep, ParseError, UnexpectedCharacter, UnexpectedEndOfInput,
    UnexpectedToken, UnterminatedString,
)


class TestCompile:
    """Tests for successful compilation."""

    @pytest.mark.parametrize("source, expected", [
        ("(add 2 2)", "add(2, 2);"),
        ("(add 2 (subtract 4 2))", "add(2, subtract(4, 2));"),
        ('(concat "a" "b")', 'concat("a", "b");'),
        ("(now)", "now();"),
        ("(a (b (c 1) 2) 3)", "a(b(c(1), 2), 3);"),
        ("  (add\n  1\n  2)  ", "add(1, 2);"),
    ])
    def test_expressions(self, source, expected):
        assert sexpc.compile(source) == expected

    def test_multiple_statements(self):
        assert sexpc.compile("(print 1)\n(print 2)") == "print(1);\nprint(2);"

    def test_bare_number(self):
        assert sexpc.compile("42") == "42"

    def test_bare_string(self):
        assert sexpc.compile('"hi"') == '"hi"'

    def test_terminate_literals(self):
        assert sexpc.compile("42", terminate_literals=True) == "42;"
        assert sexpc.compile("(f 1)", terminate_literals=True) == "f(1);"

    def test_empty_source(self):
        assert sexpc.compile("") == ""

    def test_compile_file(self, tmp_path):
        path = tmp_path / "prog.sexp"
        path.write_text('(greet "world")\n', encoding="utf-8")
        assert sexpc.compile_file(str(path)) == 'greet("world");'


class TestCompileErrors:
    """Tests that stage errors reach the caller unchanged."""

    def test_lex_error(self):
        with pytest.raises(UnexpectedCharacter) as exc:
            sexpc.compile("(foo @)")
        assert exc.value.char == "@"
        assert exc.value.position == 5

    def test_unterminated_string(self):
        with pytest.raises(UnterminatedString):
            sexpc.compile('(foo "bar')

    def test_unclosed_call(self):
        with pytest.raises(UnexpectedEndOfInput):
            sexpc.compile("(add 2 2")

    def test_unexpected_token(self):
        with pytest.raises(UnexpectedToken):
            sexpc.compile(")")

    def test_all_errors_share_base(self):
        for source in ("$", '"', "(", ")", "(add x)"):
            with pytest.raises(CompileError):
                sexpc.compile(source)


class TestLineColumn:
    """Tests for error location formatting."""

    def test_first_line(self):
        assert sexpc.line_column("(foo @)", 5) == (1, 6)

    def test_later_line(self):
        assert sexpc.line_column("(a\n  (b @))", 7) == (2, 5)

    def test_format_error(self):
        source = "(a\n  $)"
        with pytest.raises(CompileError) as exc:
            sexpc.compile(source)
        assert sexpc.format_error(exc.value, source) == \
            "lex error at line 2:3: unexpected character '$'"

    def test_format_error_without_position(self):
        with pytest.raises(CompileError) as exc:
            sexpc.compile("(a")
        assert sexpc.format_error(exc.value, "(a") == \
            "parse error: unexpected end of input (missing ')'?)"


def nested_source(depth: int) -> str:
    return "(f " * depth + "1" + ")" * depth


class TestDeepNesting:
    """Tests for programs with deeply nested calls."""

    def test_five_hundred_levels(self):
        assert sexpc.compile(nested_source(500)) == "f(" * 500 + "1" + ")" * 500 + ";"

    def test_too_deep_is_a_parse_error(self):
        with pytest.raises(NestingTooDeep) as exc:
            sexpc.compile(nested_source(20000))
        assert isinstance(exc.value, ParseError)
        assert exc.value.stage == "parse"
        assert exc.value.position is not None


class TestReadSource:
    """Tests for reading source text."""

    def test_compile_file_from_stdin(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO("(f 1)"))
        assert sexpc.compile_file("-") == "f(1);"

    def test_read_source_file(self, tmp_path):
        path = tmp_path / "prog.sexp"
        path.write_text("(g)", encoding="utf-8")
        assert sexpc.read_source(str(path)) == "(g)"

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            sexpc.compile_file(str(tmp_path / "missing.sexp"))
