"""
Pytest configuration and fixtures for sexpc compiler tests.

Provides reusable fixtures for:
- Running the compiler command line on source text
- Verifying generated output
- Checking compilation errors
"""

import pytest
import subprocess
import os
import sys
from pathlib import Path


class CompilerResult:
    """Result of running the sexpc command line on a program."""

    def __init__(self, returncode: int, stdout: str, stderr: str):
        self.returncode = returncode
        self.compile_success = returncode == 0
        self.stdout = stdout
        self.stderr = stderr


@pytest.fixture
def compiler_root():
    """Path to compiler root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def compile_sexp(compiler_root, tmp_path):
    """
    Fixture that returns a function to compile source code with the CLI.

    Usage:
        result = compile_sexp(source_code)
        assert result.compile_success
        assert result.stdout == "add(2, 2);\n"
    """
    def _compile(source: str, *extra_args: str) -> CompilerResult:
        source_path = os.path.join(tmp_path, "test.sexp")
        with open(source_path, 'w', encoding='utf-8') as f:
            f.write(source)

        sexpc = os.path.join(compiler_root, "sexpc.py")
        cmd = [sys.executable, sexpc, source_path] + list(extra_args)

        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            cwd=compiler_root
        )
        return CompilerResult(result.returncode, result.stdout, result.stderr)

    return _compile


@pytest.fixture
def expect_output(compile_sexp):
    """
    Fixture that compiles code and asserts the generated output.

    Usage:
        expect_output("(add 2 2)", "add(2, 2);\n")
    """
    def _expect(source: str, expected: str, *extra_args: str):
        result = compile_sexp(source, *extra_args)
        assert result.compile_success, f"Compilation failed:\n{result.stderr}"
        assert result.stdout == expected, \
            f"Output mismatch:\nExpected: {expected!r}\nGot: {result.stdout!r}"

    return _expect


@pytest.fixture
def expect_compile_error(compile_sexp):
    """
    Fixture that verifies compilation fails with expected error.

    Usage:
        expect_compile_error("(foo @)", "unexpected character")
    """
    def _expect(source: str, error_substring: str = None):
        result = compile_sexp(source)
        assert not result.compile_success, \
            f"Expected compilation to fail but it succeeded.\nOutput: {result.stdout}"
        assert result.returncode == 1, \
            f"Expected exit code 1, got {result.returncode}:\n{result.stderr}"
        assert result.stdout == "", \
            f"Expected no output on failure but got:\n{result.stdout}"
        if error_substring:
            assert error_substring.lower() in result.stderr.lower(), \
                f"Expected error containing '{error_substring}' but got:\n{result.stderr}"

    return _expect
