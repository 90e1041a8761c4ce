#!/usr/bin/env python3
"""
sexpc Compiler

Compiles S-expressions into C-like call expressions:

    (add 2 (subtract 4 2))   ->   add(2, subtract(4, 2));

Usage:
    python sexpc.py <source_file> [-o output] [--emit-tokens] [--emit-ast] [--emit-target]
    python sexpc.py -e '<source text>'

Examples:
    python sexpc.py prog.sexp                  # Print generated code
    python sexpc.py prog.sexp -o prog.c        # Write generated code to prog.c
    python sexpc.py -e '(add 2 2)'             # Compile inline source
    python sexpc.py prog.sexp --emit-tokens    # Print token stream
    python sexpc.py prog.sexp --emit-ast       # Print source AST as JSON
    python sexpc.py prog.sexp --emit-target    # Print target AST as JSON
"""

import sys
import argparse
import json
from typing import Optional, Tuple

from codegen import generate
from errors import CompileError
from sexp_lexer import tokenize
from sexp_parser import parse
from transformer import transform


def compile(source: str, terminate_literals: bool = False) -> str:
    """Compile S-expression source text into call-expression source text."""
    return generate(transform(parse(tokenize(source)), terminate_literals=terminate_literals))


def read_source(source_path: str) -> str:
    """Read source text from a UTF-8 file, or from stdin when the path is '-'."""
    if source_path == "-":
        return sys.stdin.read()
    with open(source_path, 'r', encoding='utf-8') as f:
        return f.read()


def compile_file(source_path: str, terminate_literals: bool = False) -> str:
    """Compile a source file read as UTF-8."""
    return compile(read_source(source_path), terminate_literals=terminate_literals)


def line_column(source: str, position: int) -> Tuple[int, int]:
    """Convert a character offset into a 1-based (line, column) pair."""
    line = source.count("\n", 0, position) + 1
    column = position - (source.rfind("\n", 0, position) + 1) + 1
    return line, column


def format_error(error: CompileError, source: Optional[str] = None) -> str:
    """Describe an error with line and column when the offset is known"""
    if error.position is None or source is None:
        return str(error)
    line, column = line_column(source, error.position)
    return f"{error.stage} error at line {line}:{column}: {error.reason}"


def run_pipeline(source: str, emit: Optional[str] = None,
                 terminate_literals: bool = False, verbose: bool = False) -> str:
    """
    Run the compiler stages on source text and return the text to output.

    Args:
        source: S-expression source text
        emit: Stop early and dump an intermediate form ("tokens", "ast", "target")
        terminate_literals: Terminate top-level literals with ';'
        verbose: Print stage progress to stderr
    """
    def progress(msg):
        if verbose:
            print(msg, file=sys.stderr)

    progress("Tokenizing...")
    tokens = tokenize(source)
    if emit == "tokens":
        return "\n".join(f"{t.kind.name} {t.text} @{t.position}" for t in tokens)

    progress("Parsing...")
    program = parse(tokens)
    if emit == "ast":
        return json.dumps(program.to_dict(), indent=2)

    progress("Transforming...")
    target = transform(program, terminate_literals=terminate_literals)
    if emit == "target":
        return json.dumps(target.to_dict(), indent=2)

    progress("Generating code...")
    return generate(target)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="S-expression to call-expression compiler",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s prog.sexp                  Print generated code
  %(prog)s prog.sexp -o prog.c        Write generated code to prog.c
  %(prog)s -e '(add 2 2)'             Compile inline source
  %(prog)s - < prog.sexp              Read source from stdin
  %(prog)s prog.sexp --emit-target    Print target AST as JSON
        """
    )

    parser.add_argument("source", nargs="?",
                        help="Source file ('-' for stdin)")
    parser.add_argument("-e", "--expr",
                        help="Compile the given source text instead of a file")
    parser.add_argument("-o", "--output",
                        help="Output file (default: stdout)")
    emit = parser.add_mutually_exclusive_group()
    emit.add_argument("--emit-tokens", dest="emit", action="store_const", const="tokens",
                      help="Print the token stream and stop")
    emit.add_argument("--emit-ast", dest="emit", action="store_const", const="ast",
                      help="Print the source AST as JSON and stop")
    emit.add_argument("--emit-target", dest="emit", action="store_const", const="target",
                      help="Print the target AST as JSON and stop")
    parser.add_argument("--terminate-literals", action="store_true",
                        help="Terminate top-level literals with ';' like calls")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print compiler stages to stderr")

    args = parser.parse_args(argv)

    if (args.source is None) == (args.expr is None):
        parser.error("exactly one of a source file or -e/--expr is required")

    if args.expr is not None:
        source = args.expr
    else:
        try:
            source = read_source(args.source)
        except OSError as e:
            print(f"Failed to read file: {args.source}: {e}", file=sys.stderr)
            sys.exit(1)

    try:
        output = run_pipeline(
            source,
            emit=args.emit,
            terminate_literals=args.terminate_literals,
            verbose=args.verbose,
        )
    except CompileError as e:
        print(f"Compilation failed: {format_error(e, source)}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Internal compiler error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(2)

    if args.output:
        try:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(output + "\n")
        except OSError as e:
            print(f"Failed to write file: {args.output}: {e}", file=sys.stderr)
            sys.exit(1)
        if args.verbose:
            print(f"Successfully compiled to {args.output}", file=sys.stderr)
    else:
        print(output)


if __name__ == "__main__":
    main()
