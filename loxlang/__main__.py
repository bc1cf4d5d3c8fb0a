"""CLI entry point for the Lox interpreter.

Usage:
    python -m loxlang [-v|-vv|-vvv]                   (interactive prompt)
    python -m loxlang [-v...] <script.lox>
    python -m loxlang [-v...] --emit-ast <script.lox>
    python -m loxlang [-v...] --ast <ast_json_file>
    python -m loxlang --print-ast <script.lox>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given .lox file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file
  --print-ast   Parse the given .lox file and print each statement's tree

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero. Exit status is 65 when the source has
lexical or syntax errors and 70 when execution hits a runtime error.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from .ast_json import ast_to_obj, program_from_obj
from .ast_printer import print_ast
from .errors import LoxError
from .interpreter import Interpreter
from .parser import parse_program
from .reporter import ErrorReporter

EXIT_DATA_ERROR = 65
EXIT_SOFTWARE_ERROR = 70


def read_source(path_arg: str) -> str:
    program_file = Path(path_arg)
    if not program_file.exists():
        print(f"Error: file {program_file} not found", file=sys.stderr)
        sys.exit(1)
    with open(program_file, 'r', encoding='utf-8') as f:
        return f.read()


def run_source(source: str, interpreter: Interpreter, reporter: ErrorReporter) -> None:
    try:
        statements = parse_program(source, reporter)
    except LoxError:
        return
    interpreter.interpret(statements)


def run_prompt(interpreter: Interpreter, reporter: ErrorReporter) -> None:
    while True:
        try:
            line = input('> ')
        except EOFError:
            print()
            break
        run_source(line, interpreter, reporter)
        reporter.reset()


def exit_status(reporter: ErrorReporter) -> int:
    if reporter.had_error:
        return EXIT_DATA_ERROR
    if reporter.had_runtime_error:
        return EXIT_SOFTWARE_ERROR
    return 0


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description="Lox expression interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='LOX_FILE', help='emit AST JSON for the given .lox file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    group.add_argument('--print-ast', metavar='LOX_FILE', help='print the parsed tree of each statement')
    parser.add_argument('script', nargs='?', help='Lox script (.lox) to execute')
    args = parser.parse_args(argv)

    reporter = ErrorReporter()

    # Emit AST mode
    if args.emit_ast:
        source = read_source(args.emit_ast)
        try:
            statements = parse_program(source, reporter)
        except LoxError:
            sys.exit(EXIT_DATA_ERROR)
        program_file = Path(args.emit_ast)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(ast_to_obj(statements), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    # Print AST mode
    if args.print_ast:
        source = read_source(args.print_ast)
        try:
            statements = parse_program(source, reporter)
        except LoxError:
            sys.exit(EXIT_DATA_ERROR)
        for stmt in statements:
            print(print_ast(stmt))
        return

    interpreter = Interpreter(reporter, debug_level=args.v)
    try:
        # Execute from AST JSON
        if args.ast:
            ast_path = Path(args.ast)
            if not ast_path.exists():
                print(f"Error: file {ast_path} not found", file=sys.stderr)
                sys.exit(1)
            try:
                with open(ast_path, 'r', encoding='utf-8') as f:
                    statements = program_from_obj(json.load(f))
            except (TypeError, ValueError, KeyError) as e:
                print(f"Error: invalid AST file {ast_path}: {e}", file=sys.stderr)
                sys.exit(EXIT_DATA_ERROR)
            interpreter.interpret(statements)
        elif args.script:
            run_source(read_source(args.script), interpreter, reporter)
        else:
            run_prompt(interpreter, reporter)
    finally:
        interpreter.close()

    status = exit_status(reporter)
    if status:
        sys.exit(status)


if __name__ == '__main__':
    main()
