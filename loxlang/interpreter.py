"""Interpreter for the Lox language.

This module walks the AST produced by `loxlang.parser` and executes it. Every
expression evaluates to one of the four Lox runtime values (see
`loxlang.types`); print statements write the display form of their value to
standard output. A runtime error aborts the statement list being
interpreted and is handed to the error reporter rather than printed here.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .ast import Binary, Expr, ExprStmt, Grouping, Literal, LoxValue, PrintStmt, Stmt, Unary
from .errors import LoxError, LoxRuntimeError
from .parser import parse_program
from .reporter import ErrorReporter
from .tokens import Token, TokenType
from .types import divide, is_equal, is_number, is_truthy, stringify, type_name


class Interpreter:
    """Core interpreter that executes Lox statements."""
    def __init__(self, reporter: Optional[ErrorReporter] = None, debug_level: int = 0,
                 debug_file: Optional[str] = 'debug.txt'):
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 and debug_file else None
        # Error that stopped the most recent interpret() call, if any.
        self.runtime_error: Optional[LoxRuntimeError] = None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def interpret(self, statements: List[Stmt]) -> None:
        """Execute `statements` in order, stopping at the first runtime error."""
        self.runtime_error = None
        try:
            for stmt in statements:
                self.execute(stmt)
        except LoxRuntimeError as error:
            self.debug(f"runtime error at line {error.token.line}: {error.message}")
            self.runtime_error = error
            self.reporter.runtime_error(error)

    def execute(self, node: Stmt) -> None:
        if isinstance(node, PrintStmt):
            value = self.evaluate(node.expr)
            if self.debug_level >= 1:
                self.debug(f"print {type_name(value)} {value!r}")
            print(stringify(value))
            return None
        if isinstance(node, ExprStmt):
            value = self.evaluate(node.expr)
            if self.debug_level >= 1:
                self.debug(f"expression statement -> {value!r}")
            return None
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    def evaluate(self, node: Expr) -> LoxValue:
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, Grouping):
            return self.evaluate(node.inner)
        if isinstance(node, Unary):
            operand = self.evaluate(node.operand)
            result = self.apply_unary_op(node.operator, operand)
            if self.debug_level >= 2:
                self.debug(f"{node.operator.lexeme}{operand!r} -> {result!r}")
            return result
        if isinstance(node, Binary):
            left = self.evaluate(node.left)
            right = self.evaluate(node.right)
            result = self.apply_binary_op(node.operator, left, right)
            if self.debug_level >= 2:
                self.debug(f"{left!r} {node.operator.lexeme} {right!r} -> {result!r}")
            return result
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def apply_unary_op(self, op: Token, operand: LoxValue) -> LoxValue:
        if op.type == TokenType.MINUS:
            self.check_number_operand(op, operand)
            return -operand
        if op.type == TokenType.BANG:
            return not is_truthy(operand)
        raise LoxRuntimeError(op, f"Unknown unary operator '{op.lexeme}'.")

    def apply_binary_op(self, op: Token, a: LoxValue, b: LoxValue) -> LoxValue:
        kind = op.type
        if self.debug_level >= 3:
            self.debug(f"dispatch {kind.name} on {type_name(a)}, {type_name(b)}")
        if kind == TokenType.PLUS:
            if is_number(a) and is_number(b):
                return a + b
            if isinstance(a, str) and isinstance(b, str):
                return a + b
            raise LoxRuntimeError(op, 'Operands must be two numbers or two strings.')
        if kind == TokenType.MINUS:
            self.check_number_operands(op, a, b)
            return a - b
        if kind == TokenType.STAR:
            self.check_number_operands(op, a, b)
            return a * b
        if kind == TokenType.SLASH:
            self.check_number_operands(op, a, b)
            return divide(a, b)
        if kind == TokenType.GREATER:
            self.check_number_operands(op, a, b)
            return a > b
        if kind == TokenType.GREATER_EQUAL:
            self.check_number_operands(op, a, b)
            return a >= b
        if kind == TokenType.LESS:
            self.check_number_operands(op, a, b)
            return a < b
        if kind == TokenType.LESS_EQUAL:
            self.check_number_operands(op, a, b)
            return a <= b
        if kind == TokenType.EQUAL_EQUAL:
            return is_equal(a, b)
        if kind == TokenType.BANG_EQUAL:
            return not is_equal(a, b)
        raise LoxRuntimeError(op, f"Unknown binary operator '{op.lexeme}'.")

    def check_number_operand(self, op: Token, operand: LoxValue) -> None:
        if not is_number(operand):
            raise LoxRuntimeError(op, 'Operand must be a number.')

    def check_number_operands(self, op: Token, a: LoxValue, b: LoxValue) -> None:
        if not (is_number(a) and is_number(b)):
            raise LoxRuntimeError(op, 'Operands must be numbers.')


def run_program(source: str, reporter: Optional[ErrorReporter] = None, debug_level: int = 0) -> bool:
    """Scan, parse and interpret one unit of Lox source.

    Returns True when the unit ran without a lexical, syntax or runtime
    error. Diagnostics go to `reporter`.
    """
    if reporter is None:
        reporter = ErrorReporter()
    try:
        statements = parse_program(source, reporter)
    except LoxError:
        return False
    interpreter = Interpreter(reporter, debug_level=debug_level)
    try:
        interpreter.interpret(statements)
    finally:
        interpreter.close()
    return interpreter.runtime_error is None


def run_file(file_path: str, reporter: Optional[ErrorReporter] = None, debug_level: int = 0) -> bool:
    """Run a Lox source file; see `run_program`."""
    source = Path(file_path).read_text(encoding='utf-8')
    return run_program(source, reporter, debug_level)
