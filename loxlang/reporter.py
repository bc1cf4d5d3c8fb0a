"""Diagnostic reporting for the Lox driver.

The scanner, parser and interpreter never print diagnostics themselves. They
hand each error to a reporter, which formats it, writes it to the error
stream and remembers that the current session has failed. The driver reads
`had_error` and `had_runtime_error` to choose an exit status, and resets them
between REPL lines.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .errors import LoxRuntimeError
from .tokens import Token, TokenType


class ErrorReporter:
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.had_error = False
        self.had_runtime_error = False

    def error(self, line: int, message: str) -> None:
        """Report a lexical error."""
        self.report(line, '', message)

    def syntax_error(self, token: Token, message: str) -> None:
        if token.type == TokenType.EOF:
            self.report(token.line, ' at end', message)
        else:
            self.report(token.line, f" at '{token.lexeme}'", message)

    def runtime_error(self, error: LoxRuntimeError) -> None:
        self.emit(f"{error.message}\n[line {error.token.line}]")
        self.had_runtime_error = True

    def report(self, line: int, where: str, message: str) -> None:
        self.emit(f"[line {line}] Error{where}: {message}")
        self.had_error = True

    def emit(self, text: str) -> None:
        # Resolve stderr lazily so pytest's capsys sees the output.
        stream = self.stream if self.stream is not None else sys.stderr
        print(text, file=stream)

    def reset(self) -> None:
        self.had_error = False
        self.had_runtime_error = False
