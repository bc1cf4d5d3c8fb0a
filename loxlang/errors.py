from typing import List, Tuple
from loxlang.tokens import Token


class LoxError(Exception):
    """Base class for every error raised by the Lox front end and evaluator."""


class ParseError(LoxError):
    """A single syntax error found at `token`."""
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message


class ParseFailure(LoxError):
    """Raised once a parse call has finished with one or more syntax errors."""
    def __init__(self, errors: List[ParseError]):
        super().__init__(f"{len(errors)} syntax error(s)")
        self.errors = errors


class ScanFailure(LoxError):
    """Raised when the scanner reported lexical errors for a source unit."""
    def __init__(self, errors: List[Tuple[int, str]]):
        super().__init__(f"{len(errors)} lexical error(s)")
        self.errors = errors


class LoxRuntimeError(LoxError):
    """Exception type used to propagate Lox runtime errors."""
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message
