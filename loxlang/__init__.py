# Lox language package
# This package provides the scanner, parser and tree-walking interpreter for
# the expression subset of the Lox language.
from .errors import LoxError, LoxRuntimeError, ParseError, ParseFailure, ScanFailure
from .interpreter import Interpreter, run_file, run_program
from .parser import Parser, parse_program
from .reporter import ErrorReporter
from .scanner import scan_tokens

__all__ = [
    'ErrorReporter',
    'Interpreter',
    'LoxError',
    'LoxRuntimeError',
    'ParseError',
    'ParseFailure',
    'Parser',
    'ScanFailure',
    'parse_program',
    'run_file',
    'run_program',
    'scan_tokens',
]
