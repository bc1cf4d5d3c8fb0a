import io

from loxlang.errors import LoxRuntimeError
from loxlang.reporter import ErrorReporter
from loxlang.tokens import Token, TokenType


def test_formats_and_reset():
    stream = io.StringIO()
    reporter = ErrorReporter(stream)
    reporter.error(3, 'Unexpected character.')
    reporter.syntax_error(Token(TokenType.EOF, '', None, 4), "Expect ';' after value.")
    reporter.runtime_error(LoxRuntimeError(Token(TokenType.MINUS, '-', None, 5), 'Operand must be a number.'))
    assert stream.getvalue().splitlines() == [
        '[line 3] Error: Unexpected character.',
        "[line 4] Error at end: Expect ';' after value.",
        'Operand must be a number.',
        '[line 5]',
    ]
    assert reporter.had_error and reporter.had_runtime_error

    reporter.reset()
    assert not reporter.had_error
    assert not reporter.had_runtime_error
    assert vars(reporter) == {'stream': stream, 'had_error': False, 'had_runtime_error': False}
