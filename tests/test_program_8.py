import pytest

from loxlang.errors import ParseFailure
from loxlang.interpreter import parse_program
from loxlang.reporter import ErrorReporter


def test_program_8_syntax_errors(example_source, capsys):
    source = example_source('program_8.lox')
    reporter = ErrorReporter()
    with pytest.raises(ParseFailure) as excinfo:
        parse_program(source, reporter)
    assert len(excinfo.value.errors) == 2
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.strip().split('\n') == [
        "[line 1] Error at ';': Expect expression.",
        "[line 2] Error at ';': Expect ')' after expression.",
    ]
