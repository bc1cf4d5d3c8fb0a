import io

from loxlang.reporter import ErrorReporter
from loxlang.scanner import Scanner, scan_tokens
from loxlang.tokens import TokenType


def kinds(tokens):
    return [t.type for t in tokens]


def test_operators_and_punctuation():
    tokens = scan_tokens('(){},.-+;*/ ! != = == > >= < <=')
    assert kinds(tokens) == [
        TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN,
        TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE,
        TokenType.COMMA, TokenType.DOT, TokenType.MINUS, TokenType.PLUS,
        TokenType.SEMICOLON, TokenType.STAR, TokenType.SLASH,
        TokenType.BANG, TokenType.BANG_EQUAL, TokenType.EQUAL, TokenType.EQUAL_EQUAL,
        TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL,
        TokenType.EOF,
    ]


def test_two_char_operators_without_spaces():
    tokens = scan_tokens('1>=2!=3')
    assert kinds(tokens) == [
        TokenType.NUMBER, TokenType.GREATER_EQUAL, TokenType.NUMBER,
        TokenType.BANG_EQUAL, TokenType.NUMBER, TokenType.EOF,
    ]


def test_keywords_and_identifiers():
    tokens = scan_tokens('print printer nil nil_ or orchid true false')
    assert kinds(tokens) == [
        TokenType.PRINT, TokenType.IDENTIFIER, TokenType.NIL, TokenType.IDENTIFIER,
        TokenType.OR, TokenType.IDENTIFIER, TokenType.TRUE, TokenType.FALSE,
        TokenType.EOF,
    ]
    assert tokens[1].lexeme == 'printer'


def test_number_literals():
    tokens = scan_tokens('123 4.5')
    assert tokens[0].literal == 123.0
    assert isinstance(tokens[0].literal, float)
    assert tokens[0].lexeme == '123'
    assert tokens[1].literal == 4.5


def test_dot_is_not_part_of_a_number():
    assert kinds(scan_tokens('1.')) == [TokenType.NUMBER, TokenType.DOT, TokenType.EOF]
    assert kinds(scan_tokens('.5')) == [TokenType.DOT, TokenType.NUMBER, TokenType.EOF]


def test_string_literal():
    tokens = scan_tokens('"hi there"')
    assert tokens[0].type == TokenType.STRING
    assert tokens[0].lexeme == '"hi there"'
    assert tokens[0].literal == 'hi there'


def test_line_numbers():
    tokens = scan_tokens('1\n2\n\n3')
    assert [t.line for t in tokens] == [1, 2, 4, 4]
    assert tokens[-1].type == TokenType.EOF


def test_comments_are_skipped():
    tokens = scan_tokens('// nothing here\nprint 1; // trailing')
    assert kinds(tokens) == [TokenType.PRINT, TokenType.NUMBER, TokenType.SEMICOLON, TokenType.EOF]
    assert tokens[0].line == 2


def test_empty_source_has_only_eof():
    tokens = scan_tokens('')
    assert len(tokens) == 1
    assert tokens[0].type == TokenType.EOF
    assert tokens[0].lexeme == ''
    assert tokens[0].line == 1


def test_unexpected_character_is_reported_and_skipped():
    stream = io.StringIO()
    reporter = ErrorReporter(stream)
    scanner = Scanner('1 @ 2', reporter)
    tokens = scanner.scan_tokens()
    assert kinds(tokens) == [TokenType.NUMBER, TokenType.NUMBER, TokenType.EOF]
    assert scanner.errors == [(1, 'Unexpected character.')]
    assert stream.getvalue() == '[line 1] Error: Unexpected character.\n'
    assert reporter.had_error


def test_unterminated_string():
    scanner = Scanner('print "abc\ndef')
    tokens = scanner.scan_tokens()
    assert kinds(tokens) == [TokenType.PRINT, TokenType.EOF]
    assert scanner.errors == [(2, 'Unterminated string.')]
