"""Scanner for the Lox language.

Lexing is delegated to a Lark lexer configured with one terminal per Lox
token type. Terminal names match `TokenType` member names, so every Lark
token converts directly into a Lox `Token`. Reserved words are declared as
string terminals; Lark retypes an identifier match whose text equals a
keyword, so `print` becomes PRINT while `printer` stays an IDENTIFIER.

Two catch-all terminals with negative priority turn malformed input into
tokens instead of exceptions: UNTERMINATED_STRING swallows an opening quote
and the rest of the input, and UNEXPECTED_CHARACTER matches any single
character nothing else accepts. Both are reported and dropped, so scanning
always runs to the end of the source.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from lark import Lark

from .reporter import ErrorReporter
from .tokens import Token, TokenType


LOX_LEXICON = r"""
    start: _token*

    _token: LEFT_PAREN | RIGHT_PAREN | LEFT_BRACE | RIGHT_BRACE
          | COMMA | DOT | MINUS | PLUS | SEMICOLON | SLASH | STAR
          | BANG | BANG_EQUAL | EQUAL | EQUAL_EQUAL
          | GREATER | GREATER_EQUAL | LESS | LESS_EQUAL
          | IDENTIFIER | STRING | NUMBER
          | AND | CLASS | ELSE | FALSE | FUN | FOR | IF | NIL | OR
          | PRINT | RETURN | SUPER | THIS | TRUE | VAR | WHILE
          | UNTERMINATED_STRING | UNEXPECTED_CHARACTER

    LEFT_PAREN: "("
    RIGHT_PAREN: ")"
    LEFT_BRACE: "{"
    RIGHT_BRACE: "}"
    COMMA: ","
    DOT: "."
    MINUS: "-"
    PLUS: "+"
    SEMICOLON: ";"
    SLASH: "/"
    STAR: "*"

    BANG_EQUAL: "!="
    BANG: "!"
    EQUAL_EQUAL: "=="
    EQUAL: "="
    GREATER_EQUAL: ">="
    GREATER: ">"
    LESS_EQUAL: "<="
    LESS: "<"

    IDENTIFIER: /[A-Za-z_][A-Za-z0-9_]*/
    STRING: /"[^"]*"/
    NUMBER: /[0-9]+(?:\.[0-9]+)?/

    AND: "and"
    CLASS: "class"
    ELSE: "else"
    FALSE: "false"
    FUN: "fun"
    FOR: "for"
    IF: "if"
    NIL: "nil"
    OR: "or"
    PRINT: "print"
    RETURN: "return"
    SUPER: "super"
    THIS: "this"
    TRUE: "true"
    VAR: "var"
    WHILE: "while"

    UNTERMINATED_STRING.-1: /"[^"]*/
    UNEXPECTED_CHARACTER.-1: /./

    COMMENT: /\/\/[^\n]*/
    WHITESPACE: /[ \t\r\n]+/
    %ignore COMMENT
    %ignore WHITESPACE
"""


LOX_LEXER = Lark(
    LOX_LEXICON,
    parser='lalr',
    lexer='basic',
)


class Scanner:
    def __init__(self, source: str, reporter: Optional[ErrorReporter] = None):
        self.source = source
        self.reporter = reporter
        self.errors: List[Tuple[int, str]] = []

    def scan_tokens(self) -> List[Token]:
        tokens: List[Token] = []
        for lark_token in LOX_LEXER.lex(self.source):
            kind = lark_token.type
            if kind == 'UNEXPECTED_CHARACTER':
                self.error(lark_token.line, 'Unexpected character.')
                continue
            if kind == 'UNTERMINATED_STRING':
                self.error(self.last_line(), 'Unterminated string.')
                continue
            tokens.append(self.make_token(TokenType[kind], str(lark_token), lark_token.line))
        tokens.append(Token(TokenType.EOF, '', None, self.last_line()))
        return tokens

    def make_token(self, token_type: TokenType, lexeme: str, line: int) -> Token:
        literal = None
        if token_type == TokenType.NUMBER:
            literal = float(lexeme)
        elif token_type == TokenType.STRING:
            literal = lexeme[1:-1]
        return Token(token_type, lexeme, literal, line)

    def last_line(self) -> int:
        return self.source.count('\n') + 1

    def error(self, line: int, message: str) -> None:
        self.errors.append((line, message))
        if self.reporter is not None:
            self.reporter.error(line, message)


def scan_tokens(source: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """Scan Lox source into tokens, reporting lexical errors to `reporter`."""
    return Scanner(source, reporter).scan_tokens()
