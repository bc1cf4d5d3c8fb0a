"""Parser for the Lox language.

A recursive-descent parser with one method per precedence level:

    statement   -> printStmt | exprStmt
    printStmt   -> "print" expression ";"
    exprStmt    -> expression ";"
    expression  -> equality
    equality    -> comparison ( ( "!=" | "==" ) comparison )*
    comparison  -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term        -> factor ( ( "-" | "+" ) factor )*
    factor      -> unary ( ( "/" | "*" ) unary )*
    unary       -> ( "!" | "-" ) unary | primary
    primary     -> NUMBER | STRING | "true" | "false" | "nil"
                 | "(" expression ")"

Binary levels loop and fold to the left, so every binary operator is
left-associative. A syntax error is reported as soon as it is found, then
the parser synchronizes to the next statement boundary and keeps going so
that one call surfaces every malformed statement. If anything went wrong
`parse` raises `ParseFailure` instead of returning a partial program.
"""

from __future__ import annotations

from typing import List, Optional

from .ast import Binary, Expr, ExprStmt, Grouping, Literal, PrintStmt, Stmt, Unary
from .errors import ParseError, ParseFailure, ScanFailure
from .reporter import ErrorReporter
from .scanner import Scanner
from .tokens import Token, TokenType


# Tokens that can start a statement or declaration; synchronization stops
# in front of them.
STATEMENT_KEYWORDS = {
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
}


class Parser:
    def __init__(self, tokens: List[Token], reporter: Optional[ErrorReporter] = None):
        self.tokens = tokens
        self.reporter = reporter
        self.pos = 0
        self.errors: List[ParseError] = []

    def parse(self) -> List[Stmt]:
        statements: List[Stmt] = []
        while not self.is_at_end():
            try:
                statements.append(self.parse_statement())
            except ParseError:
                self.synchronize()
        if self.errors:
            raise ParseFailure(self.errors)
        return statements

    # Statements

    def parse_statement(self) -> Stmt:
        if self.match(TokenType.PRINT):
            return self.parse_print_stmt()
        return self.parse_expr_stmt()

    def parse_print_stmt(self) -> PrintStmt:
        value = self.parse_expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after value.")
        return PrintStmt(value)

    def parse_expr_stmt(self) -> ExprStmt:
        expr = self.parse_expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after expression.")
        return ExprStmt(expr)

    # Expressions

    def parse_expression(self) -> Expr:
        return self.parse_equality()

    def parse_equality(self) -> Expr:
        node = self.parse_comparison()
        while self.match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
            op_token = self.previous()
            right = self.parse_comparison()
            node = Binary(node, op_token, right)
        return node

    def parse_comparison(self) -> Expr:
        node = self.parse_term()
        while self.match(TokenType.GREATER, TokenType.GREATER_EQUAL,
                         TokenType.LESS, TokenType.LESS_EQUAL):
            op_token = self.previous()
            right = self.parse_term()
            node = Binary(node, op_token, right)
        return node

    def parse_term(self) -> Expr:
        node = self.parse_factor()
        while self.match(TokenType.MINUS, TokenType.PLUS):
            op_token = self.previous()
            right = self.parse_factor()
            node = Binary(node, op_token, right)
        return node

    def parse_factor(self) -> Expr:
        node = self.parse_unary()
        while self.match(TokenType.SLASH, TokenType.STAR):
            op_token = self.previous()
            right = self.parse_unary()
            node = Binary(node, op_token, right)
        return node

    def parse_unary(self) -> Expr:
        if self.match(TokenType.BANG, TokenType.MINUS):
            op_token = self.previous()
            operand = self.parse_unary()
            return Unary(op_token, operand)
        return self.parse_primary()

    def parse_primary(self) -> Expr:
        if self.match(TokenType.FALSE):
            return Literal(False)
        if self.match(TokenType.TRUE):
            return Literal(True)
        if self.match(TokenType.NIL):
            return Literal(None)
        if self.match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self.previous().literal)
        if self.match(TokenType.LEFT_PAREN):
            expr = self.parse_expression()
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)
        raise self.error(self.peek(), 'Expect expression.')

    # Error recovery

    def synchronize(self) -> None:
        """Skip tokens until the start of the next statement looks plausible."""
        self.advance()
        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.peek().type in STATEMENT_KEYWORDS:
                return
            self.advance()

    def error(self, token: Token, message: str) -> ParseError:
        err = ParseError(token, message)
        self.errors.append(err)
        if self.reporter is not None:
            self.reporter.syntax_error(token, message)
        return err

    # Token cursor

    def consume(self, token_type: TokenType, message: str) -> Token:
        if self.check(token_type):
            return self.advance()
        raise self.error(self.peek(), message)

    def match(self, *token_types: TokenType) -> bool:
        for token_type in token_types:
            if self.check(token_type):
                self.advance()
                return True
        return False

    def check(self, token_type: TokenType) -> bool:
        if self.is_at_end():
            return False
        return self.peek().type == token_type

    def advance(self) -> Token:
        if not self.is_at_end():
            self.pos += 1
        return self.previous()

    def is_at_end(self) -> bool:
        return self.peek().type == TokenType.EOF

    def peek(self) -> Token:
        return self.tokens[self.pos]

    def previous(self) -> Token:
        return self.tokens[self.pos - 1]


def parse_program(source: str, reporter: Optional[ErrorReporter] = None) -> List[Stmt]:
    """Scan and parse Lox source code into a list of statements.

    Lexical errors raise `ScanFailure` and syntax errors raise
    `ParseFailure`; in both cases every error has already been handed to
    `reporter` when one is given.
    """
    scanner = Scanner(source, reporter)
    tokens = scanner.scan_tokens()
    parser = Parser(tokens, reporter)
    statements = parser.parse()
    if scanner.errors:
        raise ScanFailure(scanner.errors)
    return statements
