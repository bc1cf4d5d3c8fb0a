"""Abstract Syntax Tree (AST) definitions for the Lox language.

The AST classes defined in this module represent the syntactic structure
of parsed Lox programs. Expressions and statements form two closed families
of frozen dataclasses; a program is a plain list of statements. Nodes own
their children, so every tree is finite and acyclic, and nothing mutates a
node after the parser has built it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .tokens import Token

LoxValue = Union[str, float, bool, None]


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass(frozen=True)
class Expr(Node):
    pass


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Grouping(Expr):
    inner: Expr


@dataclass(frozen=True)
class Literal(Expr):
    value: LoxValue


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token
    operand: Expr


@dataclass(frozen=True)
class Stmt(Node):
    pass


@dataclass(frozen=True)
class ExprStmt(Stmt):
    expr: Expr


@dataclass(frozen=True)
class PrintStmt(Stmt):
    expr: Expr
