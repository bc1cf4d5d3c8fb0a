"""Render Lox syntax trees as parenthesized prefix text for debugging.

    print_ast(Binary(Unary(-, 123), *, Grouping(45.67)))
    -> '(* (- 123.0) (group 45.67))'
"""

from __future__ import annotations

from typing import Any

from .ast import Binary, ExprStmt, Grouping, Literal, Node, PrintStmt, Unary


def parenthesize(name: str, *nodes: Node) -> str:
    parts = ' '.join(print_ast(node) for node in nodes)
    return f"({name} {parts})"


def literal_text(value: Any) -> str:
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def print_ast(node: Node) -> str:
    if isinstance(node, Binary):
        return parenthesize(node.operator.lexeme, node.left, node.right)
    if isinstance(node, Grouping):
        return parenthesize('group', node.inner)
    if isinstance(node, Literal):
        return literal_text(node.value)
    if isinstance(node, Unary):
        return parenthesize(node.operator.lexeme, node.operand)
    if isinstance(node, PrintStmt):
        return parenthesize('print', node.expr)
    if isinstance(node, ExprStmt):
        return parenthesize(';', node.expr)
    raise NotImplementedError(f"print_ast: unexpected node type {type(node)}")
