"""JSON serialization/deserialization for the Lox AST.

This module converts between Lox AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. It supports a full
round-trip for all node types and for the operator tokens they carry. A
program (a list of statements) is wrapped as a `Program` object.
"""

from __future__ import annotations

from typing import Any, Dict, List, Type

from .ast import (
    Binary,
    Expr,
    ExprStmt,
    Grouping,
    Literal,
    PrintStmt,
    Stmt,
    Unary,
)
from .tokens import Token, TokenType


def token_to_obj(t: Token) -> Dict[str, Any]:
    return {"kind": t.type.name, "lexeme": t.lexeme, "literal": t.literal, "line": t.line}


def token_from_obj(o: Dict[str, Any]) -> Token:
    return Token(TokenType[o["kind"]], o["lexeme"], value_from_obj(o.get("literal")), int(o["line"]))


def value_from_obj(value: Any) -> Any:
    # Lox numbers are always floats; hand-written JSON may use integers.
    if isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    return value


def literal_from_obj(value: Any) -> Any:
    value = value_from_obj(value)
    if value is None or isinstance(value, (bool, float, str)):
        return value
    raise ValueError(f"Literal value must be a string, number, boolean or null, got {value!r}")


def node_from_obj(obj: Any, kind: Type) -> Any:
    node = ast_from_obj(obj)
    if not isinstance(node, kind):
        raise ValueError(f"Expected {kind.__name__}, got {type(node).__name__}")
    return node


def program_from_obj(obj: Any) -> List[Stmt]:
    """Load a whole program; the document root must be a `Program`."""
    if not isinstance(obj, dict) or obj.get("type") != "Program":
        raise ValueError("AST document root must be a Program")
    return ast_from_obj(obj)


def ast_to_obj(node: Any) -> Any:
    if isinstance(node, list):
        return {"type": "Program", "body": [ast_to_obj(n) for n in node]}
    if isinstance(node, Token):
        return {"type": "Token", "value": token_to_obj(node)}

    # Statements
    if isinstance(node, PrintStmt):
        return {"type": "PrintStmt", "expr": ast_to_obj(node.expr)}
    if isinstance(node, ExprStmt):
        return {"type": "ExprStmt", "expr": ast_to_obj(node.expr)}

    # Expressions
    if isinstance(node, Binary):
        return {
            "type": "Binary",
            "left": ast_to_obj(node.left),
            "operator": token_to_obj(node.operator),
            "right": ast_to_obj(node.right),
        }
    if isinstance(node, Grouping):
        return {"type": "Grouping", "inner": ast_to_obj(node.inner)}
    if isinstance(node, Literal):
        return {"type": "Literal", "value": node.value}
    if isinstance(node, Unary):
        return {"type": "Unary", "operator": token_to_obj(node.operator), "operand": ast_to_obj(node.operand)}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "Program":
        if not isinstance(obj["body"], list):
            raise ValueError("Program body must be a list")
        body: List[Stmt] = [node_from_obj(n, Stmt) for n in obj["body"]]
        return body
    if t == "Token":
        return token_from_obj(obj["value"])
    if t == "PrintStmt":
        return PrintStmt(expr=node_from_obj(obj["expr"], Expr))
    if t == "ExprStmt":
        return ExprStmt(expr=node_from_obj(obj["expr"], Expr))
    if t == "Binary":
        return Binary(
            left=node_from_obj(obj["left"], Expr),
            operator=token_from_obj(obj["operator"]),
            right=node_from_obj(obj["right"], Expr),
        )
    if t == "Grouping":
        return Grouping(inner=node_from_obj(obj["inner"], Expr))
    if t == "Literal":
        return Literal(value=literal_from_obj(obj.get("value")))
    if t == "Unary":
        return Unary(operator=token_from_obj(obj["operator"]), operand=node_from_obj(obj["operand"], Expr))

    raise ValueError(f"Unknown AST node type: {t}")
