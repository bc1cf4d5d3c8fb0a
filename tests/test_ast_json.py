import json

import pytest

from loxlang.ast import Literal, PrintStmt
from loxlang.ast_json import ast_from_obj, ast_to_obj, program_from_obj
from loxlang.interpreter import Interpreter
from loxlang.parser import parse_program


SOURCE = 'print -(1 + 2) * 3 >= 4;\n"a" + "b" == "ab";\nprint !nil != false;\n'


def test_round_trip_through_json():
    statements = parse_program(SOURCE)
    data = json.loads(json.dumps(ast_to_obj(statements)))
    assert data['type'] == 'Program'
    assert ast_from_obj(data) == statements


def test_operator_tokens_survive(capsys):
    statements = parse_program('\nprint 1 + nil;')
    restored = ast_from_obj(json.loads(json.dumps(ast_to_obj(statements))))
    operator = restored[0].expr.operator
    assert operator.lexeme == '+'
    assert operator.line == 2
    interp = Interpreter()
    interp.interpret(restored)
    assert interp.runtime_error.token.line == 2
    capsys.readouterr()


def test_integer_literals_are_read_as_numbers():
    data = {'type': 'Program', 'body': [{'type': 'PrintStmt', 'expr': {'type': 'Literal', 'value': 3}}]}
    statements = ast_from_obj(data)
    assert statements == [PrintStmt(Literal(3.0))]
    assert isinstance(statements[0].expr.value, float)


def test_unknown_node_type():
    with pytest.raises(ValueError):
        ast_from_obj({'type': 'WhileStmt'})
    with pytest.raises(TypeError):
        ast_to_obj(object())


def test_literal_values_are_lox_values():
    for value in ([1, 2], {'a': 1}):
        with pytest.raises(ValueError):
            ast_from_obj({'type': 'Literal', 'value': value})


def test_statement_children_are_checked():
    token = {'type': 'Token', 'value': {'kind': 'NIL', 'lexeme': 'nil', 'literal': None, 'line': 1}}
    with pytest.raises(ValueError):
        ast_from_obj({'type': 'PrintStmt', 'expr': token})
    with pytest.raises(ValueError):
        ast_from_obj({'type': 'Program', 'body': [{'type': 'Literal', 'value': 1}]})


def test_program_root_required():
    assert program_from_obj({'type': 'Program', 'body': []}) == []
    with pytest.raises(ValueError):
        program_from_obj({'type': 'Literal', 'value': 1})
