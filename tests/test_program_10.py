from loxlang.interpreter import parse_program, Interpreter


def test_program_10_division_by_zero(example_source, capsys):
    source = example_source('program_10.lox')
    ast = parse_program(source)
    interp = Interpreter()
    interp.interpret(ast)
    captured = capsys.readouterr()
    assert captured.out.strip().split('\n') == ['inf', '-inf', 'NaN']
    assert captured.err == ''
