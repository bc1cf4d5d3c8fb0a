from loxlang.interpreter import parse_program, Interpreter


def test_program_11_comparisons(example_source, capsys):
    source = example_source('program_11.lox')
    ast = parse_program(source)
    interp = Interpreter()
    interp.interpret(ast)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['true', 'true', 'false', 'true', 'true']
