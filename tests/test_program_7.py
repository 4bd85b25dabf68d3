from pathlib import Path

from gcl.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_7_short_circuit_guards_division(capsys):
    # Both conditions would divide by zero if their right operand ran.
    with open(EXAMPLES / 'program_7.gcl', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    assert capsys.readouterr().out == 'Output: 0\n'
