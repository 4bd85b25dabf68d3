import builtins
from pathlib import Path

from gcl.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_5_gcd(monkeypatch, capsys):
    inputs = iter(['12', '18'])
    monkeypatch.setattr(builtins, 'input', lambda prompt='': next(inputs))
    with open(EXAMPLES / 'program_5.gcl', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    assert capsys.readouterr().out.strip() == 'Output: 6'
