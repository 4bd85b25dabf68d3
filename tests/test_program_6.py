import builtins
from pathlib import Path

from gcl.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_6_factorial(monkeypatch, capsys):
    monkeypatch.setattr(builtins, 'input', lambda prompt='': '10')
    with open(EXAMPLES / 'program_6.gcl', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    assert capsys.readouterr().out.strip() == 'Output: 3628800'


def test_program_6_factorial_wraps_at_64_bits(monkeypatch, capsys):
    # 21! does not fit in a signed 64-bit integer
    monkeypatch.setattr(builtins, 'input', lambda prompt='': '21')
    with open(EXAMPLES / 'program_6.gcl', 'r', encoding='utf-8') as f:
        source = f.read()
    Interpreter().run(parse_program(source))
    assert capsys.readouterr().out.strip() == 'Output: -4249290049419214848'
