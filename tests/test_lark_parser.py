from pathlib import Path

import pytest

from gcl import lark_parser
from gcl.ast import And, GreaterThan, LessThan, Minus, NumberLiteral, NumericVariable, Sum
from gcl.errors import LexError, ParseError
from gcl.parser import parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'

SOURCES = [
    "x := 3; y := 4; write x,y\n",
    "read x; if x < 0 then y := 0 - x else y := x fi; write y\n",
    "i := 0; while i < 3 do write i; i := i + 1 od\n",
    "x := a - b - c / d / e * f\n",
    "if (a + b) < c then skip fi\n",
    "if (a < b) and c > 0 or not (a = b) then skip fi\n",
    "if ((a + b) < c) or false then skip else a := 1 fi\n",
    "x := 1\n  + 2\n\n",
    "if a =< b and a <= b and a <> b and a >= b then skip fi\n",
]


@pytest.mark.parametrize('source', SOURCES)
def test_lark_parser_matches_recursive_descent(source):
    assert lark_parser.parse_program(source) == parse_program(source)


def test_lark_parser_matches_recursive_descent_on_examples():
    for path in sorted(EXAMPLES.glob('*.gcl')):
        source = path.read_text(encoding='utf-8')
        assert lark_parser.parse_program(source) == parse_program(source), path.name


def test_lark_parser_keeps_right_associativity():
    program = lark_parser.parse_program("x := a - b - c\n")
    a, b, c = NumericVariable('a'), NumericVariable('b'), NumericVariable('c')
    assert program.statements[0].expr == Minus(a, Minus(b, c))


def test_lark_parser_resolves_brackets():
    program = lark_parser.parse_program("if (a + b) < c and (a < b) and c > 0 then skip fi\n")
    a, b, c = NumericVariable('a'), NumericVariable('b'), NumericVariable('c')
    assert program.statements[0].condition == And(
        LessThan(Sum(a, b), c),
        And(LessThan(a, b), GreaterThan(c, NumberLiteral(0))),
    )


def test_lark_parser_requires_terminating_newline():
    with pytest.raises(ParseError) as excinfo:
        lark_parser.parse_program("x := 1")
    assert excinfo.value.expected == 'NEWLINE'


def test_lark_parser_rejects_trailing_statements():
    with pytest.raises(ParseError):
        lark_parser.parse_program("x := 1\ny := 2\n")


def test_lark_parser_lex_error():
    with pytest.raises(LexError) as excinfo:
        lark_parser.parse_program("x := 3 # comment\n")
    assert excinfo.value.text.startswith('#')


def test_lark_parser_literal_out_of_range():
    with pytest.raises(ParseError):
        lark_parser.parse_program("x := 9223372036854775808\n")


def test_lark_parser_identifier_with_keyword_prefix():
    program = lark_parser.parse_program("iffy := done\n")
    assert program == parse_program("iffy := done\n")
