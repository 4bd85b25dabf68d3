import pytest

from gcl.ast import (
    Program, Assign, Loop, Conditional, Read, Write, Skip,
    Sum, Minus, Multiplication, Division, NumberLiteral, NumericVariable,
    And, Or, Not, BooleanConstant,
    Equals, NotEquals, LessThan, GreaterThan, LessOrEqual, GreaterOrEqual,
)
from gcl.errors import ParseError
from gcl.lexer import tokenize
from gcl.parser import Parser, parse_program

a, b, c = NumericVariable('a'), NumericVariable('b'), NumericVariable('c')


def parse_expr(text):
    """Parse the right-hand side of a single assignment."""
    program = parse_program(f"x := {text}\n")
    return program.statements[0].expr


def parse_condition(text):
    program = parse_program(f"if {text} then skip fi\n")
    return program.statements[0].condition


def test_scenario_program():
    program = parse_program("x := 3; y := 4; write x,y\n")
    assert program == Program((
        Assign('x', NumberLiteral(3)),
        Assign('y', NumberLiteral(4)),
        Write(('x', 'y')),
    ))


def test_binary_operators_are_right_associative():
    assert parse_expr("a - b - c") == Minus(a, Minus(b, c))
    assert parse_expr("a / b / c") == Division(a, Division(b, c))
    assert parse_expr("a / b * c") == Division(a, Multiplication(b, c))


def test_multiplication_binds_tighter_than_addition():
    assert parse_expr("a + b * c") == Sum(a, Multiplication(b, c))
    assert parse_expr("a * b + c") == Sum(Multiplication(a, b), c)
    assert parse_expr("(a + b) * c") == Multiplication(Sum(a, b), c)


def test_and_binds_tighter_than_or():
    cond = parse_condition("a < 1 or b < 2 and c < 3")
    assert cond == Or(LessThan(a, NumberLiteral(1)), And(LessThan(b, NumberLiteral(2)), LessThan(c, NumberLiteral(3))))


def test_relation_operators():
    ops = {
        '=': Equals, '<>': NotEquals, '<': LessThan, '>': GreaterThan,
        '<=': LessOrEqual, '=<': LessOrEqual, '>=': GreaterOrEqual,
    }
    for op, cls in ops.items():
        assert parse_condition(f"a {op} b") == cls(a, b)


def test_parenthesized_algebraic_left_operand_of_relation():
    assert parse_condition("(a + b) < c") == LessThan(Sum(a, b), c)


def test_bracketed_boolean_expression():
    assert parse_condition("(a < b) and c > 0") == And(LessThan(a, b), GreaterThan(c, NumberLiteral(0)))


def test_nested_brackets_backtrack_at_each_level():
    assert parse_condition("((a < b))") == LessThan(a, b)
    assert parse_condition("((a + b) < c) or false") == Or(LessThan(Sum(a, b), c), BooleanConstant(False))
    assert parse_condition("not (a = b)") == Not(Equals(a, b))


def test_not_applies_to_one_element():
    assert parse_condition("not true and false") == And(Not(BooleanConstant(True)), BooleanConstant(False))


def test_conditional_without_else_has_empty_else_branch():
    stmt = parse_program("if true then skip fi\n").statements[0]
    assert stmt == Conditional(BooleanConstant(True), (Skip(),), ())


def test_conditional_and_loop_bodies_are_series():
    program = parse_program("while a < 3 do a := a + 1; write a od; if a = 3 then skip else read a, b fi\n")
    assert program.statements == (
        Loop(LessThan(a, NumberLiteral(3)), (Assign('a', Sum(a, NumberLiteral(1))), Write(('a',)))),
        Conditional(Equals(a, NumberLiteral(3)), (Skip(),), (Read(('a', 'b')),)),
    )


def test_newlines_are_transparent_inside_the_program():
    source = "read x;\nif x < 0\nthen y := 0 - x\nelse y := x\nfi;\nwrite y\n"
    assert len(parse_program(source).statements) == 3


def test_trailing_blank_lines_are_allowed():
    assert parse_program("skip\n\n\n") == Program((Skip(),))


def test_missing_terminating_newline():
    with pytest.raises(ParseError) as excinfo:
        parse_program("x := 1")
    assert excinfo.value.expected == 'NEWLINE'
    assert excinfo.value.found == 'end of input'


def test_content_after_terminating_newline():
    with pytest.raises(ParseError) as excinfo:
        parse_program("x := 1\ny := 2\n")
    assert excinfo.value.expected == 'end of program'


def test_parse_error_reports_expected_found_and_index():
    with pytest.raises(ParseError) as excinfo:
        parse_program("x 1\n")
    err = excinfo.value
    assert err.expected == 'ASSIGNMENT'
    assert "NUMBER('1')" in err.found
    assert err.index == 1
    assert str(err).startswith('ParseError:')


def test_invalid_statement_start():
    with pytest.raises(ParseError) as excinfo:
        parse_program("then\n")
    assert excinfo.value.expected == 'statement'
    assert excinfo.value.index == 0


def test_bare_variable_is_not_a_boolean_element():
    with pytest.raises(ParseError):
        parse_program("if (a < b) and c then skip fi\n")


def test_unbalanced_bracket_fails_both_alternatives():
    with pytest.raises(ParseError):
        parse_program("if (a < b then skip fi\n")


def test_integer_literal_range():
    assert parse_expr("9223372036854775807") == NumberLiteral(9223372036854775807)
    with pytest.raises(ParseError):
        parse_expr("9223372036854775808")


def test_parsing_is_idempotent():
    tokens = tokenize("read n; while n > 0 do write n; n := n - 1 od\n")
    assert Parser(tokens).parse_program() == Parser(tokens).parse_program()


def test_backtracking_restores_cursor_exactly():
    parser = Parser(tokenize("x y z"))

    def first():
        parser.consume(parser.peek())
        parser.consume(parser.peek())
        raise ParseError('no')

    def second():
        return parser.pos

    assert parser.resolve_brackets(first, second) == 0


def test_backtracking_only_catches_parse_errors():
    parser = Parser(tokenize("x"))

    def first():
        raise ValueError('boom')

    with pytest.raises(ValueError):
        parser.resolve_brackets(first, lambda: None)


def test_long_series_parses_to_flat_program():
    program = parse_program("; ".join("skip" for _ in range(2000)) + "\n")
    assert program == Program((Skip(),) * 2000)


def test_long_var_list():
    names = tuple(f"n{i}" for i in range(2000))
    program = parse_program(f"write {', '.join(names)}\n")
    assert program == Program((Write(names),))
