"""Grammar-driven parser for the language, built on Lark.

This is a second frontend next to the hand-written recursive-descent
parser in ``gcl.parser``. The grammar below describes the same language
and the transformer produces the same AST classes, so the two parsers can
be used interchangeably (and are checked against each other in the tests).

Lark ignores newlines here; the one place where a newline matters, the
newline that has to follow the last statement of a program, is checked
against the source after parsing.
"""

from __future__ import annotations

import re
from typing import List

from lark import Lark, Transformer
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken, VisitError

from .ast import (
    Program, Statement, Assign, Loop, Conditional, Read, Write, Skip,
    NumberLiteral, NumericVariable, And, Or, Not, BooleanConstant,
    RELATION_OPERATORS, WEAK_OPERATORS, STRONG_OPERATORS,
)
from .errors import GclError, LexError, ParseError
from .types import in_int64_range


GCL_GRAMMAR = r"""
    start: series

    series: stmt (";" stmt)*

    ?stmt: assign
         | "write" var_list                          -> write
         | "read" var_list                           -> read
         | "skip"                                    -> skip
         | "if" b_expr "then" series ["else" series] "fi" -> conditional
         | "while" b_expr "do" series "od"           -> loop

    assign: VARNAME ":=" a_expr
    var_list: VARNAME ("," VARNAME)*

    // Right recursive on purpose: a - b - c is a - (b - c)
    ?a_expr: a_term
           | a_term WEAK_OP a_expr                   -> weak_op
    ?a_term: a_elem
           | a_elem STRONG_OP a_term                 -> strong_op
    ?a_elem: NUMBER                                  -> number
           | VARNAME                                 -> variable
           | "(" a_expr ")"

    ?b_expr: b_term
           | b_term "or" b_expr                      -> or_expr
    ?b_term: b_elem
           | b_elem "and" b_term                     -> and_expr
    ?b_elem: "true"                                  -> true_constant
           | "false"                                 -> false_constant
           | "not" b_elem                            -> not_expr
           | a_expr RELATION a_expr                  -> relation
           | "(" b_expr ")"

    WEAK_OP: /[+-]/
    STRONG_OP: /[*\/]/
    RELATION: /<>|<=|=<|>=|=|<|>/
    NUMBER: /[1-9][0-9]*|0/
    VARNAME: /[A-Za-z_][A-Za-z0-9_]*/

    WS: /[ \t\r\n]+/
    %ignore WS
"""


GCL_PARSER = Lark(
    GCL_GRAMMAR,
    parser='earley',
    lexer='basic',
    ambiguity='resolve',
    propagate_positions=True,
    maybe_placeholders=True,
)

_PROGRAM_TERMINATOR = re.compile(r'[ \t\r]*\n')


class ASTTransformer(Transformer):
    """Transforms the raw parse tree into an AST."""

    def start(self, items):
        return Program(tuple(items[0]))

    def series(self, items) -> List[Statement]:
        return list(items)

    def assign(self, items):
        return Assign(str(items[0]), items[1])

    def var_list(self, items):
        return tuple(str(item) for item in items)

    def write(self, items):
        return Write(items[0])

    def read(self, items):
        return Read(items[0])

    def skip(self, items):
        return Skip()

    def conditional(self, items):
        condition, then_branch, else_branch = items
        return Conditional(condition, tuple(then_branch), tuple(else_branch or ()))

    def loop(self, items):
        condition, body = items
        return Loop(condition, tuple(body))

    # Expressions
    def weak_op(self, items):
        left, op, right = items
        return WEAK_OPERATORS[str(op)](left, right)

    def strong_op(self, items):
        left, op, right = items
        return STRONG_OPERATORS[str(op)](left, right)

    def number(self, items):
        token = items[0]
        value = int(token)
        if not in_int64_range(value):
            raise ParseError(f"integer literal {token} is out of range at {token.line}:{token.column}",
                             expected='NUMBER', found=str(token))
        return NumberLiteral(value)

    def variable(self, items):
        return NumericVariable(str(items[0]))

    def or_expr(self, items):
        return Or(items[0], items[1])

    def and_expr(self, items):
        return And(items[0], items[1])

    def not_expr(self, items):
        return Not(items[0])

    def true_constant(self, items):
        return BooleanConstant(True)

    def false_constant(self, items):
        return BooleanConstant(False)

    def relation(self, items):
        left, op, right = items
        return RELATION_OPERATORS[str(op)](left, right)


def parse_program(source: str) -> Program:
    """Parse source code into a Program AST using the Lark grammar.

    Lark's lexing failures become LexError and every other syntax error
    becomes ParseError, so callers handle both parsers the same way.
    """
    try:
        tree = GCL_PARSER.parse(source)
    except UnexpectedCharacters as e:
        raise LexError(source[e.pos_in_stream:e.pos_in_stream + 10], e.line, e.column) from e
    except UnexpectedToken as e:
        expected = ', '.join(sorted(e.expected))
        raise ParseError(f"could not find one of {expected}, found {e.token!r} at {e.line}:{e.column}",
                         expected=expected, found=repr(e.token)) from e
    except UnexpectedInput as e:
        raise ParseError(f"unexpected end of input: {e}", found='end of input') from e
    if not _PROGRAM_TERMINATOR.match(source, tree.meta.end_pos):
        raise ParseError("could not find NEWLINE after the last statement",
                         expected='NEWLINE', found=repr(source[tree.meta.end_pos:tree.meta.end_pos + 10]))
    try:
        return ASTTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, GclError):
            raise e.orig_exc from None
        raise
