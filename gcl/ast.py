"""Abstract Syntax Tree (AST) definitions for the language.

Every node is a frozen dataclass and child sequences are tuples, so a tree
is never modified after the parser builds it. The set of node classes is
closed: the printer, the interpreter and the JSON codec each dispatch on
these classes explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass(frozen=True)
class Statement(Node):
    pass


@dataclass(frozen=True)
class Expression(Node):
    pass


@dataclass(frozen=True)
class AlgebraicExpression(Expression):
    """Integer-valued expression."""
    pass


@dataclass(frozen=True)
class BooleanExpression(Expression):
    pass


###############################################################################
# Statements
###############################################################################

@dataclass(frozen=True)
class Program(Node):
    statements: Tuple[Statement, ...]


@dataclass(frozen=True)
class Assign(Statement):
    variable: str
    expr: AlgebraicExpression


@dataclass(frozen=True)
class Loop(Statement):
    condition: BooleanExpression
    body: Tuple[Statement, ...]


@dataclass(frozen=True)
class Conditional(Statement):
    condition: BooleanExpression
    then_branch: Tuple[Statement, ...]
    else_branch: Tuple[Statement, ...] = ()


@dataclass(frozen=True)
class Read(Statement):
    variables: Tuple[str, ...]


@dataclass(frozen=True)
class Write(Statement):
    variables: Tuple[str, ...]


@dataclass(frozen=True)
class Skip(Statement):
    pass


###############################################################################
# Algebraic expressions
###############################################################################

@dataclass(frozen=True)
class BinaryAlgebraicExpression(AlgebraicExpression):
    left: AlgebraicExpression
    right: AlgebraicExpression


@dataclass(frozen=True)
class Sum(BinaryAlgebraicExpression):
    pass


@dataclass(frozen=True)
class Minus(BinaryAlgebraicExpression):
    pass


@dataclass(frozen=True)
class Multiplication(BinaryAlgebraicExpression):
    pass


@dataclass(frozen=True)
class Division(BinaryAlgebraicExpression):
    pass


@dataclass(frozen=True)
class NumberLiteral(AlgebraicExpression):
    value: int


@dataclass(frozen=True)
class NumericVariable(AlgebraicExpression):
    name: str


###############################################################################
# Boolean expressions
###############################################################################

@dataclass(frozen=True)
class BinaryBooleanExpression(BooleanExpression):
    left: BooleanExpression
    right: BooleanExpression


@dataclass(frozen=True)
class And(BinaryBooleanExpression):
    pass


@dataclass(frozen=True)
class Or(BinaryBooleanExpression):
    pass


@dataclass(frozen=True)
class Not(BooleanExpression):
    operand: BooleanExpression


@dataclass(frozen=True)
class BooleanConstant(BooleanExpression):
    value: bool


@dataclass(frozen=True)
class Relation(BooleanExpression):
    """Comparison of two algebraic expressions."""
    left: AlgebraicExpression
    right: AlgebraicExpression


@dataclass(frozen=True)
class Equals(Relation):
    pass


@dataclass(frozen=True)
class NotEquals(Relation):
    pass


@dataclass(frozen=True)
class LessThan(Relation):
    pass


@dataclass(frozen=True)
class GreaterThan(Relation):
    pass


@dataclass(frozen=True)
class LessOrEqual(Relation):
    pass


@dataclass(frozen=True)
class GreaterOrEqual(Relation):
    pass


RELATION_OPERATORS = {
    '=': Equals,
    '<>': NotEquals,
    '<': LessThan,
    '>': GreaterThan,
    '<=': LessOrEqual,
    '=<': LessOrEqual,
    '>=': GreaterOrEqual,
}

WEAK_OPERATORS = {
    '+': Sum,
    '-': Minus,
}

STRONG_OPERATORS = {
    '*': Multiplication,
    '/': Division,
}
