"""Recursive-descent parser for the language.

One method per grammar nonterminal, all sharing a single cursor into the
token tuple::

    program   := series NEWLINE
    series    := stmt (';' stmt)*
    stmt      := assign | write | read | 'skip' | cond | loop
    aExpr     := aTerm (('+'|'-') aExpr)?
    aTerm     := aElem (('*'|'/') aTerm)?
    aElem     := NUMBER | VARNAME | '(' aExpr ')'
    bExpr     := bTerm ('or' bExpr)?
    bTerm     := bElem ('and' bTerm)?
    bElem     := BOOL | 'not' bElem | relation | '(' bExpr ')'
    relation  := aExpr relOp aExpr
    varList   := VARNAME (',' VARNAME)*

The binary operators are right recursive, so ``a - b - c`` parses as
``a - (b - c)``. Newlines are skipped when peeking or consuming, except for
the newline that must terminate the program.

A ``bElem`` starting with ``(`` is either the left side of a relation,
``(a + b) < c``, or a bracketed boolean expression, ``(a < b) and c > 0``.
The parser tries the relation first and on a ParseError resets the cursor
and parses the bracketed expression instead. This is the only place the
parser backtracks.
"""

from __future__ import annotations

from typing import Callable, List, Sequence

from .ast import (
    Program, Statement, Assign, Loop, Conditional, Read, Write, Skip,
    AlgebraicExpression, BooleanExpression, NumberLiteral, NumericVariable,
    And, Or, Not, BooleanConstant,
    RELATION_OPERATORS, WEAK_OPERATORS, STRONG_OPERATORS,
)
from .errors import ParseError
from .lexer import Token, TokenKind, tokenize
from .types import in_int64_range


class Parser:
    def __init__(self, tokens: Sequence[Token]):
        self.tokens = tuple(tokens)
        self.pos = 0

    # Cursor helpers

    def peek(self) -> TokenKind:
        """Kind of the next token that is not a newline.

        NEWLINE is returned when only newlines (or nothing) remain.
        """
        i = self.pos
        while i < len(self.tokens):
            if self.tokens[i].kind is not TokenKind.NEWLINE:
                return self.tokens[i].kind
            i += 1
        return TokenKind.NEWLINE

    def consume(self, expected: TokenKind, ignore_newlines: bool = True) -> Token:
        if ignore_newlines:
            while self.pos < len(self.tokens) and self.tokens[self.pos].kind is TokenKind.NEWLINE:
                self.pos += 1
        if self.pos < len(self.tokens):
            token = self.tokens[self.pos]
            if token.kind is expected:
                self.pos += 1
                return token
            found = repr(token)
        else:
            found = 'end of input'
        raise ParseError(
            f"could not find {expected.value}, found {found} at token index {self.pos}",
            expected=expected.value, found=found, index=self.pos,
        )

    def error(self, what: str) -> ParseError:
        found = self.peek().value
        return ParseError(f"could not parse {what}, found {found} at token index {self.pos}",
                          expected=what, found=found, index=self.pos)

    # Statements

    def parse_program(self) -> Program:
        statements = self.parse_series()
        self.consume(TokenKind.NEWLINE, ignore_newlines=False)
        if self.peek() is not TokenKind.NEWLINE:
            raise self.error('end of program')
        return Program(tuple(statements))

    def parse_series(self) -> List[Statement]:
        statements = [self.parse_statement()]
        while self.peek() is TokenKind.SEMICOLON:
            self.consume(TokenKind.SEMICOLON)
            statements.append(self.parse_statement())
        return statements

    def parse_statement(self) -> Statement:
        kind = self.peek()
        if kind is TokenKind.VARNAME:
            return self.parse_assign()
        if kind is TokenKind.WRITE:
            self.consume(TokenKind.WRITE)
            return Write(tuple(self.parse_var_list()))
        if kind is TokenKind.READ:
            self.consume(TokenKind.READ)
            return Read(tuple(self.parse_var_list()))
        if kind is TokenKind.SKIP:
            self.consume(TokenKind.SKIP)
            return Skip()
        if kind is TokenKind.IF:
            return self.parse_conditional()
        if kind is TokenKind.WHILE:
            return self.parse_loop()
        raise self.error('statement')

    def parse_assign(self) -> Assign:
        variable = self.consume(TokenKind.VARNAME).text
        self.consume(TokenKind.ASSIGNMENT)
        return Assign(variable, self.parse_a_expr())

    def parse_loop(self) -> Loop:
        self.consume(TokenKind.WHILE)
        condition = self.parse_b_expr()
        self.consume(TokenKind.DO)
        body = self.parse_series()
        self.consume(TokenKind.OD)
        return Loop(condition, tuple(body))

    def parse_conditional(self) -> Conditional:
        self.consume(TokenKind.IF)
        condition = self.parse_b_expr()
        self.consume(TokenKind.THEN)
        then_branch = self.parse_series()
        else_branch: List[Statement] = []
        if self.peek() is TokenKind.ELSE:
            self.consume(TokenKind.ELSE)
            else_branch = self.parse_series()
        self.consume(TokenKind.FI)
        return Conditional(condition, tuple(then_branch), tuple(else_branch))

    def parse_var_list(self) -> List[str]:
        names = [self.consume(TokenKind.VARNAME).text]
        while self.peek() is TokenKind.COMMA:
            self.consume(TokenKind.COMMA)
            names.append(self.consume(TokenKind.VARNAME).text)
        return names

    # Algebraic expressions

    def parse_a_expr(self) -> AlgebraicExpression:
        left = self.parse_a_term()
        if self.peek() is TokenKind.WEAK_OP:
            op = self.consume(TokenKind.WEAK_OP).text
            return WEAK_OPERATORS[op](left, self.parse_a_expr())
        return left

    def parse_a_term(self) -> AlgebraicExpression:
        left = self.parse_a_elem()
        if self.peek() is TokenKind.STRONG_OP:
            op = self.consume(TokenKind.STRONG_OP).text
            return STRONG_OPERATORS[op](left, self.parse_a_term())
        return left

    def parse_a_elem(self) -> AlgebraicExpression:
        kind = self.peek()
        if kind is TokenKind.NUMBER:
            token = self.consume(TokenKind.NUMBER)
            value = int(token.text)
            if not in_int64_range(value):
                raise ParseError(f"integer literal {token.text} is out of range",
                                 expected=TokenKind.NUMBER.value, found=repr(token), index=self.pos - 1)
            return NumberLiteral(value)
        if kind is TokenKind.VARNAME:
            return NumericVariable(self.consume(TokenKind.VARNAME).text)
        if kind is TokenKind.OPENING_BRACKET:
            self.consume(TokenKind.OPENING_BRACKET)
            expr = self.parse_a_expr()
            self.consume(TokenKind.CLOSING_BRACKET)
            return expr
        raise self.error('algebraic element')

    # Boolean expressions

    def parse_b_expr(self) -> BooleanExpression:
        left = self.parse_b_term()
        if self.peek() is TokenKind.OR:
            self.consume(TokenKind.OR)
            return Or(left, self.parse_b_expr())
        return left

    def parse_b_term(self) -> BooleanExpression:
        left = self.parse_b_elem()
        if self.peek() is TokenKind.AND:
            self.consume(TokenKind.AND)
            return And(left, self.parse_b_term())
        return left

    def parse_b_elem(self) -> BooleanExpression:
        kind = self.peek()
        if kind is TokenKind.BOOLEAN_CONSTANT:
            return BooleanConstant(self.consume(TokenKind.BOOLEAN_CONSTANT).text == 'true')
        if kind is TokenKind.NOT:
            self.consume(TokenKind.NOT)
            return Not(self.parse_b_elem())
        if kind in (TokenKind.NUMBER, TokenKind.VARNAME):
            return self.parse_relation()
        if kind is TokenKind.OPENING_BRACKET:
            return self.resolve_brackets(self.parse_relation, self.parse_bracketed_b_expr)
        raise self.error('boolean element')

    def parse_relation(self) -> BooleanExpression:
        left = self.parse_a_expr()
        op = self.consume(TokenKind.RELATION).text
        return RELATION_OPERATORS[op](left, self.parse_a_expr())

    def parse_bracketed_b_expr(self) -> BooleanExpression:
        self.consume(TokenKind.OPENING_BRACKET)
        expr = self.parse_b_expr()
        self.consume(TokenKind.CLOSING_BRACKET)
        return expr

    def resolve_brackets(self, first: Callable[[], BooleanExpression],
                         second: Callable[[], BooleanExpression]) -> BooleanExpression:
        saved_pos = self.pos
        try:
            return first()
        except ParseError:
            self.pos = saved_pos
            return second()


def parse_tokens(tokens: Sequence[Token]) -> Program:
    return Parser(tokens).parse_program()


def parse_program(source: str) -> Program:
    """Parse source code into a Program AST using the recursive-descent parser."""
    return parse_tokens(tokenize(source))
