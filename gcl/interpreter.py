"""Tree-walking interpreter for the language.

The interpreter executes a Program AST statement by statement. Expressions
are evaluated in post-order onto two stacks, one for integers and one for
booleans: a node evaluates its children (each pushing exactly one value),
pops the values it needs and pushes its own result. Both stacks and the
variable environment belong to one Interpreter instance, which runs one
program; create a new instance for every run.
"""

from __future__ import annotations

from typing import List, Optional

from .ast import (
    Node, Program, Statement, Assign, Loop, Conditional, Read, Write, Skip,
    AlgebraicExpression, BooleanExpression,
    Sum, Minus, Multiplication, Division, BinaryAlgebraicExpression,
    NumberLiteral, NumericVariable,
    And, Or, Not, BooleanConstant,
    Relation, Equals, NotEquals, LessThan, GreaterThan, LessOrEqual, GreaterOrEqual,
)
from .console import Console
from .environment import Environment
from .errors import InvalidIntegerInputError
from .parser import parse_program
from .printer import format_tree
from .types import parse_int64, truncating_divide, wrap_int64


class Interpreter:
    """Core interpreter that executes a Program AST."""
    def __init__(self, verbose: bool = False, debug_level: int = 0,
                 debug_file: str = 'debug.txt', console: Optional[Console] = None):
        self.env = Environment()
        self.arithmetic_stack: List[int] = []
        self.boolean_stack: List[bool] = []
        self.verbose = verbose
        self.console = console if console is not None else Console()
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w') if debug_level > 0 else None

    def debug(self, msg: str):
        if self.debug_fp:
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    # Public API
    def run(self, program: Program) -> Environment:
        try:
            if self.verbose:
                self.console.write_line(format_tree(program))
                self.console.write_line('Running program: ')
            self.execute_block(program.statements)
            return self.env
        finally:
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None

    def execute_block(self, statements):
        for stmt in statements:
            self.execute(stmt)

    def execute(self, node: Statement):
        if self.debug_level >= 1:
            self.debug(f"execute {type(node).__name__}")
        if isinstance(node, Assign):
            value = self.evaluate_algebraic(node.expr)
            self.env.set(node.variable, value)
            if self.debug_level >= 2:
                self.debug(f"assign {node.variable} = {self.env.get(node.variable)}")
            self.show_state()
            return
        if isinstance(node, Read):
            for name in node.variables:
                self.env.set(name, self.read_integer())
                if self.debug_level >= 2:
                    self.debug(f"read {name} = {self.env.get(name)}")
            self.show_state()
            return
        if isinstance(node, Write):
            for name in node.variables:
                self.console.write_line(f"Output: {self.env.get(name)}")
            return
        if isinstance(node, Loop):
            while True:
                cond = self.evaluate_boolean(node.condition)
                if self.debug_level >= 3:
                    self.debug(f"while condition -> {cond}")
                if not cond:
                    break
                self.execute_block(node.body)
            return
        if isinstance(node, Conditional):
            cond = self.evaluate_boolean(node.condition)
            if self.debug_level >= 3:
                self.debug(f"if condition -> {cond}")
            if cond:
                self.execute_block(node.then_branch)
            else:
                self.execute_block(node.else_branch)
            return
        if isinstance(node, Skip):
            return
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    def read_integer(self) -> int:
        prompt = 'Input: ' if self.verbose else ''
        text = self.console.read_line(prompt).strip()
        value = parse_int64(text)
        if value is None:
            raise InvalidIntegerInputError(text)
        return value

    def show_state(self):
        if self.verbose:
            self.console.write_line(f"State: {self.env}")

    # Expressions

    def evaluate_algebraic(self, node: AlgebraicExpression) -> int:
        self.evaluate(node)
        return self.arithmetic_stack.pop()

    def evaluate_boolean(self, node: BooleanExpression) -> bool:
        self.evaluate(node)
        return self.boolean_stack.pop()

    def evaluate(self, node: Node):
        if isinstance(node, NumberLiteral):
            self.arithmetic_stack.append(node.value)
            return
        if isinstance(node, NumericVariable):
            self.arithmetic_stack.append(self.env.get(node.name))
            return
        if isinstance(node, BinaryAlgebraicExpression):
            self.evaluate(node.left)
            self.evaluate(node.right)
            right = self.arithmetic_stack.pop()
            left = self.arithmetic_stack.pop()
            self.arithmetic_stack.append(self.apply_arithmetic(node, left, right))
            return
        if isinstance(node, BooleanConstant):
            self.boolean_stack.append(node.value)
            return
        if isinstance(node, Not):
            self.evaluate(node.operand)
            self.boolean_stack.append(not self.boolean_stack.pop())
            return
        if isinstance(node, (And, Or)):
            # And stops on false, Or stops on true; the right side is never evaluated then
            decisive = isinstance(node, Or)
            self.evaluate(node.left)
            if self.boolean_stack[-1] == decisive:
                return
            self.boolean_stack.pop()
            self.evaluate(node.right)
            return
        if isinstance(node, Relation):
            self.evaluate(node.left)
            self.evaluate(node.right)
            right = self.arithmetic_stack.pop()
            left = self.arithmetic_stack.pop()
            self.boolean_stack.append(self.apply_relation(node, left, right))
            return
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def apply_arithmetic(self, node: BinaryAlgebraicExpression, a: int, b: int) -> int:
        if isinstance(node, Sum):
            return wrap_int64(a + b)
        if isinstance(node, Minus):
            return wrap_int64(a - b)
        if isinstance(node, Multiplication):
            return wrap_int64(a * b)
        if isinstance(node, Division):
            return truncating_divide(a, b)
        raise NotImplementedError(f"unknown arithmetic node {type(node)}")

    def apply_relation(self, node: Relation, a: int, b: int) -> bool:
        if isinstance(node, Equals):
            return a == b
        if isinstance(node, NotEquals):
            return a != b
        if isinstance(node, LessThan):
            return a < b
        if isinstance(node, GreaterThan):
            return a > b
        if isinstance(node, LessOrEqual):
            return a <= b
        if isinstance(node, GreaterOrEqual):
            return a >= b
        raise NotImplementedError(f"unknown relation node {type(node)}")


def run_program(source: str, verbose: bool = False, debug_level: int = 0,
                console: Optional[Console] = None) -> Environment:
    """Convenience function to parse and run a program from a source string."""
    ast_program = parse_program(source)
    interpreter = Interpreter(verbose=verbose, debug_level=debug_level, console=console)
    return interpreter.run(ast_program)


def compile_module(file_path: str, verbose: bool = False, debug_level: int = 0) -> Interpreter:
    """Parse and execute a program file, returning the interpreter instance."""
    with open(file_path, 'r', encoding='utf-8') as f:
        source = f.read()
    ast_program = parse_program(source)
    interpreter = Interpreter(verbose=verbose, debug_level=debug_level)
    interpreter.run(ast_program)
    return interpreter
