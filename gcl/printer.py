"""Indented textual dump of an AST, used for debugging and verbose runs.

Each node is rendered as ``+- ClassName`` with its attributes and children
indented beneath it::

    +- Program
         +- Assign
              variable: "x"
              +- NumberLiteral
                   value: "3"
"""

from __future__ import annotations

from typing import List, Sequence

from .ast import (
    Node, Program, Assign, Loop, Conditional, Read, Write, Skip,
    BinaryAlgebraicExpression, NumberLiteral, NumericVariable,
    BinaryBooleanExpression, Not, BooleanConstant, Relation,
)

NODE_INDENT = '     '
SECTION_INDENT = '   '


class TreePrinter:
    def __init__(self):
        self.lines: List[str] = []
        self.indent = ''

    def node_name(self, node: Node):
        self.lines.append(f"{self.indent}+- {type(node).__name__}")

    def attribute(self, key: str, value: str):
        self.lines.append(f'{self.indent}{NODE_INDENT}{key}: "{value}"')

    def child(self, node: Node):
        saved = self.indent
        self.indent += NODE_INDENT
        self.visit(node)
        self.indent = saved

    def children(self, nodes: Sequence[Node]):
        saved = self.indent
        self.indent += NODE_INDENT
        for node in nodes:
            self.visit(node)
        self.indent = saved

    def section(self, name: str, nodes: Sequence[Node]):
        self.lines.append(f"{self.indent}{NODE_INDENT}{name}:")
        saved = self.indent
        self.indent += SECTION_INDENT
        self.children(nodes)
        self.indent = saved

    def visit(self, node: Node):
        self.node_name(node)
        if isinstance(node, Program):
            self.children(node.statements)
        elif isinstance(node, Assign):
            self.attribute('variable', node.variable)
            self.child(node.expr)
        elif isinstance(node, Loop):
            self.section('Condition', [node.condition])
            self.section('Body', node.body)
        elif isinstance(node, Conditional):
            self.section('Condition', [node.condition])
            self.section('Then', node.then_branch)
            if node.else_branch:
                self.section('Else', node.else_branch)
        elif isinstance(node, (Read, Write)):
            self.attribute('variables', '[' + ', '.join(node.variables) + ']')
        elif isinstance(node, Skip):
            pass
        elif isinstance(node, NumberLiteral):
            self.attribute('value', str(node.value))
        elif isinstance(node, NumericVariable):
            self.attribute('name', node.name)
        elif isinstance(node, BooleanConstant):
            self.attribute('value', 'true' if node.value else 'false')
        elif isinstance(node, Not):
            self.child(node.operand)
        elif isinstance(node, (BinaryAlgebraicExpression, BinaryBooleanExpression, Relation)):
            self.child(node.left)
            self.child(node.right)
        else:
            raise NotImplementedError(f"print: unexpected node type {type(node)}")


def format_tree(node: Node) -> str:
    printer = TreePrinter()
    printer.visit(node)
    return '\n'.join(printer.lines)


def print_tree(node: Node):
    print(format_tree(node))
