"""JSON serialization/deserialization for the AST.

This module converts between AST dataclasses and plain Python dict/list
structures suitable for JSON encoding. It supports a full round-trip for
all node types.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import (
    Program,
    Assign,
    Loop,
    Conditional,
    Read,
    Write,
    Skip,
    BinaryAlgebraicExpression,
    Sum,
    Minus,
    Multiplication,
    Division,
    NumberLiteral,
    NumericVariable,
    BinaryBooleanExpression,
    And,
    Or,
    Not,
    BooleanConstant,
    Relation,
    Equals,
    NotEquals,
    LessThan,
    GreaterThan,
    LessOrEqual,
    GreaterOrEqual,
)

BINARY_NODES: Dict[str, type] = {
    cls.__name__: cls
    for cls in (
        Sum, Minus, Multiplication, Division,
        And, Or,
        Equals, NotEquals, LessThan, GreaterThan, LessOrEqual, GreaterOrEqual,
    )
}


def ast_to_obj(node: Any) -> Any:
    if isinstance(node, Program):
        return {"type": "Program", "statements": [ast_to_obj(s) for s in node.statements]}
    if isinstance(node, Assign):
        return {"type": "Assign", "variable": node.variable, "expr": ast_to_obj(node.expr)}
    if isinstance(node, Loop):
        return {
            "type": "Loop",
            "condition": ast_to_obj(node.condition),
            "body": [ast_to_obj(s) for s in node.body],
        }
    if isinstance(node, Conditional):
        return {
            "type": "Conditional",
            "condition": ast_to_obj(node.condition),
            "then_branch": [ast_to_obj(s) for s in node.then_branch],
            "else_branch": [ast_to_obj(s) for s in node.else_branch],
        }
    if isinstance(node, Read):
        return {"type": "Read", "variables": list(node.variables)}
    if isinstance(node, Write):
        return {"type": "Write", "variables": list(node.variables)}
    if isinstance(node, Skip):
        return {"type": "Skip"}
    if isinstance(node, NumberLiteral):
        return {"type": "NumberLiteral", "value": node.value}
    if isinstance(node, NumericVariable):
        return {"type": "NumericVariable", "name": node.name}
    if isinstance(node, BooleanConstant):
        return {"type": "BooleanConstant", "value": node.value}
    if isinstance(node, Not):
        return {"type": "Not", "operand": ast_to_obj(node.operand)}
    if isinstance(node, (BinaryAlgebraicExpression, BinaryBooleanExpression, Relation)):
        return {
            "type": type(node).__name__,
            "left": ast_to_obj(node.left),
            "right": ast_to_obj(node.right),
        }

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def _field(obj: Dict[str, Any], key: str) -> Any:
    if key not in obj:
        raise ValueError(f"AST node {obj.get('type')} is missing field '{key}'")
    return obj[key]


def _names(obj: Dict[str, Any]) -> tuple:
    names = _field(obj, "variables")
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        raise TypeError(f"AST node {obj.get('type')} variables must be a list of names")
    return tuple(names)


def ast_from_obj(obj: Any) -> Any:
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "Program":
        return Program(statements=tuple(ast_from_obj(s) for s in _field(obj, "statements")))
    if t == "Assign":
        return Assign(variable=_field(obj, "variable"), expr=ast_from_obj(_field(obj, "expr")))
    if t == "Loop":
        return Loop(
            condition=ast_from_obj(_field(obj, "condition")),
            body=tuple(ast_from_obj(s) for s in _field(obj, "body")),
        )
    if t == "Conditional":
        return Conditional(
            condition=ast_from_obj(_field(obj, "condition")),
            then_branch=tuple(ast_from_obj(s) for s in _field(obj, "then_branch")),
            else_branch=tuple(ast_from_obj(s) for s in obj.get("else_branch", [])),
        )
    if t == "Read":
        return Read(variables=_names(obj))
    if t == "Write":
        return Write(variables=_names(obj))
    if t == "Skip":
        return Skip()
    if t == "NumberLiteral":
        return NumberLiteral(value=int(_field(obj, "value")))
    if t == "NumericVariable":
        return NumericVariable(name=_field(obj, "name"))
    if t == "BooleanConstant":
        return BooleanConstant(value=bool(_field(obj, "value")))
    if t == "Not":
        return Not(operand=ast_from_obj(_field(obj, "operand")))
    if t in BINARY_NODES:
        return BINARY_NODES[t](left=ast_from_obj(_field(obj, "left")), right=ast_from_obj(_field(obj, "right")))

    raise ValueError(f"Unknown AST node type: {t}")
