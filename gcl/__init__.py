# Guarded command language package
# This package provides a tokenizer, parsers and a tree-walking interpreter.
from .errors import (
    GclError,
    LexError,
    ParseError,
    UndefinedVariableError,
    InvalidIntegerInputError,
    GclArithmeticError,
)
from .lexer import tokenize
from .parser import parse_program
from .printer import format_tree, print_tree
from .interpreter import run_program, compile_module, Interpreter

__all__ = [
    'GclError',
    'LexError',
    'ParseError',
    'UndefinedVariableError',
    'InvalidIntegerInputError',
    'GclArithmeticError',
    'tokenize',
    'parse_program',
    'format_tree',
    'print_tree',
    'run_program',
    'compile_module',
    'Interpreter',
]
