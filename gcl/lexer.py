"""Tokenizer for the language.

The lexer keeps a cursor into the source and tries an ordered list of
patterns at that position. The first pattern in the list that matches wins
(this is not longest-match), so the order of ``TOKEN_PATTERNS`` is part of
the grammar: keywords come before the identifier pattern, ``:=`` before the
relational ``=``, and so on. Whitespace is matched and dropped; newlines are
real tokens because the parser needs the terminating newline of a program.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Pattern, Tuple

from .errors import LexError


class TokenKind(Enum):
    SEMICOLON = 'SEMICOLON'
    COMMA = 'COMMA'
    SKIP = 'SKIP'
    READ = 'READ'
    WRITE = 'WRITE'
    ASSIGNMENT = 'ASSIGNMENT'
    IF = 'IF'
    THEN = 'THEN'
    ELSE = 'ELSE'
    FI = 'FI'
    WHILE = 'WHILE'
    DO = 'DO'
    OD = 'OD'
    OR = 'OR'
    AND = 'AND'
    NOT = 'NOT'
    OPENING_BRACKET = 'OPENING_BRACKET'
    CLOSING_BRACKET = 'CLOSING_BRACKET'
    NEWLINE = 'NEWLINE'
    WEAK_OP = 'WEAK_OP'
    STRONG_OP = 'STRONG_OP'
    RELATION = 'RELATION'
    BOOLEAN_CONSTANT = 'BOOLEAN_CONSTANT'
    NUMBER = 'NUMBER'
    VARNAME = 'VARNAME'
    WHITESPACE = 'WHITESPACE'


@dataclass(frozen=True)
class Token:
    text: str
    kind: TokenKind
    line: int = 1
    column: int = 1

    def __repr__(self) -> str:
        return f"{self.kind.value}({self.text!r})"


def _keyword(word: str) -> str:
    # keywords must not swallow the prefix of a longer identifier
    return word + r'\b'


TOKEN_PATTERNS: List[Tuple[str, TokenKind]] = [
    (r';', TokenKind.SEMICOLON),
    (r',', TokenKind.COMMA),
    (_keyword('skip'), TokenKind.SKIP),
    (_keyword('read'), TokenKind.READ),
    (_keyword('write'), TokenKind.WRITE),
    (r':=', TokenKind.ASSIGNMENT),
    (_keyword('if'), TokenKind.IF),
    (_keyword('then'), TokenKind.THEN),
    (_keyword('else'), TokenKind.ELSE),
    (_keyword('fi'), TokenKind.FI),
    (_keyword('while'), TokenKind.WHILE),
    (_keyword('do'), TokenKind.DO),
    (_keyword('od'), TokenKind.OD),
    (_keyword('or'), TokenKind.OR),
    (_keyword('and'), TokenKind.AND),
    (_keyword('not'), TokenKind.NOT),
    (r'\(', TokenKind.OPENING_BRACKET),
    (r'\)', TokenKind.CLOSING_BRACKET),
    (r'\r?\n', TokenKind.NEWLINE),
    (r'[+-]', TokenKind.WEAK_OP),
    (r'[*/]', TokenKind.STRONG_OP),
    (r'<>|<=|=<|>=|=|<|>', TokenKind.RELATION),
    (r'(?:true|false)\b', TokenKind.BOOLEAN_CONSTANT),
    (r'[1-9][0-9]*|0', TokenKind.NUMBER),
    (r'[A-Za-z_][A-Za-z0-9_]*', TokenKind.VARNAME),
    (r'[ \t\r]', TokenKind.WHITESPACE),
]


class Lexer:
    """Matches the ordered token patterns against a source text."""

    def __init__(self, patterns: List[Tuple[str, TokenKind]] = TOKEN_PATTERNS):
        self.matchers: List[Tuple[Pattern[str], TokenKind]] = [
            (re.compile(pattern), kind) for pattern, kind in patterns
        ]

    def match_first(self, source: str, pos: int) -> Tuple[str, TokenKind]:
        for regex, kind in self.matchers:
            match = regex.match(source, pos)
            if match is not None and match.end() > pos:
                return match.group(), kind
        raise LexError(source[pos:pos + 10], *_line_column(source, pos))

    def tokenize(self, source: str) -> Tuple[Token, ...]:
        tokens: List[Token] = []
        pos = 0
        line = 1
        col = 1
        length = len(source)
        while pos < length:
            text, kind = self.match_first(source, pos)
            if kind is not TokenKind.WHITESPACE:
                tokens.append(Token(text, kind, line, col))
            pos += len(text)
            if kind is TokenKind.NEWLINE:
                line += 1
                col = 1
            else:
                col += len(text)
        return tuple(tokens)


def _line_column(source: str, pos: int) -> Tuple[int, int]:
    line = source.count('\n', 0, pos) + 1
    column = pos - (source.rfind('\n', 0, pos) + 1) + 1
    return line, column


def tokenize(source: str) -> Tuple[Token, ...]:
    """Convert source code into a tuple of tokens, whitespace dropped."""
    return Lexer().tokenize(source)
