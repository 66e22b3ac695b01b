"""Lexer for BhaiLang.

The scanner makes a single left-to-right pass over the source code with an
index cursor. Each step looks at the character under the cursor, consumes
one character (or a maximal run of digits or letters) and appends at most
one :class:`Token`.

Tokens cover integer literals, identifiers, the reserved words listed in
:data:`KEYWORDS`, the single-character operators ``+ - * / = > <`` and the
grouping characters. Parentheses and braces share the same token types.
Spaces, tabs, newlines and semicolons are skipped without producing tokens.

Any other character stops the scan with an
:class:`~bhailang.exceptions.UnrecognizedCharacterError`. There is no error
recovery: :func:`tokenize` raises, :func:`scan` hands the error back inside
a :class:`ScanResult`, and neither returns the tokens read so far.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional

from bhailang.exceptions import UnrecognizedCharacterError


class TokenType(Enum):
    """
    Token classifications produced by the scanner.
    """
    # Literals
    NUMBER = "Number"
    IDENTIFIER = "Identifier"

    # Keywords
    CONST = "const"
    VAR = "var"
    LET = "Let"
    IF = "if"
    ELIF = "elif"
    ELSE = "else"
    WHILE = "while"
    FOR = "for"
    SUN_BHAI = "SunBhai"
    BOL_BHAI = "BolBhai"
    BOOL = "bool"

    # Grouping & operators
    GREATER_THAN = "GreaterThan"
    LESS_THAN = "LessThan"
    BINARY_OPERATOR = "BinaryOperator"
    EQUALS = "Equals"
    OPEN_PAREN = "OpenParen"
    CLOSE_PAREN = "CloseParen"


KEYWORDS = MappingProxyType({
    'let':     TokenType.LET,
    'while':   TokenType.WHILE,
    'for':     TokenType.FOR,
    'var':     TokenType.VAR,
    'const':   TokenType.CONST,
    'if':      TokenType.IF,
    'elif':    TokenType.ELIF,
    'else':    TokenType.ELSE,
    'SunBhai': TokenType.SUN_BHAI,  # read input
    'BolBhai': TokenType.BOL_BHAI,  # print output
    'bool':    TokenType.BOOL,
})

# Single-character tokens: (type, label)
SINGLE_CHAR_TOKENS = MappingProxyType({
    '(': (TokenType.OPEN_PAREN, 'OpenParen'),
    '{': (TokenType.OPEN_PAREN, 'OpenParen'),
    ')': (TokenType.CLOSE_PAREN, 'CloseParen'),
    '}': (TokenType.CLOSE_PAREN, 'CloseParen'),
    '+': (TokenType.BINARY_OPERATOR, 'BinaryOperator'),
    '-': (TokenType.BINARY_OPERATOR, 'BinaryOperator'),
    '*': (TokenType.BINARY_OPERATOR, 'BinaryOperator'),
    '/': (TokenType.BINARY_OPERATOR, 'BinaryOperator'),
    '=': (TokenType.EQUALS, 'EqualOperator'),
    '>': (TokenType.GREATER_THAN, 'greaterThen'),
    '<': (TokenType.LESS_THAN, 'lessThen'),
})

SKIPPABLE = frozenset(' \t\n;')


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    ``label`` mirrors ``type`` and only exists for display. ``offset`` is the
    index of the first character in the source, ``line`` and ``column`` are
    1-based.
    """
    value: str
    type: TokenType
    label: str
    line: int = 1
    column: int = 1
    offset: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.label!r}, line={self.line})"


@dataclass(frozen=True)
class ScanResult:
    """
    Outcome of :func:`scan`: either the full token list or the error that
    stopped the scan.
    """
    tokens: Optional[list[Token]] = None
    error: Optional[UnrecognizedCharacterError] = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when the scan produced tokens."""
        return self.error is None

    def unwrap(self) -> list[Token]:
        """Return the tokens, or raise the error that stopped the scan."""
        if self.error is not None:
            raise self.error
        return self.tokens


def is_int(char: str) -> bool:
    """Return whether ``char`` is an ASCII decimal digit."""
    return '0' <= char <= '9'


def is_alpha(char: str) -> bool:
    """Return whether ``char`` is an ASCII letter."""
    return 'a' <= char <= 'z' or 'A' <= char <= 'Z'


def is_skippable(char: str) -> bool:
    """Return whether ``char`` is consumed without producing a token."""
    return char in SKIPPABLE


def tokenize(code: str, file: Optional[str] = None) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        file (str): Optional file name reported in errors.

    Returns:
        list[Token]: Tokens in source order.

    Raises:
        UnrecognizedCharacterError: If a character matches no token rule.
    """
    tokens: list[Token] = []
    length = len(code)
    pos = 0
    line = 1
    line_start = 0

    while pos < length:
        char = code[pos]
        column = pos - line_start + 1

        if char in SINGLE_CHAR_TOKENS:
            type_, label = SINGLE_CHAR_TOKENS[char]
            tokens.append(Token(char, type_, label, line, column, pos))
            pos += 1
        elif is_int(char):
            end = pos + 1
            while end < length and is_int(code[end]):
                end += 1
            tokens.append(Token(code[pos:end], TokenType.NUMBER, 'integer', line, column, pos))
            pos = end
        elif is_alpha(char):
            end = pos + 1
            while end < length and is_alpha(code[end]):
                end += 1
            ident = code[pos:end]
            reserved = KEYWORDS.get(ident)
            if reserved is not None:
                tokens.append(Token(ident, reserved, 'reserved', line, column, pos))
            else:
                tokens.append(Token(ident, TokenType.IDENTIFIER, 'variable', line, column, pos))
            pos = end
        elif is_skippable(char):
            pos += 1
            if char == '\n':
                line += 1
                line_start = pos
        else:
            raise UnrecognizedCharacterError(char, line, column, file)

    return tokens


def scan(code: str, file: Optional[str] = None) -> ScanResult:
    """
    Tokenize ``code`` without raising.

    Returns:
        ScanResult: ``tokens`` on success, otherwise ``error`` holding the
        offending character and its position.
    """
    try:
        return ScanResult(tokens=tokenize(code, file))
    except UnrecognizedCharacterError as e:
        return ScanResult(error=e)


def reconstruct(code: str, tokens: list[Token]) -> str:
    """
    Rebuild ``code`` from ``tokens`` and the skipped characters between them.

    Raises:
        ValueError: If a token does not match its span, overlaps the token
            before it, or a gap holds a character that is not skippable.
    """
    parts: list[str] = []
    pos = 0
    for tok in tokens:
        if tok.offset < pos:
            raise ValueError(f"Token {tok!r} overlaps the previous token at offset {tok.offset}")
        gap = code[pos:tok.offset]
        if not all(is_skippable(c) for c in gap):
            raise ValueError(f"Unskippable text {gap!r} before offset {tok.offset}")
        end = tok.offset + len(tok.value)
        if code[tok.offset:end] != tok.value:
            raise ValueError(f"Token {tok!r} does not match source at offset {tok.offset}")
        parts.append(gap)
        parts.append(tok.value)
        pos = end
    tail = code[pos:]
    if not all(is_skippable(c) for c in tail):
        raise ValueError(f"Unskippable trailing text {tail!r}")
    parts.append(tail)
    return "".join(parts)
