"""
Token definitions for the expression lexer.

The vocabulary is deliberately tiny:
- Numeric literals (integers and floats, kept as text until a parser needs them)
- Arithmetic operators (+ - * / ^) and postfix factorial (!)
- Parentheses
- End-of-input and illegal-character markers

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Union


class TokenKind(Enum):
    """
    Enumeration of all token kinds.

    Only identity matters for dispatch; the declaration order carries no meaning.
    """

    # Rather than stop on an unknown character, the lexer hands back ILLEGAL
    # and lets the parser decide.
    ILLEGAL = auto()
    EOF = auto()

    # Literals
    INTEGER = auto()                # 42
    FLOAT = auto()                  # 3.14

    # Operators
    PLUS = auto()                   # +
    MINUS = auto()                  # - (binary or prefix)
    STAR = auto()                   # *
    SLASH = auto()                  # /
    CARET = auto()                  # ^ (right associative)
    BANG = auto()                   # ! (postfix)

    # Grouping
    LPAREN = auto()                 # (
    RPAREN = auto()                 # )


@dataclass(frozen=True)
class SourceSpan:
    """Half-open range of character offsets into the source line."""
    start: int
    end: int

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    `literal` is the parsed numeric value. The lexer never fills it in;
    conversion is deferred to whichever parser consumes the token.
    """
    kind: TokenKind
    lexeme: str
    literal: Optional[Union[int, float]] = None
    span: Optional[SourceSpan] = None

    def __str__(self) -> str:
        if self.lexeme:
            return f"{self.kind.name}({self.lexeme!r})"
        return self.kind.name

    @property
    def is_literal(self) -> bool:
        """Check if this token is a numeric literal."""
        return self.kind in (TokenKind.INTEGER, TokenKind.FLOAT)


# Characters that map one-to-one onto a token kind
SINGLE_CHAR_TOKENS = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
    "!": TokenKind.BANG,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

# Reverse lookup used by the printers
OPERATOR_SYMBOLS = {kind: char for char, kind in SINGLE_CHAR_TOKENS.items()}

DIGITS = frozenset("0123456789")

# space, tab, newline, carriage return, vertical tab
WHITESPACE = frozenset(" \t\n\r\v")
