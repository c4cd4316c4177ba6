"""
Symbol definitions for the shunting-yard engine.

The shunting-yard algorithm does not track the previous token, so the
unary/binary reading of '-' is settled before it runs. Symbols are lexer
tokens tagged with that resolved role.
"""

from enum import Enum, auto
from dataclasses import dataclass

from ..lexer.tokens import Token


class SymbolType(Enum):
    """Role of a token in the shunting-yard algorithm."""
    LITERAL = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    BINARY_PLUS = auto()
    BINARY_MINUS = auto()
    BINARY_MUL = auto()
    BINARY_DIV = auto()
    BINARY_EXP = auto()
    UNARY_MINUS = auto()
    END = auto()


class Associativity(Enum):
    LEFT = auto()
    RIGHT = auto()


@dataclass(frozen=True)
class Symbol:
    """A token with its resolved shunting-yard role."""
    type: SymbolType
    token: Token

    @property
    def lexeme(self) -> str:
        return self.token.lexeme

    def __str__(self) -> str:
        return f"{self.type.name}({self.lexeme!r})"


# Only the relative order is meaningful
PRECEDENCE = {
    SymbolType.BINARY_EXP: 4,
    SymbolType.UNARY_MINUS: 3,
    SymbolType.BINARY_MUL: 2,
    SymbolType.BINARY_DIV: 2,
    SymbolType.BINARY_PLUS: 1,
    SymbolType.BINARY_MINUS: 1,
}

ASSOCIATIVITY = {
    SymbolType.BINARY_EXP: Associativity.RIGHT,
    SymbolType.UNARY_MINUS: Associativity.LEFT,
    SymbolType.BINARY_MUL: Associativity.LEFT,
    SymbolType.BINARY_DIV: Associativity.LEFT,
    SymbolType.BINARY_PLUS: Associativity.LEFT,
    SymbolType.BINARY_MINUS: Associativity.LEFT,
}

OPERATOR_TYPES = frozenset(PRECEDENCE)
