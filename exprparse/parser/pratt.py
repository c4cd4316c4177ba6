"""
Pratt Parser Implementation

Top-down operator precedence parsing. The engine knows nothing about the
expression grammar itself; it only holds two tables keyed by token kind:

- prefix parselets, for tokens that start an expression
- infix parselets, for tokens that follow an already parsed left operand

Each infix parselet declares its own precedence. parse_expression() keeps
folding the left-hand side through infix parselets for as long as the next
token binds tighter than the caller's minimum precedence.

ExpressionParser at the bottom registers the arithmetic grammar.

Author: xwest
"""

from typing import List, Dict, Callable, Optional
from dataclasses import dataclass
from enum import IntEnum

from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenKind
from .ast_nodes import (
    Expression, IntegerLiteral, FloatLiteral,
    PrefixExpression, InfixExpression, PostfixExpression
)
from .errors import (
    create_illegal_character_error, create_no_prefix_parselet_error,
    create_no_infix_parselet_error, create_unexpected_token_error,
    create_trailing_input_error
)
from .literals import to_integer, to_float


class Precedence(IntEnum):
    """
    Operator precedence levels for Pratt parsing.

    Only the relative order matters, never the magnitude.
    """
    LOWEST = 0
    SUM = 1             # + -
    PRODUCT = 2         # * /
    EXPONENT = 3        # ^
    PREFIX = 4          # -x
    POSTFIX = 5         # x!


PrefixParselet = Callable[['PrattParser', Token], Expression]
InfixParselet = Callable[['PrattParser', Expression, Token], Expression]


class PrattParser:
    """
    Generic Pratt parsing engine.

    Pulls tokens from the lexer into a lookahead buffer only as far as needed.
    Every token is consumed exactly once, in order.
    """

    def __init__(self, lexer: Lexer):
        """
        Initialize parser with a lexer.

        Args:
            lexer: Token source, read lazily
        """
        self.lexer = lexer
        self._lookahead: List[Token] = []

        self.prefix_parselets: Dict[TokenKind, PrefixParselet] = {}
        self.infix_parselets: Dict[TokenKind, InfixParselet] = {}

    def register_prefix(self, kind: TokenKind, parselet: PrefixParselet):
        """Register the parselet for `kind` in prefix position."""
        self.prefix_parselets[kind] = parselet

    def register_infix(self, kind: TokenKind, parselet: InfixParselet):
        """Register the parselet for `kind` in infix position. It must have a `precedence`."""
        self.infix_parselets[kind] = parselet

    def parse(self) -> Expression:
        """
        Parse one complete expression.

        Returns:
            Root of the expression tree

        Raises:
            ParseError: If the input is not a single well-formed expression
            LexerError: If the lexer fails on a float literal
        """
        expression = self.parse_expression(Precedence.LOWEST)

        current = self.look_ahead(0)
        if current.kind != TokenKind.EOF:
            raise create_trailing_input_error(current)

        return expression

    # The heart of the Pratt parser.
    def parse_expression(self, precedence: int) -> Expression:
        """Parse an expression whose operators bind tighter than `precedence`."""
        token = self.consume()

        prefix_parselet = self.prefix_parselets.get(token.kind)
        if prefix_parselet is None:
            if token.kind == TokenKind.ILLEGAL:
                raise create_illegal_character_error(token)
            raise create_no_prefix_parselet_error(token)

        left = prefix_parselet(self, token)

        while precedence < self._peek_precedence():
            token = self.consume()

            infix_parselet = self.infix_parselets.get(token.kind)
            if infix_parselet is None:
                raise create_no_infix_parselet_error(token)

            left = infix_parselet(self, left, token)

        return left

    def consume(self, expected: Optional[TokenKind] = None) -> Token:
        """
        Consume and return the next token.

        Raises:
            UnexpectedTokenError: If `expected` is given and the next token differs
        """
        token = self.look_ahead(0)
        if expected is not None and token.kind != expected:
            raise create_unexpected_token_error(expected, token)

        self._lookahead.pop(0)
        return token

    def look_ahead(self, distance: int) -> Token:
        """Return the token `distance` positions ahead without consuming it."""
        while distance >= len(self._lookahead):
            self._lookahead.append(self.lexer.next_token())
        return self._lookahead[distance]

    def _peek_precedence(self) -> int:
        # Tokens without an infix parselet end the climb instead of failing
        # here; the caller reports them.
        parselet = self.infix_parselets.get(self.look_ahead(0).kind)
        if parselet is None:
            return Precedence.LOWEST
        return parselet.precedence


# ============================================================================
# Parselets
# ============================================================================

@dataclass(frozen=True)
class PrefixOperatorParselet:
    """Prefix operator such as unary minus."""
    precedence: int

    def __call__(self, parser: PrattParser, token: Token) -> Expression:
        # The operand is a full expression; only the outer climb binds at
        # this parselet's level.
        operand = parser.parse_expression(Precedence.LOWEST)
        return PrefixExpression(token.kind, operand, token)


@dataclass(frozen=True)
class InfixOperatorParselet:
    """Binary operator, left or right associative."""
    precedence: int
    right_associative: bool = False

    def __call__(self, parser: PrattParser, left: Expression, token: Token) -> Expression:
        # One less than our own precedence lets an equal operator to the
        # right still bind, which is what makes a^b^c group as a^(b^c).
        right_precedence = self.precedence - (1 if self.right_associative else 0)
        right = parser.parse_expression(right_precedence)
        return InfixExpression(token.kind, left, right, token)


@dataclass(frozen=True)
class PostfixOperatorParselet:
    """Postfix operator such as factorial. Consumes no operand."""
    precedence: int

    def __call__(self, parser: PrattParser, left: Expression, token: Token) -> Expression:
        return PostfixExpression(token.kind, left, token)


def parse_integer(parser: PrattParser, token: Token) -> Expression:
    """Integer literal parselet."""
    return IntegerLiteral(to_integer(token), token)


def parse_float(parser: PrattParser, token: Token) -> Expression:
    """Float literal parselet."""
    return FloatLiteral(to_float(token), token)


def parse_group(parser: PrattParser, token: Token) -> Expression:
    """Parenthesized expression. The parentheses leave no node behind."""
    expression = parser.parse_expression(Precedence.LOWEST)
    parser.consume(TokenKind.RPAREN)
    return expression


class ExpressionParser(PrattParser):
    """
    Pratt parser configured for the arithmetic grammar.

    Bindings:
        -x      PREFIX
        + -     SUM, left associative
        * /     PRODUCT, left associative
        ^       EXPONENT, right associative
        x!      POSTFIX
    """

    def __init__(self, lexer: Lexer):
        super().__init__(lexer)
        self._init_parsing_tables()

    def _init_parsing_tables(self):
        """Register the parselets of the arithmetic grammar."""

        # Literals and grouping
        self.register_prefix(TokenKind.INTEGER, parse_integer)
        self.register_prefix(TokenKind.FLOAT, parse_float)
        self.register_prefix(TokenKind.LPAREN, parse_group)

        # Operators
        self._prefix(TokenKind.MINUS, Precedence.PREFIX)

        self._infix_left(TokenKind.PLUS, Precedence.SUM)
        self._infix_left(TokenKind.MINUS, Precedence.SUM)
        self._infix_left(TokenKind.STAR, Precedence.PRODUCT)
        self._infix_left(TokenKind.SLASH, Precedence.PRODUCT)
        self._infix_right(TokenKind.CARET, Precedence.EXPONENT)

        self._postfix(TokenKind.BANG, Precedence.POSTFIX)

    def _prefix(self, kind: TokenKind, precedence: int):
        self.register_prefix(kind, PrefixOperatorParselet(precedence))

    def _infix_left(self, kind: TokenKind, precedence: int):
        self.register_infix(kind, InfixOperatorParselet(precedence, right_associative=False))

    def _infix_right(self, kind: TokenKind, precedence: int):
        self.register_infix(kind, InfixOperatorParselet(precedence, right_associative=True))

    def _postfix(self, kind: TokenKind, precedence: int):
        self.register_infix(kind, PostfixOperatorParselet(precedence))


def parse_string(source: str) -> Expression:
    """
    Convenience function to parse a source string with the Pratt parser.

    Raises:
        ParseError: If parsing fails
        LexerError: If lexing fails
    """
    return ExpressionParser(Lexer(source)).parse()
