"""
Recursive-Descent Parser Implementation

One method per precedence level, lowest binding first:

    Expression     = Addition
    Addition       = Multiplication { ("+" | "-") Multiplication }
    Multiplication = Power { ("*" | "/") Power }
    Power          = Unary [ "^" Power ]
    Unary          = "-" Unary | Primary
    Primary        = Integer | Float | "(" Expression ")"

Addition and Multiplication are left recursive rules turned into loops, so
20 - 7 - 2 accumulates as (20 - 7) - 2. Power and Unary are right recursive
and call themselves, not the next rule down, so 2^3^4 groups as 2^(3^4)
and --2 as -(-2). Replacing either self-call with a loop or with a call to
the next rule changes associativity.

Author: xwest
"""

import functools
from typing import Optional

from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenKind
from .ast_nodes import (
    Expression, IntegerLiteral, FloatLiteral, PrefixExpression, InfixExpression
)
from .errors import (
    create_illegal_character_error, create_unexpected_primary_error,
    create_unexpected_token_error, create_trailing_input_error
)
from .literals import to_integer, to_float
from .tracer import Tracer


def traced(rule: str):
    """Report entry to and exit from a grammar rule to the parser's tracer."""

    def decorator(method):
        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            if self._tracer is None:
                return method(self, *args, **kwargs)

            self._tracer.enter(rule, self._current_token)
            value = method(self, *args, **kwargs)
            self._tracer.exit(value)
            return value

        return wrapper

    return decorator


class RecursiveDescentParser:
    """
    Hand-written recursive-descent parser for the arithmetic grammar.

    Keeps exactly one token of lookahead.
    """

    def __init__(self, lexer: Lexer, tracer: Optional[Tracer] = None):
        """
        Initialize parser with a lexer.

        Args:
            lexer: Token source, read lazily
            tracer: Optional observer of rule entry/exit, for diagnostics only
        """
        self.lexer = lexer
        self._tracer = tracer
        self._current_token: Optional[Token] = None

    def parse(self) -> Expression:
        """
        Parse one complete expression.

        Raises:
            ParseError: If the input is not a single well-formed expression
            LexerError: If the lexer fails on a float literal
        """
        self._next_token()
        return self._parse()

    @traced("parse")
    def _parse(self) -> Expression:
        value = self._parse_expression()
        if not self._is_token(TokenKind.EOF):
            raise create_trailing_input_error(self._current_token)
        return value

    @traced("expression")
    def _parse_expression(self) -> Expression:
        return self._parse_addition()

    @traced("addition")
    def _parse_addition(self) -> Expression:
        # By the time _parse_multiplication returns, everything binding
        # tighter has been consumed; what is left for this loop is + and -.
        left = self._parse_multiplication()

        while self._is_token(TokenKind.PLUS) or self._is_token(TokenKind.MINUS):
            operator = self._current_token
            self._next_token()
            right = self._parse_multiplication()
            left = InfixExpression(operator.kind, left, right, operator)

        return left

    @traced("multiplication")
    def _parse_multiplication(self) -> Expression:
        left = self._parse_power()

        while self._is_token(TokenKind.STAR) or self._is_token(TokenKind.SLASH):
            operator = self._current_token
            self._next_token()
            right = self._parse_power()
            left = InfixExpression(operator.kind, left, right, operator)

        return left

    @traced("power")
    def _parse_power(self) -> Expression:
        left = self._parse_unary()

        # An if, not a while: the self-recursive call is the loop.
        if self._is_token(TokenKind.CARET):
            operator = self._current_token
            self._next_token()
            right = self._parse_power()
            left = InfixExpression(operator.kind, left, right, operator)

        return left

    @traced("unary")
    def _parse_unary(self) -> Expression:
        if self._is_token(TokenKind.MINUS):
            operator = self._current_token
            self._next_token()
            return PrefixExpression(operator.kind, self._parse_unary(), operator)

        return self._parse_primary()

    @traced("primary")
    def _parse_primary(self) -> Expression:
        token = self._current_token

        if self._is_token(TokenKind.INTEGER):
            literal = IntegerLiteral(to_integer(token), token)
            self._next_token()
            return literal

        if self._is_token(TokenKind.FLOAT):
            literal = FloatLiteral(to_float(token), token)
            self._next_token()
            return literal

        if self._match_token(TokenKind.LPAREN):
            value = self._parse_expression()
            self._expect_token(TokenKind.RPAREN)
            return value

        # Known tokens in the wrong place, such as the end of "2+(", and
        # unknown characters both end up here.
        if self._is_token(TokenKind.ILLEGAL):
            raise create_illegal_character_error(token)
        raise create_unexpected_primary_error(token)

    # Utility methods

    def _next_token(self):
        self._current_token = self.lexer.next_token()

    def _is_token(self, kind: TokenKind) -> bool:
        return self._current_token.kind == kind

    def _match_token(self, kind: TokenKind) -> bool:
        """Consume the current token if it is of `kind`."""
        if self._is_token(kind):
            self._next_token()
            return True
        return False

    def _expect_token(self, kind: TokenKind):
        if not self._match_token(kind):
            raise create_unexpected_token_error(kind, self._current_token)


def parse_string(source: str, tracer: Optional[Tracer] = None) -> Expression:
    """
    Convenience function to parse a source string by recursive descent.

    Raises:
        ParseError: If parsing fails
        LexerError: If lexing fails
    """
    return RecursiveDescentParser(Lexer(source), tracer).parse()
