"""
Reduction strategies for the shunting-yard engine.

The engine decides when to reduce; a strategy decides what a reduction
produces. Four are provided:

- EvaluationStrategy: the numeric value
- SyntaxTreeStrategy: an expression tree shared with the other parsers
- PostfixStrategy:    reverse Polish text
- PrefixStrategy:     Polish text
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Union

from ..lexer.tokens import TokenKind
from ..parser.ast_nodes import (
    Expression, IntegerLiteral, FloatLiteral, PrefixExpression, InfixExpression
)
from ..parser.literals import to_integer, to_float
from ..visitors.evaluator import truncating_divide, float_power
from .tokens import Symbol, SymbolType

R = TypeVar("R")

Number = Union[int, float]


class ReductionStrategy(ABC, Generic[R]):
    """Builds the engine's output one operand or reduction at a time."""

    @abstractmethod
    def push_operand(self, symbol: Symbol) -> R:
        """Convert a literal symbol to an operand."""
        pass

    @abstractmethod
    def combine_unary(self, operator: Symbol, operand: R) -> R:
        pass

    @abstractmethod
    def combine_binary(self, operator: Symbol, left: R, right: R) -> R:
        pass


def literal_value(symbol: Symbol) -> Number:
    if symbol.token.kind == TokenKind.FLOAT:
        return to_float(symbol.token)
    return to_integer(symbol.token)


class EvaluationStrategy(ReductionStrategy[Number]):
    """
    Computes the value directly.

    Integer '^' goes through math.pow and is truncated back to an int, so
    large results lose precision and negative exponents truncate to zero.
    A float literal anywhere in an operation switches it to float arithmetic.
    """

    def push_operand(self, symbol: Symbol) -> Number:
        return literal_value(symbol)

    def combine_unary(self, operator: Symbol, operand: Number) -> Number:
        return -operand

    def combine_binary(self, operator: Symbol, left: Number, right: Number) -> Number:
        if operator.type == SymbolType.BINARY_PLUS:
            return left + right
        if operator.type == SymbolType.BINARY_MINUS:
            return left - right
        if operator.type == SymbolType.BINARY_MUL:
            return left * right
        if operator.type == SymbolType.BINARY_DIV:
            return truncating_divide(left, right)
        if operator.type == SymbolType.BINARY_EXP:
            result = float_power(left, right)
            if isinstance(left, int) and isinstance(right, int):
                try:
                    return int(result)
                except OverflowError as e:
                    raise ArithmeticError(f"{left} ^ {right}: {e}") from e
            return result
        raise ValueError(f"Not a binary operator: {operator}")


class SyntaxTreeStrategy(ReductionStrategy[Expression]):
    """Builds the same tree the recursive parsers produce."""

    def push_operand(self, symbol: Symbol) -> Expression:
        if symbol.token.kind == TokenKind.FLOAT:
            return FloatLiteral(to_float(symbol.token), symbol.token)
        return IntegerLiteral(to_integer(symbol.token), symbol.token)

    def combine_unary(self, operator: Symbol, operand: Expression) -> Expression:
        return PrefixExpression(TokenKind.MINUS, operand, operator.token)

    def combine_binary(self, operator: Symbol, left: Expression, right: Expression) -> Expression:
        return InfixExpression(operator.token.kind, left, right, operator.token)


class PostfixStrategy(ReductionStrategy[str]):
    """Operands first: "1 2 3 ^ ^"."""

    def push_operand(self, symbol: Symbol) -> str:
        return symbol.lexeme

    def combine_unary(self, operator: Symbol, operand: str) -> str:
        return f"{operand} {operator.lexeme}"

    def combine_binary(self, operator: Symbol, left: str, right: str) -> str:
        return f"{left} {right} {operator.lexeme}"


class PrefixStrategy(ReductionStrategy[str]):
    """Operator first: "^ 1 ^ 2 3"."""

    def push_operand(self, symbol: Symbol) -> str:
        return symbol.lexeme

    def combine_unary(self, operator: Symbol, operand: str) -> str:
        return f"{operator.lexeme} {operand}"

    def combine_binary(self, operator: Symbol, left: str, right: str) -> str:
        return f"{operator.lexeme} {left} {right}"
