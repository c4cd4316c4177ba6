"""
Expression evaluator.

Numeric policy:
- Integers stay exact Python ints; a float operand makes the result a float
- Integer division truncates toward zero
- '^' with a non-negative integer exponent is exact; a negative integer
  exponent gives a float (2^-3 == 0.125)
- '!' is the factorial of a non-negative integer

Division by zero, overflow and domain errors raise ArithmeticError
subclasses. They are evaluation faults, not parse errors.
"""

import math
from typing import Union

from ..lexer.tokens import TokenKind, OPERATOR_SYMBOLS
from ..parser.ast_nodes import (
    Expression, ExpressionVisitor, IntegerLiteral, FloatLiteral,
    PrefixExpression, InfixExpression, PostfixExpression
)

Number = Union[int, float]


def truncating_divide(left: Number, right: Number) -> Number:
    """Divide, truncating toward zero when both operands are integers."""
    if isinstance(left, int) and isinstance(right, int):
        if right == 0:
            raise ZeroDivisionError("integer division by zero")
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient
    return left / right


def float_power(left: Number, right: Number) -> float:
    """math.pow with domain errors reported as ArithmeticError."""
    try:
        return math.pow(left, right)
    except ValueError as e:
        raise ArithmeticError(f"{left} ^ {right}: {e}") from e


def exact_power(left: Number, right: Number) -> Number:
    """Exact for non-negative integer exponents, floating point otherwise."""
    if isinstance(left, int) and isinstance(right, int) and right >= 0:
        return left ** right
    return float_power(left, right)


def factorial(value: Number) -> int:
    if not isinstance(value, int) or value < 0:
        raise ArithmeticError(f"factorial is only defined for non-negative integers, got {value}")
    return math.factorial(value)


class Evaluator(ExpressionVisitor):
    """Computes the numeric value of an expression tree."""

    def evaluate(self, expression: Expression) -> Number:
        return expression.accept(self)

    def visit_integer_literal(self, node: IntegerLiteral) -> Number:
        return node.value

    def visit_float_literal(self, node: FloatLiteral) -> Number:
        return node.value

    def visit_prefix_expression(self, node: PrefixExpression) -> Number:
        operand = node.operand.accept(self)
        if node.operator == TokenKind.MINUS:
            return -operand
        raise ValueError(f"Unsupported prefix operator: {node.operator.name}")

    def visit_infix_expression(self, node: InfixExpression) -> Number:
        left = node.left.accept(self)
        right = node.right.accept(self)

        if node.operator == TokenKind.PLUS:
            return left + right
        if node.operator == TokenKind.MINUS:
            return left - right
        if node.operator == TokenKind.STAR:
            return left * right
        if node.operator == TokenKind.SLASH:
            return truncating_divide(left, right)
        if node.operator == TokenKind.CARET:
            return exact_power(left, right)
        raise ValueError(f"Unsupported operator: {OPERATOR_SYMBOLS.get(node.operator, node.operator.name)}")

    def visit_postfix_expression(self, node: PostfixExpression) -> Number:
        operand = node.operand.accept(self)
        if node.operator == TokenKind.BANG:
            return factorial(operand)
        raise ValueError(f"Unsupported postfix operator: {node.operator.name}")


def evaluate(expression: Expression) -> Number:
    """Convenience function to evaluate an expression tree."""
    return Evaluator().evaluate(expression)
