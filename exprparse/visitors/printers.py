"""
Expression printers.

- InfixPrinter:   fully parenthesized infix, "(2 + (3 * 4))"
- PrefixPrinter:  Polish notation, "+ 2 * 3 4"
- PostfixPrinter: reverse Polish notation, "2 3 4 * +"
- FlatPrinter:    function-call style, "+(2, *(3, 4))"
- TreePrinter:    one node per line, indented by depth

Author: xwest
"""

from typing import List

from ..lexer.tokens import TokenKind, OPERATOR_SYMBOLS
from ..parser.ast_nodes import (
    Expression, ExpressionVisitor, IntegerLiteral, FloatLiteral,
    PrefixExpression, InfixExpression, PostfixExpression
)


def operator_text(kind: TokenKind) -> str:
    return OPERATOR_SYMBOLS.get(kind, kind.name)


def format_number(node) -> str:
    # repr keeps 0.1 as "0.1" and 2.0 as "2.0"
    return repr(node.value)


class InfixPrinter(ExpressionVisitor):
    """Renders every operation in its own parentheses."""

    def print(self, expression: Expression) -> str:
        return expression.accept(self)

    def visit_integer_literal(self, node: IntegerLiteral) -> str:
        return format_number(node)

    def visit_float_literal(self, node: FloatLiteral) -> str:
        return format_number(node)

    def visit_prefix_expression(self, node: PrefixExpression) -> str:
        return f"({operator_text(node.operator)}{node.operand.accept(self)})"

    def visit_infix_expression(self, node: InfixExpression) -> str:
        return f"({node.left.accept(self)} {operator_text(node.operator)} {node.right.accept(self)})"

    def visit_postfix_expression(self, node: PostfixExpression) -> str:
        return f"({node.operand.accept(self)}{operator_text(node.operator)})"


class PrefixPrinter(ExpressionVisitor):
    """Operator first, then operands, space separated."""

    def print(self, expression: Expression) -> str:
        return expression.accept(self)

    def visit_integer_literal(self, node: IntegerLiteral) -> str:
        return format_number(node)

    def visit_float_literal(self, node: FloatLiteral) -> str:
        return format_number(node)

    def visit_prefix_expression(self, node: PrefixExpression) -> str:
        return f"{operator_text(node.operator)} {node.operand.accept(self)}"

    def visit_infix_expression(self, node: InfixExpression) -> str:
        return f"{operator_text(node.operator)} {node.left.accept(self)} {node.right.accept(self)}"

    def visit_postfix_expression(self, node: PostfixExpression) -> str:
        return f"{operator_text(node.operator)} {node.operand.accept(self)}"


class PostfixPrinter(ExpressionVisitor):
    """Operands first, then operator, space separated."""

    def print(self, expression: Expression) -> str:
        return expression.accept(self)

    def visit_integer_literal(self, node: IntegerLiteral) -> str:
        return format_number(node)

    def visit_float_literal(self, node: FloatLiteral) -> str:
        return format_number(node)

    def visit_prefix_expression(self, node: PrefixExpression) -> str:
        return f"{node.operand.accept(self)} {operator_text(node.operator)}"

    def visit_infix_expression(self, node: InfixExpression) -> str:
        return f"{node.left.accept(self)} {node.right.accept(self)} {operator_text(node.operator)}"

    def visit_postfix_expression(self, node: PostfixExpression) -> str:
        return f"{node.operand.accept(self)} {operator_text(node.operator)}"


class FlatPrinter(ExpressionVisitor):
    """Renders operators as calls: -(2), +(1, 2)."""

    def print(self, expression: Expression) -> str:
        return expression.accept(self)

    def visit_integer_literal(self, node: IntegerLiteral) -> str:
        return format_number(node)

    def visit_float_literal(self, node: FloatLiteral) -> str:
        return format_number(node)

    def visit_prefix_expression(self, node: PrefixExpression) -> str:
        return f"{operator_text(node.operator)}({node.operand.accept(self)})"

    def visit_infix_expression(self, node: InfixExpression) -> str:
        return f"{operator_text(node.operator)}({node.left.accept(self)}, {node.right.accept(self)})"

    def visit_postfix_expression(self, node: PostfixExpression) -> str:
        return f"{operator_text(node.operator)}({node.operand.accept(self)})"


class TreePrinter(ExpressionVisitor):
    """
    Hierarchical dump, one node per line:

        InfixExpression (+)
            IntegerLiteral (2)
            IntegerLiteral (3)
    """

    INDENTATION = 4

    def __init__(self):
        self._lines: List[str] = []
        self._depth = 0

    def print(self, expression: Expression) -> str:
        self._lines = []
        self._depth = 0
        expression.accept(self)
        return "\n".join(self._lines)

    def _add_line(self, node: Expression, detail: str):
        self._lines.append(f"{' ' * (self._depth * self.INDENTATION)}{type(node).__name__} ({detail})")

    def _visit_children(self, node: Expression):
        self._depth += 1
        for child in node.children():
            child.accept(self)
        self._depth -= 1

    def visit_integer_literal(self, node: IntegerLiteral):
        self._add_line(node, format_number(node))

    def visit_float_literal(self, node: FloatLiteral):
        self._add_line(node, format_number(node))

    def visit_prefix_expression(self, node: PrefixExpression):
        self._add_line(node, operator_text(node.operator))
        self._visit_children(node)

    def visit_infix_expression(self, node: InfixExpression):
        self._add_line(node, operator_text(node.operator))
        self._visit_children(node)

    def visit_postfix_expression(self, node: PostfixExpression):
        self._add_line(node, operator_text(node.operator))
        self._visit_children(node)


def to_infix(expression: Expression) -> str:
    return InfixPrinter().print(expression)


def to_prefix(expression: Expression) -> str:
    return PrefixPrinter().print(expression)


def to_postfix(expression: Expression) -> str:
    return PostfixPrinter().print(expression)
