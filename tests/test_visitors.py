"""
Test suite for the AST visitors.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprparse.lexer.tokens import TokenKind
from exprparse.parser.ast_nodes import (
    IntegerLiteral, FloatLiteral, PrefixExpression, InfixExpression, PostfixExpression
)
from exprparse.visitors import (
    InfixPrinter, PrefixPrinter, PostfixPrinter, FlatPrinter, TreePrinter,
    Evaluator, truncating_divide, exact_power
)


def infix(operator, left, right):
    return InfixExpression(operator, left, right)


class TestPrinters(unittest.TestCase):
    """Test cases for the notation printers."""

    def setUp(self):
        """Set up test fixtures."""
        # 2 + 3 * 4
        self.expression = infix(
            TokenKind.PLUS,
            IntegerLiteral(2),
            infix(TokenKind.STAR, IntegerLiteral(3), IntegerLiteral(4))
        )

    def test_infix(self):
        self.assertEqual(InfixPrinter().print(self.expression), "(2 + (3 * 4))")

    def test_prefix(self):
        self.assertEqual(PrefixPrinter().print(self.expression), "+ 2 * 3 4")

    def test_postfix(self):
        self.assertEqual(PostfixPrinter().print(self.expression), "2 3 4 * +")

    def test_flat(self):
        self.assertEqual(FlatPrinter().print(self.expression), "+(2, *(3, 4))")

    def test_unary_and_postfix_operators(self):
        printer = InfixPrinter()
        self.assertEqual(printer.print(PrefixExpression(TokenKind.MINUS, IntegerLiteral(42))), "(-42)")
        self.assertEqual(printer.print(PostfixExpression(TokenKind.BANG, IntegerLiteral(5))), "(5!)")
        self.assertEqual(FlatPrinter().print(PrefixExpression(TokenKind.MINUS, IntegerLiteral(2))), "-(2)")

    def test_float_literal_keeps_fraction(self):
        self.assertEqual(InfixPrinter().print(FloatLiteral(2.0)), "2.0")
        self.assertEqual(InfixPrinter().print(FloatLiteral(0.1)), "0.1")

    def test_tree_printer_is_reusable(self):
        printer = TreePrinter()
        first = printer.print(self.expression)
        second = printer.print(self.expression)
        self.assertEqual(first, second)
        self.assertEqual(first.splitlines()[0], "InfixExpression (+)")
        self.assertEqual(first.splitlines()[-1], "        IntegerLiteral (4)")

    def test_children(self):
        self.assertEqual(self.expression.children()[0], IntegerLiteral(2))
        self.assertEqual(IntegerLiteral(1).children(), [])


class TestEvaluator(unittest.TestCase):
    """Test cases for the evaluator."""

    def setUp(self):
        """Set up test fixtures."""
        self.evaluator = Evaluator()

    def test_integer_arithmetic_is_exact(self):
        big = infix(TokenKind.CARET, IntegerLiteral(2), IntegerLiteral(100))
        self.assertEqual(self.evaluator.evaluate(big), 2 ** 100)

    def test_truncating_division(self):
        self.assertEqual(truncating_divide(7, 2), 3)
        self.assertEqual(truncating_divide(-7, 2), -3)
        self.assertEqual(truncating_divide(7, -2), -3)
        self.assertEqual(truncating_divide(7.0, 2), 3.5)

    def test_division_by_zero(self):
        expression = infix(TokenKind.SLASH, IntegerLiteral(1), IntegerLiteral(0))
        with self.assertRaises(ZeroDivisionError):
            self.evaluator.evaluate(expression)

    def test_negative_exponent_gives_float(self):
        self.assertEqual(exact_power(2, -3), 0.125)
        self.assertEqual(exact_power(2, 3), 8)
        self.assertIsInstance(exact_power(2, 3), int)

    def test_power_domain_error(self):
        with self.assertRaises(ArithmeticError):
            exact_power(-8, 0.5)

    def test_factorial(self):
        self.assertEqual(self.evaluator.evaluate(PostfixExpression(TokenKind.BANG, IntegerLiteral(5))), 120)
        with self.assertRaises(ArithmeticError):
            self.evaluator.evaluate(PostfixExpression(
                TokenKind.BANG, PrefixExpression(TokenKind.MINUS, IntegerLiteral(1))
            ))

    def test_mixed_float(self):
        expression = infix(TokenKind.PLUS, IntegerLiteral(1), FloatLiteral(0.5))
        self.assertEqual(self.evaluator.evaluate(expression), 1.5)


if __name__ == '__main__':
    unittest.main()
