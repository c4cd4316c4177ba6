"""
Test suite for the recursive-descent parser.

Tests cover:
- One rule per precedence level
- Right associativity through self-recursion
- Error reporting at the primary rule
- Tracing of rule entry and exit

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprparse.lexer.tokens import TokenKind
from exprparse.parser.ast_nodes import IntegerLiteral, FloatLiteral, PrefixExpression
from exprparse.parser.recursive_descent import parse_string
from exprparse.parser.tracer import Tracer, RecordingTracer
from exprparse.parser.errors import (
    IllegalCharacterError, UnexpectedPrimaryError, UnexpectedTokenError,
    TrailingInputError, InvalidNumericLiteralError
)
from exprparse.visitors.printers import InfixPrinter
from exprparse.visitors.evaluator import evaluate


class TestRecursiveDescentParser(unittest.TestCase):
    """Test cases for the recursive-descent parser."""

    def setUp(self):
        """Set up test fixtures."""
        self.printer = InfixPrinter()

    def _render(self, source: str) -> str:
        return self.printer.print(parse_string(source))

    def test_single_literal(self):
        self.assertEqual(parse_string("7"), IntegerLiteral(7))
        self.assertEqual(parse_string("0.5"), FloatLiteral(0.5))

    def test_precedence_levels(self):
        self.assertEqual(self._render("2 + 3 * 4"), "(2 + (3 * 4))")
        self.assertEqual(self._render("2 * 3 ^ 2"), "(2 * (3 ^ 2))")
        self.assertEqual(evaluate(parse_string("2 * 3 ^ 2")), 18)

    def test_left_associativity(self):
        self.assertEqual(self._render("4 + 8 + 3"), "((4 + 8) + 3)")
        self.assertEqual(self._render("100 / 10 / 5"), "((100 / 10) / 5)")
        self.assertEqual(evaluate(parse_string("100 / 10 / 5")), 2)

    def test_right_associative_power(self):
        expression = parse_string("2 ^ 3 ^ 4")
        self.assertEqual(self.printer.print(expression), "(2 ^ (3 ^ 4))")
        self.assertEqual(evaluate(expression), 2417851639229258349412352)

    def test_unary_minus_binds_to_operand(self):
        self.assertEqual(self._render("-2 + 3"), "((-2) + 3)")
        self.assertEqual(self._render("-(2 + 3) * 4"), "((-(2 + 3)) * 4)")
        self.assertEqual(evaluate(parse_string("-(2 + 3) * 4")), -20)

    def test_unary_minus_inside_power(self):
        """Unary sits below power, so the base takes the minus."""
        self.assertEqual(self._render("-2 ^ 2"), "((-2) ^ 2)")
        self.assertEqual(self._render("2 ^ -3"), "(2 ^ (-3))")

    def test_double_negation(self):
        expression = parse_string("--42")
        self.assertEqual(self.printer.print(expression), "(-(-42))")
        self.assertIsInstance(expression.operand, PrefixExpression)

    def test_redundant_parentheses(self):
        self.assertEqual(parse_string("(((42)))"), IntegerLiteral(42))

    def test_missing_operand(self):
        with self.assertRaises(UnexpectedPrimaryError) as context:
            parse_string("2+(")
        self.assertEqual(context.exception.got, TokenKind.EOF)

        with self.assertRaises(UnexpectedPrimaryError):
            parse_string("")

    def test_missing_closing_parenthesis(self):
        with self.assertRaises(UnexpectedTokenError) as context:
            parse_string("(1 + 2")
        self.assertEqual(context.exception.expected, TokenKind.RPAREN)
        self.assertEqual(context.exception.got, TokenKind.EOF)

    def test_factorial_is_not_in_grammar(self):
        with self.assertRaises(TrailingInputError):
            parse_string("5!")

    def test_illegal_character(self):
        with self.assertRaises(IllegalCharacterError):
            parse_string("1 + #")

    def test_float_overflow(self):
        with self.assertRaises(InvalidNumericLiteralError):
            parse_string("1" + "0" * 400 + ".0")


class TestTracer(unittest.TestCase):
    """Test cases for rule tracing."""

    RULES = ["parse", "expression", "addition", "multiplication", "power", "unary", "primary"]

    def test_recording_tracer_events(self):
        tracer = RecordingTracer()
        parse_string("2", tracer)

        entered = [rule for event, rule in tracer.events if event == "enter"]
        self.assertEqual(entered, self.RULES)

        exits = [value for event, value in tracer.events if event == "exit"]
        self.assertEqual(len(exits), len(self.RULES))
        self.assertEqual(exits[-1], IntegerLiteral(2))

    def test_tracer_does_not_change_result(self):
        source = "-(1 + 2) * 3 ^ 2"
        self.assertEqual(parse_string(source, RecordingTracer()), parse_string(source))

    def test_tracer_logs_at_debug(self):
        with self.assertLogs("RecursiveDescentTracer", level="DEBUG") as captured:
            parse_string("1 + 2", Tracer())

        self.assertIn("Enter: parse, Lexeme: '1'", captured.output[0])
        # Nested rules are indented four spaces per level
        self.assertIn("    Enter: expression", captured.output[1])


if __name__ == '__main__':
    unittest.main()
