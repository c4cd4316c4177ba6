"""
Cross-engine tests.

All three engines must agree on the tree for binary operator chains and on
the value of every valid input. They only differ in how far a prefix minus
reaches: the Pratt parser gives it the whole remaining expression.

Author: xwest
"""

import itertools
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprparse.lexer.lexer import Lexer
from exprparse.parser.pratt import ExpressionParser
from exprparse.parser.recursive_descent import RecursiveDescentParser
from exprparse.parser.errors import ParseError, UnexpectedPrimaryError
from exprparse.shunting_yard import to_syntax_tree
from exprparse.visitors import InfixPrinter, Evaluator

OPERATORS = ["+", "-", "*", "/", "^"]


def parse_all(source: str):
    return [
        ExpressionParser(Lexer(source)).parse(),
        RecursiveDescentParser(Lexer(source)).parse(),
        to_syntax_tree(source),
    ]


class TestEngineEquivalence(unittest.TestCase):
    """Test cases comparing the three engines."""

    def setUp(self):
        """Set up test fixtures."""
        self.printer = InfixPrinter()
        self.evaluator = Evaluator()

    def test_binary_operator_pairs(self):
        """Every 'a OP1 b OP2 c' parses identically in all engines."""
        for first, second in itertools.product(OPERATORS, repeat=2):
            source = f"6 {first} 3 {second} 2"
            with self.subTest(source=source):
                pratt, descent, shunting = parse_all(source)
                self.assertEqual(pratt, descent)
                self.assertEqual(pratt, shunting)

    def test_known_renderings(self):
        cases = {
            "2 + 3 * 4": ("(2 + (3 * 4))", 14),
            "(2 + 3) * 4": ("((2 + 3) * 4)", 20),
            "4 + 8 + 3": ("((4 + 8) + 3)", 15),
            "20 - 7 - 2": ("((20 - 7) - 2)", 11),
            "2 ^ 3 ^ 4": ("(2 ^ (3 ^ 4))", 2417851639229258349412352),
            "--42": ("(-(-42))", 42),
            "(((42)))": ("42", 42),
        }
        for source, (rendering, value) in cases.items():
            for tree in parse_all(source):
                with self.subTest(source=source, engine=type(tree).__name__):
                    self.assertEqual(self.printer.print(tree), rendering)
                    self.assertEqual(self.evaluator.evaluate(tree), value)

    def test_negated_group_value_agrees(self):
        for tree in parse_all("-(2 + 3) * 4"):
            self.assertEqual(self.evaluator.evaluate(tree), -20)

    def test_negative_exponent_tree(self):
        for tree in parse_all("2 ^ -3"):
            self.assertEqual(self.printer.print(tree), "(2 ^ (-3))")
            self.assertEqual(self.evaluator.evaluate(tree), 0.125)

    def test_missing_operand_fails_everywhere(self):
        with self.assertRaises(UnexpectedPrimaryError):
            ExpressionParser(Lexer("2+(")).parse()
        with self.assertRaises(UnexpectedPrimaryError):
            RecursiveDescentParser(Lexer("2+(")).parse()
        with self.assertRaises(UnexpectedPrimaryError):
            to_syntax_tree("2+(")

    def test_invalid_inputs_fail_everywhere(self):
        for source in ["", "2 +", "(", "2 3", "* 2", "1 + @"]:
            with self.subTest(source=source):
                with self.assertRaises(ParseError):
                    ExpressionParser(Lexer(source)).parse()
                with self.assertRaises(ParseError):
                    RecursiveDescentParser(Lexer(source)).parse()
                with self.assertRaises(ParseError):
                    to_syntax_tree(source)


if __name__ == '__main__':
    unittest.main()
