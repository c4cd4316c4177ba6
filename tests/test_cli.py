"""
Tests for the command line front end.

Author: xwest
"""

import io
import unittest
import sys
import os
from contextlib import redirect_stdout
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprparse.cli import Repl, ReplConfig, main


class TestRepl(unittest.TestCase):
    """Test cases for line processing."""

    def _run(self, source: str, **settings):
        output = io.StringIO()
        success = Repl(ReplConfig(**settings), output).run_line(source)
        return success, output.getvalue()

    def test_pratt_engine(self):
        success, output = self._run("2 + 3 * 4", engine="pratt")
        self.assertTrue(success)
        self.assertEqual(output.splitlines(), ["(2 + (3 * 4))", "Value: 14"])

    def test_descent_engine(self):
        success, output = self._run("(2 + 3) * 4", engine="descent")
        self.assertTrue(success)
        self.assertIn("((2 + 3) * 4)", output)
        self.assertIn("Value: 20", output)

    def test_shunting_yard_engine(self):
        success, output = self._run("1 ^ 2 ^ 3", engine="shunting-yard")
        self.assertTrue(success)
        self.assertIn("Prefix notation: ^ 1 ^ 2 3", output)
        self.assertIn("Postfix notation: 1 2 3 ^ ^", output)
        self.assertIn("Flat syntax tree: ^(1, ^(2, 3))", output)
        self.assertIn("    IntegerLiteral (1)", output)
        self.assertIn("Value: 1", output)

    def test_all_engines_are_labelled(self):
        success, output = self._run("1 + 1")
        self.assertTrue(success)
        for engine in ("[pratt]", "[descent]", "[shunting-yard]"):
            self.assertIn(engine, output)

    def test_syntax_error_is_reported(self):
        success, output = self._run("2+(", engine="descent")
        self.assertFalse(success)
        self.assertIn("Syntax error: Expected 'INTEGER', 'FLOAT', 'LPAREN'. Got end of input", output)

    def test_evaluation_error_is_reported(self):
        success, output = self._run("1 / 0", engine="pratt")
        self.assertFalse(success)
        self.assertIn("(1 / 0)", output)
        self.assertIn("Evaluation error:", output)

    def test_trace_logs_rules(self):
        with self.assertLogs("RecursiveDescentTracer", level="DEBUG") as captured:
            self._run("7", engine="descent", trace=True)
        self.assertTrue(any("Enter: primary" in line for line in captured.output))


class TestMain(unittest.TestCase):
    """Test cases for the console entry point."""

    def test_one_shot_expression(self):
        output = io.StringIO()
        with redirect_stdout(output):
            status = main(["--engine", "pratt", "-e", "20 - 7 - 2"])
        self.assertEqual(status, 0)
        self.assertIn("Value: 11", output.getvalue())

    def test_one_shot_failure_exit_status(self):
        output = io.StringIO()
        with redirect_stdout(output):
            status = main(["--engine", "shunting-yard", "-e", "(1 + 2"])
        self.assertEqual(status, 1)
        self.assertIn("Unmatched parenthesis", output.getvalue())

    def test_repl_runs_until_end_of_input(self):
        output = io.StringIO()
        with mock.patch("sys.stdin", io.StringIO("1 + 2\n\n2 +\n3 * 3\n")), redirect_stdout(output):
            status = main(["--engine", "descent"])

        self.assertEqual(status, 0)
        text = output.getvalue()
        self.assertIn("Value: 3", text)
        self.assertIn("Syntax error:", text)
        self.assertIn("Value: 9", text)

    def test_unknown_engine_is_rejected(self):
        with redirect_stdout(io.StringIO()), mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit):
                main(["--engine", "yacc"])


if __name__ == '__main__':
    unittest.main()
