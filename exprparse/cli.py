"""
Interactive front end for the three parsing engines.

Reads one expression per line and prints what the selected engine makes of
it. Errors are reported and the loop moves on to the next line.

Author: xwest
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from . import __version__
from .lexer.errors import LexerError
from .lexer.lexer import Lexer
from .parser.errors import ParseError
from .parser.pratt import ExpressionParser
from .parser.recursive_descent import RecursiveDescentParser
from .parser.tracer import Tracer
from .shunting_yard.engine import ShuntingYardParser
from .shunting_yard.strategies import (
    EvaluationStrategy, SyntaxTreeStrategy, PostfixStrategy, PrefixStrategy
)
from .visitors.evaluator import Evaluator
from .visitors.printers import InfixPrinter, FlatPrinter, TreePrinter

ENGINES = ("pratt", "descent", "shunting-yard", "all")

logger = logging.getLogger("exprparse")


@dataclass
class ReplConfig:
    """Settings for one REPL session."""
    engine: str = "all"
    trace: bool = False
    log_level: str = "WARNING"
    prompt: str = "> "


class Repl:
    """Runs expressions through the configured engine and prints the results."""

    def __init__(self, config: ReplConfig, output=None):
        self.config = config
        self.output = output or sys.stdout

    def _write(self, text: str = ""):
        print(text, file=self.output)

    def run_line(self, source: str) -> bool:
        """
        Process one expression.

        Returns:
            True if every selected engine handled the line without error
        """
        engines = ENGINES[:-1] if self.config.engine == "all" else (self.config.engine,)
        labelled = len(engines) > 1

        success = True
        for engine in engines:
            if labelled:
                self._write(f"[{engine}]")
            try:
                if engine == "shunting-yard":
                    self._run_shunting_yard(source)
                else:
                    self._run_recursive(engine, source)
            except (LexerError, ParseError) as e:
                logger.debug("%s engine rejected %r", engine, source, exc_info=True)
                self._write(f"Syntax error: {e.message}")
                success = False
            except ArithmeticError as e:
                self._write(f"Evaluation error: {e}")
                success = False
        return success

    def _run_recursive(self, engine: str, source: str):
        lexer = Lexer(source)
        if engine == "pratt":
            parser = ExpressionParser(lexer)
        else:
            tracer = Tracer() if self.config.trace else None
            parser = RecursiveDescentParser(lexer, tracer)

        expression = parser.parse()
        self._write(InfixPrinter().print(expression))
        self._write(f"Value: {Evaluator().evaluate(expression)}")

    def _run_shunting_yard(self, source: str):
        expression = ShuntingYardParser(SyntaxTreeStrategy()).parse(source)
        prefix = ShuntingYardParser(PrefixStrategy()).parse(source)
        postfix = ShuntingYardParser(PostfixStrategy()).parse(source)

        self._write(f"Prefix notation: {prefix}")
        self._write(f"Postfix notation: {postfix}")
        self._write(f"Flat syntax tree: {FlatPrinter().print(expression)}")
        self._write("Hierarchical syntax tree:")
        self._write(TreePrinter().print(expression))
        self._write(f"Value: {ShuntingYardParser(EvaluationStrategy()).parse(source)}")

    def run(self):
        """Read lines until end of input."""
        self._write("Enter an expression such as (2 + 3) * 4. Press Ctrl-D to exit.")
        while True:
            try:
                line = input(self.config.prompt)
            except EOFError:
                self._write()
                break

            if not line.strip():
                continue
            self.run_line(line)


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprparse",
        description="Parse arithmetic expressions with Pratt, recursive-descent and shunting-yard engines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    exprparse                                  # REPL, all engines
    exprparse --engine pratt                   # REPL, Pratt parser only
    exprparse --engine descent --trace         # Show recursive descent rule calls
    exprparse -e "1 ^ 2 ^ 3"                   # Evaluate one expression and exit
        """
    )

    parser.add_argument('--engine', choices=ENGINES, default="all",
                        help='Parsing engine to use (default: all)')
    parser.add_argument('--trace', action='store_true',
                        help='Log recursive descent rule entry and exit')
    parser.add_argument('--log-level', default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help='Logging level (default: WARNING)')
    parser.add_argument('-e', '--expression',
                        help='Process a single expression instead of starting the REPL')
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point."""
    args = build_argument_parser().parse_args(argv)

    config = ReplConfig(engine=args.engine, trace=args.trace, log_level=args.log_level)

    # Tracing is emitted at DEBUG level
    level = "DEBUG" if config.trace else config.log_level
    logging.basicConfig(level=getattr(logging, level), format="%(name)s: %(message)s")

    repl = Repl(config)
    if args.expression is not None:
        return 0 if repl.run_line(args.expression) else 1

    try:
        repl.run()
    except KeyboardInterrupt:
        print()
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
