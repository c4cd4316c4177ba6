"""
exprparse

Three ways to parse the same arithmetic expressions, side by side, for
studying how parsing algorithms work.

Architecture:
    exprparse/
    ├── lexer/           # Shared tokenizer
    ├── parser/          # Pratt and recursive-descent parsers, AST, errors
    ├── shunting_yard/   # Explicit-stack engine with pluggable reductions
    ├── visitors/        # Printers and evaluator for the AST
    └── cli.py           # Interactive REPL

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenKind, LexerError
from .parser import ExpressionParser, RecursiveDescentParser, ParseError
from .shunting_yard import ShuntingYardParser
from .visitors import Evaluator, InfixPrinter

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenKind",
    "ExpressionParser",
    "RecursiveDescentParser",
    "ShuntingYardParser",
    "Evaluator",
    "InfixPrinter",

    # Errors
    "LexerError",
    "ParseError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
