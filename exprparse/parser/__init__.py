"""
Expression Parser Package

Two recursive parsing engines over the same lexer and the same AST:

- A Pratt (top-down operator precedence) parser driven by prefix/infix
  parselet tables keyed by token kind
- A recursive-descent parser with one method per precedence level

Both are bounded by the interpreter's recursion limit on deeply nested input.

Author: xwest
"""

from .ast_nodes import (
    Expression, ExpressionVisitor,
    IntegerLiteral, FloatLiteral,
    PrefixExpression, InfixExpression, PostfixExpression,
)
from .pratt import (
    PrattParser, ExpressionParser, Precedence,
    PrefixOperatorParselet, InfixOperatorParselet, PostfixOperatorParselet,
)
from .recursive_descent import RecursiveDescentParser
from .tracer import Tracer, RecordingTracer
from .errors import (
    ParseError, IllegalCharacterError, NoPrefixParseletError, NoInfixParseletError,
    UnexpectedPrimaryError, UnexpectedTokenError, TrailingInputError,
    InvalidNumericLiteralError, UnmatchedParenthesisError,
)

__all__ = [
    # Core parsers
    "PrattParser", "ExpressionParser", "Precedence",
    "PrefixOperatorParselet", "InfixOperatorParselet", "PostfixOperatorParselet",
    "RecursiveDescentParser",
    "Tracer", "RecordingTracer",

    # AST nodes
    "Expression", "ExpressionVisitor",
    "IntegerLiteral", "FloatLiteral",
    "PrefixExpression", "InfixExpression", "PostfixExpression",

    # Error handling
    "ParseError", "IllegalCharacterError", "NoPrefixParseletError", "NoInfixParseletError",
    "UnexpectedPrimaryError", "UnexpectedTokenError", "TrailingInputError",
    "InvalidNumericLiteralError", "UnmatchedParenthesisError",
]
