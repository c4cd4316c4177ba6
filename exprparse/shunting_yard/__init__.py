"""
Shunting-Yard Package

Explicit-stack infix parsing, generic over the reduction strategy. The
lexical pre-pass settles unary versus binary minus before the engine runs.
"""

from .tokens import Symbol, SymbolType, Associativity, PRECEDENCE, ASSOCIATIVITY
from .lexer import ExpressionLexer, classify
from .strategies import (
    ReductionStrategy, EvaluationStrategy, SyntaxTreeStrategy,
    PostfixStrategy, PrefixStrategy,
)
from .engine import ShuntingYardParser, evaluate, to_postfix, to_prefix, to_syntax_tree

__all__ = [
    "Symbol", "SymbolType", "Associativity", "PRECEDENCE", "ASSOCIATIVITY",
    "ExpressionLexer", "classify",
    "ReductionStrategy", "EvaluationStrategy", "SyntaxTreeStrategy",
    "PostfixStrategy", "PrefixStrategy",
    "ShuntingYardParser", "evaluate", "to_postfix", "to_prefix", "to_syntax_tree",
]
