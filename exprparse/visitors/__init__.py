"""
Expression Visitors Package

Consumers of the expression tree: renderers for infix, prefix, postfix,
flat and hierarchical notation, and a numeric evaluator.

Author: xwest
"""

from .printers import (
    InfixPrinter, PrefixPrinter, PostfixPrinter, FlatPrinter, TreePrinter,
    to_infix, to_prefix, to_postfix,
)
from .evaluator import Evaluator, evaluate, truncating_divide, exact_power, float_power

__all__ = [
    "InfixPrinter", "PrefixPrinter", "PostfixPrinter", "FlatPrinter", "TreePrinter",
    "to_infix", "to_prefix", "to_postfix",
    "Evaluator", "evaluate", "truncating_divide", "exact_power", "float_power",
]
