"""
Shunting-yard engine.

Iterative operator-precedence parsing with two explicit stacks. The engine
owns the control flow; an injected ReductionStrategy turns literals and
reductions into the output type. Being iterative, it is bounded by memory
rather than by the recursion limit.
"""

import logging
from typing import Generic, List, Optional, Union

from ..parser.ast_nodes import Expression
from ..parser.errors import ParseError, create_unmatched_parenthesis_error
from .lexer import ExpressionLexer
from .strategies import (
    R, ReductionStrategy, EvaluationStrategy, SyntaxTreeStrategy,
    PostfixStrategy, PrefixStrategy
)
from .tokens import Symbol, SymbolType, Associativity, PRECEDENCE, ASSOCIATIVITY, OPERATOR_TYPES


class ShuntingYardParser(Generic[R]):
    """
    Converts infix input into whatever the strategy builds.

    Stacks are created per parse() call, so one instance can be reused.
    """

    def __init__(self, strategy: ReductionStrategy[R], lexer: Optional[ExpressionLexer] = None):
        self.strategy = strategy
        self.lexer = lexer or ExpressionLexer()
        self._logger = logging.getLogger("ShuntingYardParser")

    def parse(self, source: str) -> R:
        """
        Parse `source` and return the strategy's result.

        Raises:
            LexerError: If the lexer fails on a float literal
            UnmatchedParenthesisError: On parenthesis imbalance
            ParseError: On any other syntax error
        """
        symbols = self.lexer.tokenize(source)
        operators: List[Symbol] = []
        operands: List[R] = []

        for symbol in symbols:
            if symbol.type == SymbolType.LITERAL:
                operands.append(self.strategy.push_operand(symbol))

            elif symbol.type in (SymbolType.UNARY_MINUS, SymbolType.LEFT_PAREN):
                operators.append(symbol)

            elif symbol.type == SymbolType.RIGHT_PAREN:
                while operators and operators[-1].type != SymbolType.LEFT_PAREN:
                    self._reduce(operators, operands)
                if not operators:
                    raise create_unmatched_parenthesis_error(symbol.token)
                operators.pop()

            elif symbol.type == SymbolType.END:
                break

            else:
                while operators and self._should_reduce(symbol, operators[-1]):
                    self._reduce(operators, operands)
                operators.append(symbol)

        while operators:
            if operators[-1].type == SymbolType.LEFT_PAREN:
                raise create_unmatched_parenthesis_error(operators[-1].token)
            self._reduce(operators, operands)

        if len(operands) != 1:
            raise ParseError(f"Malformed expression: {len(operands)} operands left after reduction")
        return operands[0]

    @staticmethod
    def _should_reduce(incoming: Symbol, top: Symbol) -> bool:
        # Unary minus on the stack takes part in the comparison.
        if top.type not in OPERATOR_TYPES:
            return False

        incoming_precedence = PRECEDENCE[incoming.type]
        top_precedence = PRECEDENCE[top.type]
        if ASSOCIATIVITY[incoming.type] == Associativity.LEFT:
            return incoming_precedence <= top_precedence
        return incoming_precedence < top_precedence

    def _reduce(self, operators: List[Symbol], operands: List[R]):
        operator = operators.pop()

        if operator.type == SymbolType.UNARY_MINUS:
            if not operands:
                raise ParseError(f"Missing operand for {operator}", span=operator.token.span, token=operator.token)
            operand = operands.pop()
            result = self.strategy.combine_unary(operator, operand)
        else:
            if len(operands) < 2:
                raise ParseError(f"Missing operand for {operator}", span=operator.token.span, token=operator.token)
            right = operands.pop()
            left = operands.pop()
            result = self.strategy.combine_binary(operator, left, right)

        self._logger.debug("Reduce %s -> %r", operator, result)
        operands.append(result)


def evaluate(source: str) -> Union[int, float]:
    """Evaluate `source` directly, without building a tree."""
    return ShuntingYardParser(EvaluationStrategy()).parse(source)


def to_postfix(source: str) -> str:
    return ShuntingYardParser(PostfixStrategy()).parse(source)


def to_prefix(source: str) -> str:
    return ShuntingYardParser(PrefixStrategy()).parse(source)


def to_syntax_tree(source: str) -> Expression:
    return ShuntingYardParser(SyntaxTreeStrategy()).parse(source)
