"""
Abstract Syntax Tree node definitions.

The expression tree is a closed set of five node types. Nodes are immutable,
own their subtrees exclusively, and compare structurally so that "(((42)))"
and "42" produce equal trees. Each node keeps the token it was built from
for span information; the token takes no part in equality.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional
from dataclasses import dataclass, field

from ..lexer.tokens import Token, TokenKind, SourceSpan


class ExpressionVisitor(ABC):
    """
    Visitor over the expression node types.

    Implementations must handle every node type; printers and the evaluator
    are the main consumers.
    """

    @abstractmethod
    def visit_integer_literal(self, node: 'IntegerLiteral') -> Any:
        pass

    @abstractmethod
    def visit_float_literal(self, node: 'FloatLiteral') -> Any:
        pass

    @abstractmethod
    def visit_prefix_expression(self, node: 'PrefixExpression') -> Any:
        pass

    @abstractmethod
    def visit_infix_expression(self, node: 'InfixExpression') -> Any:
        pass

    @abstractmethod
    def visit_postfix_expression(self, node: 'PostfixExpression') -> Any:
        pass


class Expression(ABC):
    """Base class for all expression nodes."""

    @abstractmethod
    def accept(self, visitor: ExpressionVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass

    @abstractmethod
    def children(self) -> List['Expression']:
        """Get all child nodes."""
        pass

    @property
    def span(self) -> Optional[SourceSpan]:
        token = getattr(self, "token", None)
        return token.span if token is not None else None


# ============================================================================
# Literals
# ============================================================================

@dataclass(frozen=True)
class IntegerLiteral(Expression):
    """Signed 64-bit integer literal."""
    value: int
    token: Optional[Token] = field(default=None, compare=False, repr=False)

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_integer_literal(self)

    def children(self) -> List[Expression]:
        return []


@dataclass(frozen=True)
class FloatLiteral(Expression):
    """Double precision float literal."""
    value: float
    token: Optional[Token] = field(default=None, compare=False, repr=False)

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_float_literal(self)

    def children(self) -> List[Expression]:
        return []


# ============================================================================
# Operators
# ============================================================================

@dataclass(frozen=True)
class PrefixExpression(Expression):
    """Prefix operator applied to one operand, e.g. -x."""
    operator: TokenKind
    operand: Expression
    token: Optional[Token] = field(default=None, compare=False, repr=False)

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_prefix_expression(self)

    def children(self) -> List[Expression]:
        return [self.operand]


@dataclass(frozen=True)
class InfixExpression(Expression):
    """Binary operator expression."""
    operator: TokenKind
    left: Expression
    right: Expression
    token: Optional[Token] = field(default=None, compare=False, repr=False)

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_infix_expression(self)

    def children(self) -> List[Expression]:
        return [self.left, self.right]


@dataclass(frozen=True)
class PostfixExpression(Expression):
    """Postfix operator applied to one operand, e.g. x!."""
    operator: TokenKind
    operand: Expression
    token: Optional[Token] = field(default=None, compare=False, repr=False)

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_postfix_expression(self)

    def children(self) -> List[Expression]:
        return [self.operand]
