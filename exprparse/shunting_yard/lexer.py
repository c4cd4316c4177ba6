"""
Lexical pre-pass for the shunting-yard engine.

Runs the shared lexer to completion and tags every token with its role.
A '-' is unary when it comes first or follows an operator or '(', and
binary when it follows a literal or ')'. The same walk rejects an operand
where an operator belongs and vice versa, since it is the only place that
sees neighbouring tokens.
"""

from typing import List

from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenKind
from ..parser.errors import (
    create_illegal_character_error, create_unexpected_primary_error,
    create_unexpected_token_error
)
from .tokens import Symbol, SymbolType

BINARY_OPERATORS = {
    TokenKind.PLUS: SymbolType.BINARY_PLUS,
    TokenKind.MINUS: SymbolType.BINARY_MINUS,
    TokenKind.STAR: SymbolType.BINARY_MUL,
    TokenKind.SLASH: SymbolType.BINARY_DIV,
    TokenKind.CARET: SymbolType.BINARY_EXP,
}


def classify(tokens: List[Token]) -> List[Symbol]:
    """
    Tag lexer tokens with their shunting-yard role.

    Args:
        tokens: Lexer output, ending with EOF

    Returns:
        Symbols ending with exactly one END symbol

    Raises:
        ParseError: On illegal characters or misplaced operands/operators
    """
    symbols: List[Symbol] = []
    expect_operand = True

    for token in tokens:
        if token.kind == TokenKind.ILLEGAL:
            raise create_illegal_character_error(token)

        if expect_operand:
            if token.is_literal:
                symbols.append(Symbol(SymbolType.LITERAL, token))
                expect_operand = False
            elif token.kind == TokenKind.MINUS:
                symbols.append(Symbol(SymbolType.UNARY_MINUS, token))
            elif token.kind == TokenKind.LPAREN:
                symbols.append(Symbol(SymbolType.LEFT_PAREN, token))
            else:
                raise create_unexpected_primary_error(token)
        else:
            if token.kind in BINARY_OPERATORS:
                symbols.append(Symbol(BINARY_OPERATORS[token.kind], token))
                expect_operand = True
            elif token.kind == TokenKind.RPAREN:
                symbols.append(Symbol(SymbolType.RIGHT_PAREN, token))
            elif token.kind == TokenKind.EOF:
                symbols.append(Symbol(SymbolType.END, token))
                return symbols
            else:
                raise create_unexpected_token_error("binary operator", token)

    # The lexer always ends with EOF; reaching here means it was cut off.
    raise create_unexpected_primary_error(Token(TokenKind.EOF, ""))


class ExpressionLexer:
    """Produces classified symbols for the shunting-yard engine."""

    def tokenize(self, source: str) -> List[Symbol]:
        """
        Raises:
            LexerError: If the shared lexer fails on a float literal
            ParseError: If the token sequence is malformed
        """
        return classify(Lexer(source).tokenize())
