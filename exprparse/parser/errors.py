"""
Error handling for the expression parsers.

Every syntax error aborts the current parse; there is no resynchronization.
Each error kind gets its own exception class so callers and tests can tell
them apart, and each class has a create_* helper that fills in the
diagnostic text.

Author: xwest
"""

from typing import Optional, List, Union

from ..lexer.tokens import Token, TokenKind, SourceSpan
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Base exception for fatal syntax errors.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        span: Optional[SourceSpan] = None,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            span=span,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    def __str__(self) -> str:
        return str(self.diagnostic)


class IllegalCharacterError(ParseError):
    """An ILLEGAL token reached the parser."""


class UnexpectedPrimaryError(ParseError):
    """A token appears where an operand must begin."""

    def __init__(self, got: TokenKind, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.got = got


class NoPrefixParseletError(UnexpectedPrimaryError):
    """No prefix parselet is registered for the token kind."""

    def __init__(self, kind: TokenKind, *args, **kwargs):
        super().__init__(kind, *args, **kwargs)
        self.kind = kind


class NoInfixParseletError(ParseError):
    """No infix parselet is registered for the token kind."""

    def __init__(self, kind: TokenKind, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.kind = kind


class UnexpectedTokenError(ParseError):
    """A required token is missing."""

    def __init__(self, expected: Union[TokenKind, str], got: TokenKind, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.expected = expected
        self.got = got


class TrailingInputError(ParseError):
    """Tokens remain after a complete expression."""

    def __init__(self, kind: TokenKind, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.kind = kind


class InvalidNumericLiteralError(ParseError):
    """Literal text does not convert to the target numeric type."""

    def __init__(self, text: str, target_type: str, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.text = text
        self.target_type = target_type


class UnmatchedParenthesisError(ParseError):
    """Parenthesis imbalance found by the shunting-yard engine."""


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Illegal character",
    "P002": "No prefix parselet",
    "P003": "No infix parselet",
    "P004": "Unexpected primary",
    "P005": "Unexpected token",
    "P006": "Trailing input",
    "P007": "Invalid numeric literal",
    "P008": "Unmatched parenthesis",
}


def _describe(token: Token) -> str:
    if token.kind == TokenKind.EOF:
        return "end of input"
    return f"{token.kind.name} '{token.lexeme}'"


def suggest_missing_token(expected: Union[TokenKind, str]) -> List[str]:
    """Suggest what token might be missing."""
    token_suggestions = {
        TokenKind.RPAREN: ["Add a closing parenthesis ')'"],
        TokenKind.EOF: ["Remove the extra input", "Join the parts with an operator"],
    }
    return token_suggestions.get(expected, [])


# Helper functions for creating common parser errors

def create_illegal_character_error(token: Token) -> IllegalCharacterError:
    """Create an error for a character no token rule matches."""
    char = token.lexeme
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in an expression."
    else:
        help_text = f"Non-printable character (U+{ord(char):04X}) is not allowed."

    return IllegalCharacterError(
        message=f"Illegal character '{char}'",
        span=token.span,
        token=token,
        code="P001",
        help_text=help_text,
        suggestions=["Only digits, '.', + - * / ^ ! and parentheses are allowed"]
    )


def create_no_prefix_parselet_error(token: Token) -> NoPrefixParseletError:
    """Create an error for a token that cannot start an expression."""
    return NoPrefixParseletError(
        token.kind,
        message=f"Couldn't parse {_describe(token)}: no prefix parselet for {token.kind.name}",
        span=token.span,
        token=token,
        code="P002",
        help_text="An expression must start with a number, '-' or '('."
    )


def create_no_infix_parselet_error(token: Token) -> NoInfixParseletError:
    """Create an error for an operator with a precedence but no parselet."""
    return NoInfixParseletError(
        token.kind,
        message=f"Couldn't parse {_describe(token)}: no infix parselet for {token.kind.name}",
        span=token.span,
        token=token,
        code="P003"
    )


def create_unexpected_primary_error(token: Token) -> UnexpectedPrimaryError:
    """Create an error for a missing operand."""
    return UnexpectedPrimaryError(
        token.kind,
        message=f"Expected 'INTEGER', 'FLOAT', 'LPAREN'. Got {_describe(token)}",
        span=token.span,
        token=token,
        code="P004",
        help_text="An operand (number or parenthesized expression) is missing here.",
        suggestions=["Check that every operator has operands"]
    )


def create_unexpected_token_error(expected: Union[TokenKind, str], found: Token) -> UnexpectedTokenError:
    """Create an error for an unexpected token."""
    expected_str = expected.name if isinstance(expected, TokenKind) else expected

    return UnexpectedTokenError(
        expected,
        found.kind,
        message=f"Expected {expected_str}, found {_describe(found)}",
        span=found.span,
        token=found,
        code="P005",
        help_text=f"The parser expected to see {expected_str} at this position.",
        suggestions=suggest_missing_token(expected)
    )


def create_trailing_input_error(found: Token) -> TrailingInputError:
    """Create an error for input left over after a complete expression."""
    return TrailingInputError(
        found.kind,
        message=f"Expected end of input, found {_describe(found)}",
        span=found.span,
        token=found,
        code="P006",
        help_text="A complete expression was parsed but more input follows.",
        suggestions=suggest_missing_token(TokenKind.EOF)
    )


def create_invalid_numeric_literal_error(token: Token, target_type: str) -> InvalidNumericLiteralError:
    """Create an error for a literal that overflows or is malformed."""
    return InvalidNumericLiteralError(
        token.lexeme,
        target_type,
        message=f"Couldn't parse '{token.lexeme}' as {target_type}",
        span=token.span,
        token=token,
        code="P007",
        help_text=f"The literal does not fit in a {target_type}."
    )


def create_unmatched_parenthesis_error(token: Optional[Token]) -> UnmatchedParenthesisError:
    """Create an error for a '(' without ')' or vice versa."""
    return UnmatchedParenthesisError(
        message="Unmatched parenthesis",
        span=token.span if token is not None else None,
        token=token,
        code="P008",
        suggestions=["Check that every '(' has a matching ')'"]
    )
