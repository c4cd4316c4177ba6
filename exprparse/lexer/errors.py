"""
Error handling for the expression lexer.

Errors carry a Diagnostic with the source span, an error code and optional
help text so the REPL can print something more useful than a bare message.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceSpan


@dataclass
class Diagnostic:
    """Base record for diagnostics (errors, warnings)."""
    message: str
    span: Optional[SourceSpan]
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}"

        if self.span is not None:
            result += f"\n  --> column {self.span.start + 1}"

        if self.help_text:
            result += f"\n  help: {self.help_text}"

        if self.suggestions:
            result += "\n  suggestions:"
            for suggestion in self.suggestions:
                result += f"\n    - {suggestion}"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer cannot produce a token.

    Unknown characters are not errors; they come back as ILLEGAL tokens.
    """

    def __init__(
        self,
        message: str,
        span: Optional[SourceSpan] = None,
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

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L003": "Invalid numeric literal",
}


def create_expected_digit_error(found: str, span: SourceSpan) -> LexerError:
    """Create an error for a '.' that is not followed by a digit."""
    found_str = found if found else "end of input"
    return LexerError(
        message=f"Expected digit. Got '{found_str}'",
        span=span,
        code="L003",
        help_text="A float literal needs at least one digit after the '.'.",
        suggestions=["Write 2.0 instead of 2."]
    )
