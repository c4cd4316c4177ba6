"""
Expression Lexer Package

Shared tokenizer for all three parsing engines.

Key Features:
- Pull-based next_token() interface with one character of backtracking
  to tell integers from floats
- Unknown characters surface as ILLEGAL tokens instead of exceptions
- Numeric text is left unconverted for the parsers
- Source spans on every token for error reporting

Author: xwest
"""

from .tokens import Token, TokenKind, SourceSpan, OPERATOR_SYMBOLS
from .lexer import Lexer, tokenize_string
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "SourceSpan",
    "OPERATOR_SYMBOLS",
    "tokenize_string",
    "Diagnostic",
    "LexerError",
]
