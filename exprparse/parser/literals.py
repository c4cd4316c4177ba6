"""
Numeric literal conversion shared by all engines.

The lexer hands over digits as text. Conversion happens here, at the point a
parser consumes the token, so overflow is reported as a parse error tied to
the offending token.
"""

import math

from ..lexer.tokens import Token
from .errors import create_invalid_numeric_literal_error

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


def to_integer(token: Token) -> int:
    """Convert an INTEGER token to a signed 64-bit value."""
    try:
        value = int(token.lexeme)
    except ValueError:
        raise create_invalid_numeric_literal_error(token, "int64")

    if not INT64_MIN <= value <= INT64_MAX:
        raise create_invalid_numeric_literal_error(token, "int64")
    return value


def to_float(token: Token) -> float:
    """Convert a FLOAT token to a double."""
    try:
        value = float(token.lexeme)
    except ValueError:
        raise create_invalid_numeric_literal_error(token, "float64")

    # float() saturates to inf instead of raising
    if math.isinf(value):
        raise create_invalid_numeric_literal_error(token, "float64")
    return value
