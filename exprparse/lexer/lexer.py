"""
Expression lexer - turns one line of text into tokens on demand.

The lexer is pull based: parsers call next_token() until they see EOF.
Numbers are returned as text; deciding whether "99999999999999999999" fits
in an integer is the parser's problem, not ours.

xwest
"""

from typing import List

from .tokens import Token, TokenKind, SourceSpan, SINGLE_CHAR_TOKENS, DIGITS, WHITESPACE
from .errors import create_expected_digit_error


class Lexer:
    """
    Arithmetic expression lexer.

    Never raises on unknown characters; those come back as ILLEGAL tokens.
    The only lexical error is a float literal with no digits after the '.'.
    """

    def __init__(self, source: str):
        """
        Initialize the lexer with source text.

        Args:
            source: A single expression, fully available up front
        """
        self.source = source
        self.pos = 0

    def next_token(self) -> Token:
        """
        Return the next token, or EOF once the input is exhausted.

        Raises:
            LexerError: If a float literal is malformed
        """
        # Whitespace re-enters the dispatch instead of being skipped in a
        # separate loop up front, so every character goes through one path.
        while True:
            start = self.pos

            if self._at_end():
                return Token(TokenKind.EOF, "", span=SourceSpan(start, start))

            char = self.source[self.pos]

            if char in DIGITS:
                # Scan past the integer part, then rewind to the bookmark and
                # lex for real once we know whether a '.' follows.
                bookmark = self.pos
                while self._current_char() in DIGITS:
                    self.pos += 1
                is_float = self._current_char() == "."
                self.pos = bookmark

                if is_float:
                    lexeme = self._lex_float()
                    return Token(TokenKind.FLOAT, lexeme, span=SourceSpan(start, self.pos))
                lexeme = self._lex_integer()
                return Token(TokenKind.INTEGER, lexeme, span=SourceSpan(start, self.pos))

            kind = SINGLE_CHAR_TOKENS.get(char)
            if kind is not None:
                self.pos += 1
                return Token(kind, char, span=SourceSpan(start, self.pos))

            if char in WHITESPACE:
                self.pos += 1
                continue

            self.pos += 1
            return Token(TokenKind.ILLEGAL, char, span=SourceSpan(start, self.pos))

    def tokenize(self) -> List[Token]:
        """
        Lex the remaining input.

        Returns:
            List of tokens, always ending with exactly one EOF token
        """
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                return tokens

    # Integer = Digit { Digit }
    def _lex_integer(self) -> str:
        start = self.pos
        self.pos += 1
        while self._current_char() in DIGITS:
            self.pos += 1
        return self.source[start:self.pos]

    # Float = Integer "." Integer
    def _lex_float(self) -> str:
        start = self.pos
        self._lex_integer()
        self.pos += 1  # '.'
        if self._current_char() not in DIGITS:
            raise create_expected_digit_error(
                self._current_char(),
                SourceSpan(self.pos, min(self.pos + 1, len(self.source)))
            )
        self._lex_integer()
        return self.source[start:self.pos]

    def _current_char(self) -> str:
        """Character at the current position, or '' at end of input."""
        if self._at_end():
            return ""
        return self.source[self.pos]

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)


def tokenize_string(source: str) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source).tokenize()
