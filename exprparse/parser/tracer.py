"""
Tracing hooks for the recursive-descent parser.

A tracer is told when each grammar rule is entered and what it produced on
return. It exists for watching the recursion unfold and must never affect
the parse result.
"""

import logging
from typing import Any, List, Tuple

from ..lexer.tokens import Token


class Tracer:
    """Logs rule entry and exit at DEBUG level, indented by call depth."""

    INDENTATION = 4

    def __init__(self, logger_name: str = "RecursiveDescentTracer"):
        self._logger = logging.getLogger(logger_name)
        self._indentation = 0

    def enter(self, rule: str, token: Token):
        self._logger.debug("%sEnter: %s, Lexeme: %r", " " * self._indentation, rule, token.lexeme)
        self._indentation += self.INDENTATION

    def exit(self, value: Any):
        self._indentation = max(0, self._indentation - self.INDENTATION)
        self._logger.debug("%sExit: Type: %s", " " * self._indentation, type(value).__name__)


class RecordingTracer(Tracer):
    """Tracer that also keeps every event in memory."""

    def __init__(self, logger_name: str = "RecursiveDescentTracer"):
        super().__init__(logger_name)
        self.events: List[Tuple[str, Any]] = []

    def enter(self, rule: str, token: Token):
        self.events.append(("enter", rule))
        super().enter(rule, token)

    def exit(self, value: Any):
        self.events.append(("exit", value))
        super().exit(value)
