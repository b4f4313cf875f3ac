"""Error hierarchy for cata.

Reader errors carry the cursor position where reading failed; evaluation
errors carry the position of the offending node when it is known.
"""

from __future__ import annotations

from typing import Optional

from cata.types.position import Position


class CataError(Exception):
    """ Base class for all cata errors"""

    def __init__(self, message: str, position: Optional[Position] = None):
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at {self.position})"


class CataSyntaxError(CataError):
    """ Raised when source text cannot be read"""


class UnterminatedString(CataSyntaxError):
    """ Raised when input ends inside a string literal"""


class InvalidEscapeSequence(CataSyntaxError):
    """ Raised when a backslash is followed by anything but n or a quote"""


class NewlineInString(CataSyntaxError):
    """ Raised when a string literal contains a raw newline"""


class MissingCloseParen(CataSyntaxError):
    """ Raised when input ends before a list is closed"""


class CataEvalError(CataError):
    """ Base class for errors raised while evaluating a form"""


class EmptyForm(CataEvalError):
    """ Raised when the empty list is evaluated"""


class InvalidOperator(CataEvalError):
    """ Raised when the head of a form is not a symbol"""


class InvalidSymbol(CataEvalError):
    """ Raised when a symbol is required but something else was given"""


class ArityMismatch(CataEvalError):
    """ Raised when a form or function gets the wrong number of arguments"""


class UnboundSymbol(CataEvalError):
    """ Raised when a symbol is used before it is bound"""


class NotCallable(CataEvalError):
    """ Raised when the operator of a call is not a function"""


class TypeMismatch(CataEvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class InvalidInput(CataEvalError):
    """ Raised when READ-INT cannot read an integer from standard input"""


class RecursionLimitExceeded(CataError):
    """ Raised when reading or evaluation nests deeper than the configured limit"""


class ProgramExit(SystemExit):
    """Raised by EXIT. Not an error: it unwinds the interpreter and, when
    uncaught, ends the process with the given status."""

    def __init__(self, status: int = 0):
        super().__init__(status)
        self.status = status
