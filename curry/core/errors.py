"""
Errors raised by the checker, the parser, the tactic engine and the driver.

Two families matter to callers:
    TacticError     recoverable. The engine reports it and asks again
                    for the same goal.
    everything else fatal for the proof session.

Every error carries an ErrorKind so callers can tell failures apart
without matching on message text.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    UNBOUND_VARIABLE = "unbound variable"
    SHAPE_MISMATCH = "shape mismatch"
    TYPE_MISMATCH = "type mismatch"
    MISSING_ARGUMENT = "missing argument"
    UNKNOWN_COMMAND = "unknown command"
    NOT_IMPLEMENTED = "not implemented"
    SYNTAX_ERROR = "syntax error"
    END_OF_INPUT = "end of input"
    INTEGRITY = "integrity"


class ProofError(Exception):
    """Base class for everything the prover raises on purpose."""

    def __init__(self, message: str, kind: Optional[ErrorKind] = None):
        self.kind = kind
        super().__init__(message)


class TypeCheckError(ProofError):
    """A term has no type, or not the expected one."""


class ParseError(ProofError):
    """Malformed surface syntax, with the 1-based column where it went wrong."""

    def __init__(self, message: str, column: Optional[int] = None):
        self.column = column
        if column is not None:
            message = f"col {column}: {message}"
        super().__init__(message, ErrorKind.SYNTAX_ERROR)


class TacticError(ProofError):
    """A tactic could not be applied to the current goal. Recoverable."""


class EndOfInput(ProofError):
    """The command source ran dry while a goal was still open."""

    def __init__(self, message: str = "End of input while a goal is still open."):
        super().__init__(message, ErrorKind.END_OF_INPUT)


class IntegrityError(ProofError):
    """The finished proof term does not check against its goal."""

    def __init__(self, message: str):
        super().__init__(message, ErrorKind.INTEGRITY)
