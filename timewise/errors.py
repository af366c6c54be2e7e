# timewise/errors.py
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    EMPTY_DATA = "empty_data"
    INSUFFICIENT_DATA = "insufficient_data"
    INVALID_INPUT = "invalid_input"


MESSAGES = {
    ErrorKind.EMPTY_DATA: "Empty data provided",
    ErrorKind.INSUFFICIENT_DATA: "Insufficient data for analysis",
    ErrorKind.INVALID_INPUT: "Invalid input",
}


class LinearRegressionError(ValueError):
    """
    Single failure type of the regression core.
    Callers branch on `kind` (closed set of three), never on subclasses.
    """

    def __init__(self, kind: ErrorKind, detail: str = ""):
        self.kind = ErrorKind(kind)
        self.detail = detail
        message = MESSAGES[self.kind]
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
