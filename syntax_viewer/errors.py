"""
Failure taxonomy.

Only ParseFailure reaches callers. TraversalAnomaly and
PropertyComputationFailure are absorbed where they happen and represented
inline (placeholder display nodes, error property entries).
"""

from typing import NamedTuple, Optional, Any


class ViewerError(Exception):
    pass


class ParseFailure(ViewerError):
    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)

    def to_dict(self):
        return {"message": self.message, "line": self.line, "column": self.column}


class TraversalAnomaly(ViewerError):
    """Unexpected or too deeply nested child met while materializing."""


class PropertyComputationFailure(ViewerError):
    """A single property value or its string form could not be computed."""

    def __init__(self, name: str, cause: BaseException):
        self.name = name
        self.cause = cause
        super().__init__(f"{name}: {cause}")


class ParseOutcome(NamedTuple):
    root: Any
    failure: Optional[ParseFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None
