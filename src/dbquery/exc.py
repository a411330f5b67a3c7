"""Exception hierarchy for dbquery."""

from __future__ import annotations

import enum


class ErrorKind(str, enum.Enum):
    """Named error conditions carried on every dbquery error."""

    EMPTY_PREDICATE = 'empty_predicate'
    EMPTY_ARGUMENTS = 'empty_arguments'
    INVALID_PARAMETER = 'invalid_parameter'
    MISSING_TABLE = 'missing_table'
    NO_ASSIGNMENTS = 'no_assignments'
    INVALID_IDENTIFIER = 'invalid_identifier'


class DbQueryError(Exception):
    """Base exception for all dbquery errors."""

    kind: ErrorKind | None = None


class ValidationError(DbQueryError):
    """A builder method was called with unusable arguments."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        self.kind = kind
        super().__init__(message)


class InvalidQueryError(DbQueryError):
    """The accumulated builder state cannot be rendered."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        self.kind = kind
        super().__init__(message)


class IdentifierError(DbQueryError):
    """A table or column name could not be resolved."""

    kind = ErrorKind.INVALID_IDENTIFIER
