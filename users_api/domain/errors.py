"""
Domain error types for user operations.

Every failure raised by the user use cases carries an ErrorKind so the HTTP
layer can pick a status code without inspecting messages.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds"""
    TYPE = "type"
    FORMAT = "format"
    CREDENTIALS = "credentials"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"


class UserError(Exception):
    """Base class for all user domain errors"""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidTypeError(UserError, TypeError):
    """Argument has the wrong primitive shape"""

    kind = ErrorKind.TYPE


class InvalidFormatError(UserError, ValueError):
    """Argument has the right shape but breaks a format rule"""

    kind = ErrorKind.FORMAT


class NoDataChangedError(InvalidFormatError):
    """Update payload carries no recognised change"""

    def __init__(self, message: str = "no user data has changed") -> None:
        super().__init__(message)


class CredentialsError(UserError):
    """Identity or secret check failed"""

    kind = ErrorKind.CREDENTIALS


class ConflictError(UserError):
    """A write violated a uniqueness constraint"""

    kind = ErrorKind.CONFLICT


class NotFoundError(UserError):
    """Referenced user does not exist"""

    kind = ErrorKind.NOT_FOUND
