"""
Custom exceptions for the application.
"""

import errno
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Classification of every failure a command can end with."""

    MISSING_ARGUMENT = "MissingArgument"
    INVALID_COMMAND = "InvalidCommand"
    INVALID_SUBCOMMAND = "InvalidSubcommand"
    NOT_FOUND = "NotFound"
    NOT_A_DIRECTORY = "NotADirectory"
    IS_A_DIRECTORY = "IsADirectory"
    ALREADY_EXISTS = "AlreadyExists"
    PERMISSION_DENIED = "PermissionDenied"
    CORRUPT_DATA = "CorruptData"
    OPERATION_FAILED = "OperationFailed"


class BaseAppError(Exception):
    """Base exception class for application errors."""

    kind: ErrorKind = ErrorKind.OPERATION_FAILED

    def __init__(self, message: str = "", kind: Optional[ErrorKind] = None):
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class CommandError(BaseAppError):
    """Exception raised when a command line cannot be dispatched."""

    kind = ErrorKind.INVALID_COMMAND


class FileRepositoryError(BaseAppError):
    """Exception raised for filesystem and stream errors."""

    @classmethod
    def from_os_error(cls, exc: OSError, path: str) -> "FileRepositoryError":
        """
        Translate an OSError into a classified repository error.

        Args:
            exc: The error raised by the operating system
            path: Path the failing operation was working on

        Returns:
            FileRepositoryError carrying the matching ErrorKind
        """
        if isinstance(exc, FileNotFoundError):
            kind = ErrorKind.NOT_FOUND
        elif isinstance(exc, NotADirectoryError):
            kind = ErrorKind.NOT_A_DIRECTORY
        elif isinstance(exc, IsADirectoryError):
            kind = ErrorKind.IS_A_DIRECTORY
        elif isinstance(exc, FileExistsError) or exc.errno == errno.ENOTEMPTY:
            kind = ErrorKind.ALREADY_EXISTS
        elif isinstance(exc, PermissionError):
            kind = ErrorKind.PERMISSION_DENIED
        else:
            kind = ErrorKind.OPERATION_FAILED
        return cls(f"{exc.strerror or exc}: {path}", kind)


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
