"""Application errors carrying a category that callers map to responses."""

from __future__ import annotations

import enum


class ErrorStatus(enum.IntEnum):
    """Category of an application error."""

    NOT_FOUND = 0
    BAD_REQUEST = 1
    CONFLICT = 2
    FAILED_PRECONDITION = 3
    INTERNAL = 4


class AppError(Exception):
    """An error raised by repositories and use cases."""

    def __init__(self, message: str, code: ErrorStatus) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"AppError({self.message!r}, {self.code.name})"

    def with_context(self, context: str) -> AppError:
        """Return a new error whose message is prefixed with ``context``."""
        return AppError(f"{context}: {self.message}", self.code)


def from_exception(err: BaseException, code: ErrorStatus) -> AppError:
    """Wrap any exception's message in an :class:`AppError`."""
    return AppError(str(err), code)


def internal_error() -> AppError:
    """Return the generic error used to hide internal failures."""
    return AppError("an internal error has occurred", ErrorStatus.INTERNAL)