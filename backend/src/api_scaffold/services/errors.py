from __future__ import annotations

from enum import Enum
from http import HTTPStatus


class FailureKind(str, Enum):
    APPLICATION = "application"
    GENERIC = "generic"


class ApplicationError(Exception):
    """A classified failure carrying the HTTP status it should be answered with.

    Raised wherever a handler or service detects an expected domain failure
    (missing resource, bad credentials, invalid input). Both fields are fixed
    at construction.
    """

    kind = FailureKind.APPLICATION

    def __init__(self, status_code: int, message: str) -> None:
        if isinstance(status_code, bool) or not isinstance(status_code, int):
            raise TypeError(f"status_code must be an int, got {type(status_code).__name__}")
        if not 100 <= status_code <= 599:
            raise ValueError(f"status_code must be a valid HTTP status, got {status_code}")
        if not isinstance(message, str) or not message.strip():
            raise ValueError("message must be a non-empty string")
        super().__init__(message)
        self._status_code = int(status_code)
        self._message = message

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def message(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self._status_code}, message={self._message!r})"


class BadRequestError(ApplicationError):
    def __init__(self, message: str = "Bad request") -> None:
        super().__init__(HTTPStatus.BAD_REQUEST.value, message)


class UnauthorizedError(ApplicationError):
    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(HTTPStatus.UNAUTHORIZED.value, message)


class ForbiddenError(ApplicationError):
    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(HTTPStatus.FORBIDDEN.value, message)


class NotFoundError(ApplicationError):
    def __init__(self, resource: str, identifier: str | None = None) -> None:
        self.resource = resource
        self.identifier = identifier
        super().__init__(HTTPStatus.NOT_FOUND.value, f"{resource} not found")


class ConflictError(ApplicationError):
    def __init__(self, message: str = "Conflict") -> None:
        super().__init__(HTTPStatus.CONFLICT.value, message)


class ServiceUnavailableError(ApplicationError):
    def __init__(self, message: str = "Service unavailable") -> None:
        super().__init__(HTTPStatus.SERVICE_UNAVAILABLE.value, message)
