from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Union

from api_scaffold.services.errors import FailureKind

FALLBACK_MESSAGE = "Internal Server Error"


@dataclass(frozen=True)
class ApplicationFailure:
    status_code: int
    message: str
    kind: FailureKind = field(default=FailureKind.APPLICATION, init=False)


@dataclass(frozen=True)
class GenericFailure:
    message: str | None = None
    kind: FailureKind = field(default=FailureKind.GENERIC, init=False)


Failure = Union[ApplicationFailure, GenericFailure]


@dataclass(frozen=True)
class TranslatedError:
    status_code: int
    body: dict[str, Any]


def classify(exc: BaseException) -> Failure:
    """Turn a raised exception into its tagged failure variant."""
    if getattr(exc, "kind", None) is FailureKind.APPLICATION:
        return ApplicationFailure(status_code=exc.status_code, message=exc.message)
    return GenericFailure(message=_message_of(exc))


def translate(
    failure: Failure | BaseException,
    *,
    expose_internal_messages: bool = True,
) -> TranslatedError:
    """Map a failure to the one response the client receives.

    Classified failures keep their status and message. Anything else becomes a
    500 whose message is the failure's own text (or the fallback when it has
    none, or when ``expose_internal_messages`` is off).
    """
    if isinstance(failure, BaseException):
        failure = classify(failure)

    if failure.kind is FailureKind.APPLICATION:
        return TranslatedError(
            status_code=failure.status_code,
            body={"status": "error", "message": failure.message},
        )

    message = failure.message if expose_internal_messages and failure.message else FALLBACK_MESSAGE
    return TranslatedError(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR.value,
        body={"status": "error", "message": message},
    )


def _message_of(exc: BaseException) -> str | None:
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message.strip():
        return message
    text = str(exc)
    return text if text.strip() else None
