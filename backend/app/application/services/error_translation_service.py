from collections.abc import Callable, Sequence
from datetime import datetime
from http import HTTPStatus
from typing import Any

from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.application.errors import ApplicationError
from app.config import Settings, settings
from app.domain.error_shape import ErrorShape
from app.infrastructure.logging import get_logger
from app.interfaces.api.v1.schemas.error import (
    BasicResponse,
    CompleteResponse,
    ErrorResponse,
    FieldMessage,
    FieldValidationResponse,
)

logger = get_logger(__name__)

REQUEST_PART_MARKERS = {"body", "query", "path", "header", "cookie"}
BODYLESS_STATUS_CODES = {HTTPStatus.NO_CONTENT, HTTPStatus.NOT_MODIFIED}


class TranslatedError(BaseModel):
    status_code: int
    body: ErrorResponse | None
    headers: dict[str, str] | None = None

    def content(self) -> dict[str, Any] | None:
        if self.body is None:
            return None
        return self.body.model_dump(mode="json")


def current_timestamp(clock: Callable[[], datetime] = datetime.now) -> str:
    return clock().isoformat()


def format_field_location(location: Sequence[Any]) -> str:
    parts = [str(part) for part in location]
    if len(parts) > 1 and parts[0] in REQUEST_PART_MARKERS:
        parts = parts[1:]
    return ".".join(parts)


def extract_field_messages(errors: Sequence[dict[str, Any]]) -> list[FieldMessage]:
    return [
        FieldMessage(field=format_field_location(error.get("loc", ())), message=str(error.get("msg", "")))
        for error in errors
    ]


def cause_message(error: BaseException) -> str | None:
    cause = error.__cause__
    if cause is None:
        return None
    if isinstance(cause, ApplicationError):
        return cause.message
    return str(cause)


def resolve_shape(error: ApplicationError) -> ErrorShape:
    if error.shape is not None:
        return error.shape
    cause = error.__cause__
    if isinstance(cause, ApplicationError) and cause.shape is not None:
        return cause.shape
    return ErrorShape.basic


def resolve_status(
    error: BaseException,
    *,
    default: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
    max_depth: int | None = None,
) -> HTTPStatus:
    """Return the first explicit status found walking the cause chain.

    Causes are followed regardless of their type. The walk stops at `max_depth`
    links or when a cause repeats, and falls back to `default` in both cases.
    """
    if max_depth is None:
        max_depth = settings.max_cause_depth
    visited: set[int] = set()
    current: BaseException | None = error
    depth = 0
    while current is not None:
        if isinstance(current, ApplicationError) and current.status is not None:
            return current.status
        visited.add(id(current))
        current = current.__cause__
        if current is None:
            break
        depth += 1
        if id(current) in visited or depth > max_depth:
            logger.warning(
                "cause_chain_truncated",
                error_type=type(error).__name__,
                depth=depth,
                cyclic=id(current) in visited,
            )
            break
    return default


class ErrorTranslator:
    """Turns a raised error and the request path into a status code and body."""

    def __init__(self, config: Settings = settings, clock: Callable[[], datetime] = datetime.now):
        self.config = config
        self.clock = clock

    def translate(self, error: BaseException, path: str) -> TranslatedError:
        if isinstance(error, RequestValidationError):
            return self.handle_validation(error, path)
        if isinstance(error, ApplicationError):
            return self.handle_application_error(error, path)
        if isinstance(error, StarletteHTTPException):
            return self.handle_http_error(error, path)
        return self.handle_unclassified(error, path)

    def handle_validation(self, error: RequestValidationError, path: str) -> TranslatedError:
        status = resolve_status(
            error,
            default=HTTPStatus(self.config.validation_status_code),
            max_depth=self.config.max_cause_depth,
        )
        details = extract_field_messages(error.errors())
        logger.info("validation_error_translated", status=status.value, path=path, fields=[item.field for item in details])
        body = FieldValidationResponse(status=str(status.value), message=self.config.validation_message, details=details)
        return TranslatedError(status_code=status.value, body=body)

    def handle_application_error(self, error: ApplicationError, path: str) -> TranslatedError:
        status = resolve_status(error, max_depth=self.config.max_cause_depth)
        shape = resolve_shape(error)
        logger.info(
            "application_error_translated",
            status=status.value,
            shape=shape.value,
            path=path,
            error_type=type(error).__name__,
        )
        if shape is ErrorShape.complete:
            body = CompleteResponse(
                status=str(status.value),
                message=error.message,
                details=cause_message(error),
                path=path,
                timestamp=current_timestamp(self.clock),
            )
        else:
            body = BasicResponse(status=str(status.value), message=error.message)
        return TranslatedError(status_code=status.value, body=body)

    def handle_http_error(self, error: StarletteHTTPException, path: str) -> TranslatedError:
        message = error.detail if isinstance(error.detail, str) else _reason_phrase(error.status_code)
        logger.info("http_error_translated", status=error.status_code, path=path)
        body = None
        if error.status_code not in BODYLESS_STATUS_CODES:
            body = BasicResponse(status=str(error.status_code), message=message)
        return TranslatedError(
            status_code=error.status_code,
            body=body,
            headers=dict(error.headers) if error.headers else None,
        )

    def handle_unclassified(self, error: BaseException, path: str) -> TranslatedError:
        status = resolve_status(error, max_depth=self.config.max_cause_depth)
        message = status.phrase
        if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            message = self.config.internal_error_message
            logger.error(
                "unhandled_exception",
                status=status.value,
                path=path,
                error_type=type(error).__name__,
                exc_info=(type(error), error, error.__traceback__),
            )
        body = BasicResponse(status=str(status.value), message=message)
        return TranslatedError(status_code=status.value, body=body)


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "HTTP error"
