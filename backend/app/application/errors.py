from http import HTTPStatus

from app.domain.error_shape import ErrorShape


class ApplicationError(Exception):
    """Base application-layer error, independent from transport concerns.

    `status` and `shape` are optional: when left as None the translator looks
    them up on the wrapped cause instead. A cause can be attached either with
    `raise ApplicationError(...) from exc` or through the `cause` argument.
    """

    default_status: HTTPStatus | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        status: HTTPStatus | int | None = None,
        shape: ErrorShape | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        if status is None:
            status = self.default_status
        self.status = HTTPStatus(status) if status is not None else None
        self.shape = shape
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message or ""


class NotFoundError(ApplicationError):
    """Raised when an expected entity does not exist."""

    default_status = HTTPStatus.NOT_FOUND


class ConflictError(ApplicationError):
    """Raised when a uniqueness or state conflict occurs."""

    default_status = HTTPStatus.CONFLICT


class ForbiddenError(ApplicationError):
    """Raised when operation is forbidden by business rules."""

    default_status = HTTPStatus.FORBIDDEN


class InvalidRequestError(ApplicationError):
    """Raised when application-level validation fails."""

    default_status = HTTPStatus.BAD_REQUEST
