from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.application.errors import ApplicationError
from app.application.services.error_translation_service import ErrorTranslator

HANDLED_ERRORS: tuple[type[BaseException], ...] = (
    RequestValidationError,
    ApplicationError,
    StarletteHTTPException,
    Exception,
)


def install_error_handlers(app: FastAPI, translator: ErrorTranslator | None = None) -> ErrorTranslator:
    """Route every failed request through one ErrorTranslator.

    Handlers receive the error and the request path explicitly. Statuses that
    must not carry a body (204, 304) get a bare response.
    """
    translator = translator or ErrorTranslator()

    async def handle_error(request: Request, exc: Exception) -> Response:
        translated = translator.translate(exc, request.url.path)
        content = translated.content()
        if content is None:
            return Response(status_code=translated.status_code, headers=translated.headers)
        return JSONResponse(status_code=translated.status_code, content=content, headers=translated.headers)

    for error_type in HANDLED_ERRORS:
        app.add_exception_handler(error_type, handle_error)
    return translator
