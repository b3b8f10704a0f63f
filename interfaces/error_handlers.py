"""Maps failures to ``{"error": "<message>"}`` responses.

TodoError subclasses carry their own status. Request parsing failures are a
400 rather than FastAPI's 422. Anything else is a 500 with a fixed message.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from domain.errors import StorageError, TodoError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(TodoError)
    async def todo_error(request: Request, exc: TodoError):
        where = f"{request.method} {request.url.path}"
        if isinstance(exc, StorageError):
            logger.error(f"Storage failure on {where}", exc_info=exc)
        else:
            logger.warning(f"{type(exc).__name__} on {where}: {exc.message}")
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def bad_request(request: Request, exc: RequestValidationError):
        logger.warning(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _describe(exc)},
        )

    @app.exception_handler(Exception)
    async def server_error(request: Request, exc: Exception):
        logger.exception(f"{request.method} {request.url.path} failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": GENERIC_ERROR_MESSAGE},
        )


def _describe(exc: RequestValidationError) -> str:
    details = "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in exc.errors()
    )
    return f"Invalid request data ({details})" if details else "Invalid request data"
