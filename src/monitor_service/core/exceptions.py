"""Domain errors and the handlers that render them with request_id."""

from enum import Enum

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.monitor_service.core.logging import get_logger

logger = get_logger(__name__)


class ErrorKind(str, Enum):
    """Category of a domain failure. Callers switch on this, not on messages."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


class AppError(Exception):
    """Base class for failures raised by the service and repository layers."""

    kind: ErrorKind
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(AppError):
    """Input failed a declared rule. Raised before any storage access."""

    kind = ErrorKind.VALIDATION
    status_code = status.HTTP_422_UNPROCESSABLE_CONTENT

    def __init__(self, detail: str, errors: list[dict] | None = None):
        super().__init__(detail)
        self.errors = errors or []


class NotFoundError(AppError):
    """Referenced identity does not exist at lookup time."""

    kind = ErrorKind.NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND


class StorageError(AppError):
    """The database rejected or could not complete an operation."""

    kind = ErrorKind.STORAGE
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        request_id = correlation_id.get()
        content: dict = {
            "detail": exc.detail,
            "kind": exc.kind.value,
            "request_id": request_id,
        }
        if isinstance(exc, StorageError):
            # Storage internals are not exposed to clients
            logger.error(
                "Storage failure",
                detail=exc.detail,
                path=request.url.path,
                exc_info=exc,
            )
            content["detail"] = "Internal server error"
        elif isinstance(exc, ValidationError) and exc.errors:
            content["errors"] = exc.errors
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=ValidationError.status_code,
            content={
                "detail": "Request validation failed",
                "kind": ErrorKind.VALIDATION.value,
                "request_id": correlation_id.get(),
                "errors": errors,
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "request_id": request_id,
            },
        )
