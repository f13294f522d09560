"""Error taxonomy shared by both services and the handlers that render it.

Services raise these exceptions directly (they are `HTTPException`
subclasses), and `exception_handlers()` turns them, request validation
failures and ORM errors into the common error envelope:

    {"success": false, "error": "<code>", "message": "<human readable>"}
"""
import logging
from typing import Any, Callable, Optional

from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from tortoise.exceptions import BaseORMException, DoesNotExist, IntegrityError

logger = logging.getLogger(__name__)


class AppError(HTTPException):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "internal_error"
    default_detail: str = "Internal server error."

    def __init__(
        self,
        detail: Optional[str] = None,
        *,
        code: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
    ):
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.default_detail,
            headers=headers,
        )
        if code:
            self.code = code


class BadRequestError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "validation_error"
    default_detail = "Invalid request."


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "not_authenticated"
    default_detail = "Authentication required."


class AuthorizationError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "forbidden"
    default_detail = "Access denied."


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    default_detail = "Not found."


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    code = "conflict"
    default_detail = "Conflict."


class InternalError(AppError):
    pass


_CODES_BY_STATUS = {
    status.HTTP_400_BAD_REQUEST: BadRequestError.code,
    status.HTTP_401_UNAUTHORIZED: AuthenticationError.code,
    status.HTTP_403_FORBIDDEN: AuthorizationError.code,
    status.HTTP_404_NOT_FOUND: NotFoundError.code,
    status.HTTP_409_CONFLICT: ConflictError.code,
}


def error_body(code: str, message: str, details: Any = None) -> dict[str, Any]:
    body: dict[str, Any] = {"success": False, "error": code, "message": message}
    if details is not None:
        body["details"] = details
    return body


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.code, str(exc.detail)),
        headers=exc.headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = _CODES_BY_STATUS.get(exc.status_code, "http_error")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(code, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(error_body(BadRequestError.code, "Invalid request data.", details)),
    )


async def does_not_exist_handler(request: Request, exc: DoesNotExist) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_body(NotFoundError.code, "Record not found."),
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=error_body(ConflictError.code, "The request conflicts with existing data."),
    )


async def store_error_handler(request: Request, exc: BaseORMException) -> JSONResponse:
    # The store message stays in the logs; clients only get the generic text.
    logger.error(f"Store error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(InternalError.code, InternalError.default_detail),
    )


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(InternalError.code, InternalError.default_detail),
    )


def exception_handlers() -> dict[Any, Callable]:
    """Handlers to pass as `FastAPI(exception_handlers=...)`."""
    return {
        AppError: app_error_handler,
        StarletteHTTPException: http_exception_handler,
        RequestValidationError: validation_exception_handler,
        DoesNotExist: does_not_exist_handler,
        IntegrityError: integrity_error_handler,
        BaseORMException: store_error_handler,
        Exception: internal_error_handler,
    }
