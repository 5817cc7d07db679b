"""
Maps application errors to the standard error body.

Every 4xx/5xx answer of the API has the same shape:

    {"timestamp": "...", "path": "/users", "status": 400,
     "error": "Validation error", "message": "Error on validation attributes",
     "errors": [{"fieldName": "name", "message": "..."}]}

`errors` is only present for validation failures. Routing errors raised by
Starlette (unknown path, method not allowed) use the same body.
"""
import logging
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.utils.result import NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "Validation error"
INTERNAL_ERROR = "Internal Server Error"


class FieldMessage(BaseModel):
    field_name: str = Field(serialization_alias="fieldName")
    message: str


class StandardError(BaseModel):
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    path: str
    status: int
    error: str
    message: str
    errors: list[FieldMessage] | None = None


def translate_error(exc: Exception, path: str) -> StandardError:
    if isinstance(exc, ValidationError):
        return StandardError(
            path=path,
            status=400,
            error=VALIDATION_ERROR,
            message=exc.message,
            errors=[FieldMessage(field_name=v.field_name, message=v.message) for v in exc.violations],
        )
    if isinstance(exc, NotFoundError):
        return StandardError(path=path, status=404, error=exc.message, message=exc.message)
    if isinstance(exc, StarletteHTTPException):
        # Rotas inexistentes, método não permitido etc.
        reason = HTTPStatus(exc.status_code).phrase
        return StandardError(path=path, status=exc.status_code, error=reason, message=str(exc.detail or reason))
    if isinstance(exc, StorageError):
        return StandardError(path=path, status=500, error=INTERNAL_ERROR, message="Storage failure")
    return StandardError(path=path, status=500, error=INTERNAL_ERROR, message="Unexpected error")


def _to_response(body: StandardError, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=body.status,
        headers=headers,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("api.validation_error", extra={"path": request.url.path, "fields": exc.fields})
    return _to_response(translate_error(exc, request.url.path))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Corpo malformado ou tipos errados: mesmo formato do 400 de validação
    errors = [
        FieldMessage(field_name=str(err["loc"][-1]) if err.get("loc") else "body", message=err["msg"])
        for err in exc.errors()
    ]
    logger.info("api.request_validation_error", extra={"path": request.url.path})
    body = StandardError(
        path=request.url.path,
        status=400,
        error=VALIDATION_ERROR,
        message="Error on validation attributes",
        errors=errors,
    )
    return _to_response(body)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info("api.not_found", extra={"path": request.url.path})
    return _to_response(translate_error(exc, request.url.path))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.info("api.http_error", extra={"path": request.url.path, "status": exc.status_code})
    return _to_response(translate_error(exc, request.url.path), headers=exc.headers)


async def storage_failure_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.warning("api.storage_error %s %s: %s", request.method, request.url.path, exc)
    return _to_response(translate_error(exc, request.url.path))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("api.unhandled_error %s %s", request.method, request.url.path)
    return _to_response(translate_error(exc, request.url.path))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(StorageError, storage_failure_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
