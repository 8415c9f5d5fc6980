import logging
from functools import wraps
from http import HTTPStatus

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from filmorate_api.services.errors import (
    IncorrectParameterFormat,
    ObjectAlreadyExists,
    ObjectNotFound,
    ServiceError,
    ValidationFailed,
)

log = logging.getLogger(__name__)

ERRMAP: dict[type[ServiceError], HTTPStatus] = {
    ValidationFailed: HTTPStatus.BAD_REQUEST,
    IncorrectParameterFormat: HTTPStatus.BAD_REQUEST,
    ObjectNotFound: HTTPStatus.NOT_FOUND,
    ObjectAlreadyExists: HTTPStatus.CONFLICT,
}


def error_detail(error: str, description: str) -> dict:
    return {"error": error, "description": description}


def handle_service_errors(
        mapping: dict[type[ServiceError], HTTPStatus] = ERRMAP):
    """
    Translates service errors into HTTPException by exception type.
    Any other RuntimeError becomes 500 without leaking internals.
    """
    def decorator(fn):
        @wraps(fn)
        async def wrapper(*args, **kwargs):
            try:
                return await fn(*args, **kwargs)
            except RuntimeError as e:
                for error_type, status in mapping.items():
                    if isinstance(e, error_type):
                        raise HTTPException(
                            status_code=status,
                            detail=error_detail(e.code, str(e)))
                log.exception("unhandled_runtime_error")
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail=error_detail("internal_error",
                                        "unexpected error"))
        return wrapper
    return decorator


async def request_validation_handler(
        request: Request, exc: RequestValidationError) -> JSONResponse:
    # bad bodies and unparsable path/query params are client errors: 400
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST,
        content={"detail": error_detail("bad_request", "invalid request"),
                 "errors": jsonable_encoder(exc.errors())},
    )


async def unexpected_error_handler(
        request: Request, exc: Exception) -> JSONResponse:
    log.exception("unhandled_error", extra={"path": request.url.path})
    return JSONResponse(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        content={"detail": error_detail("internal_error",
                                        "unexpected error")},
    )


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError,
                              request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
