from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from filmorate.domain.exceptions import NotFoundError, ValidationError
from filmorate.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

REQUEST_LOCATIONS = {"body", "query", "path"}


def _field_name(loc) -> str:
    parts = [str(part) for part in loc if part not in REQUEST_LOCATIONS]
    return ".".join(parts) or "request"


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = {}
    for error in exc.errors():
        errors.setdefault(_field_name(error["loc"]), error["msg"])
    logger.warning(f"Request validation failed on {request.url.path}: {errors}")
    return JSONResponse(status_code=HTTPStatus.BAD_REQUEST, content={"detail": errors})


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning(f"Validation error: {exc}")
    return JSONResponse(status_code=HTTPStatus.BAD_REQUEST, content={"detail": str(exc)})


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.warning(f"Not found: {exc}")
    return JSONResponse(status_code=HTTPStatus.NOT_FOUND, content={"detail": str(exc)})


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unexpected error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, content={"detail": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(Exception, handle_unexpected)
