import traceback
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from sqlalchemy.exc import SQLAlchemyError
from framework.logging.logger import get_logger
from framework.response import ResponseModel
from typing import Any
from framework.config import settings

logger = get_logger("exception_handler")

class BusinessException(Exception):
    """Base class for business exceptions."""
    def __init__(self, message: str, status_code: int = 200, code: int = 400, detail: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.detail = detail


class NotFoundException(BusinessException):
    """Entity absent for the given id."""
    def __init__(self, message: str = "Not found"):
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND, code=404)


class BadRequestException(BusinessException):
    """Malformed request: missing payload, mismatched ids, bad paging parameters."""
    def __init__(self, message: str = "Bad request", detail: Any = None):
        super().__init__(message, status_code=status.HTTP_400_BAD_REQUEST, code=400, detail=detail)


class ValidationException(BadRequestException):
    """Payload failed field validation; detail holds the violations."""
    def __init__(self, violations: list, message: str = "Validation failed"):
        super().__init__(message, detail=violations)
        self.violations = violations


def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    trace_id = getattr(request.state, "trace_id", "unknown")

    if isinstance(exc, BusinessException):
        logger.warning(f"Trace[{trace_id}] - BusinessError: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=ResponseModel.fail(code=exc.code, message=exc.message, data=jsonable_encoder(exc.detail))
        )

    if isinstance(exc, RequestValidationError):
        logger.error(f"Trace[{trace_id}] - ValidationError: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=ResponseModel.fail(code=422, message="Invalid request parameters", data=jsonable_encoder(exc.errors()))
        )

    if isinstance(exc, SQLAlchemyError):
        logger.critical(f"Trace[{trace_id}] - DatabaseError: {str(exc)}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ResponseModel.fail(
                code=500,
                message="Service temporarily unavailable",
                data=_debug_data(trace_id, exc)
            )
        )

    logger.opt(exception=exc).error(f"Trace[{trace_id}] - UncaughtException: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ResponseModel.fail(
            code=500,
            message="System busy, please try again later",
            data=_debug_data(trace_id, exc)
        )
    )


def _debug_data(trace_id: str, exc: Exception):
    # Stack traces are only exposed in DEBUG
    if not settings.DEBUG:
        return None
    return {
        "trace_id": trace_id,
        "error": str(exc),
        "trace": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
    }
