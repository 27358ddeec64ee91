"""
Consolidated middleware for the NutriTrack API
"""

import time
import logging
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import AppError

logger = logging.getLogger("nutritrack.middleware")


# ============================================================================
# Helper Functions
# ============================================================================


def error_response(
    status_code: int, code: str, message: str, details: Optional[Any] = None
) -> JSONResponse:
    """Build the error envelope shared by every handler"""
    error = {"code": code, "message": message}
    if details:
        error["details"] = jsonable_encoder(details)
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "message": message,
            "error": error,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


def _summarise_validation(errors: list) -> str:
    """First field error as a readable sentence, e.g. 'email: Field required'"""
    if not errors:
        return "Request validation failed"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(location)
    text = first.get("msg", "Invalid value")
    return f"{field}: {text}" if field else text


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            f"Request started {request.method} {request.url.path}",
            extra={
                "request_id": request_id,
                "client": request.client.host if request.client else None,
            },
        )

        start_time = time.time()
        try:
            response: Response = await call_next(request)
        except Exception as exc:
            process_time = time.time() - start_time
            logger.error(
                f"Request failed {request.method} {request.url.path}",
                extra={
                    "request_id": request_id,
                    "error": str(exc),
                    "process_time": f"{process_time:.4f}s",
                },
                exc_info=True,
            )
            raise

        process_time = time.time() - start_time
        logger.info(
            f"Request completed {request.method} {request.url.path} {response.status_code}",
            extra={
                "request_id": request_id,
                "status_code": response.status_code,
                "process_time": f"{process_time:.4f}s",
            },
        )
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        return response


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request schema errors; reported as 400 like any other bad input"""
    errors = exc.errors()
    logger.warning(f"Validation error on {request.url.path}: {errors}")
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_ERROR",
        _summarise_validation(errors),
        details=[
            {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
            for err in errors
        ],
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}")
    return error_response(exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail))


async def app_exception_handler(request: Request, exc: AppError):
    """Handle service errors, using the status carried by the exception"""
    logger.warning(
        f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}"
    )
    return error_response(exc.http_status, exc.code, exc.message, details=exc.details)


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url.path}: {str(exc)}")
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred",
    )
