"""
Consolidated middleware for the Lenslocked API
"""

import time
import logging
from datetime import datetime, timezone
from uuid import uuid4

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import GENERIC_MESSAGE, ModelError, PublicError, public_message

logger = logging.getLogger("lenslocked.middleware")


# ============================================================================
# Helper Functions
# ============================================================================


def error_body(code: str, message: str, details=None) -> dict:
    """Standard error envelope shared by every handler"""
    error = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {
        "success": False,
        "error": error,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        # Generate unique request ID
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            "request_started request_id=%s method=%s path=%s",
            request_id,
            request.method,
            request.url.path,
        )

        start_time = time.time()

        try:
            response: Response = await call_next(request)
        except Exception:
            process_time = time.time() - start_time
            logger.error(
                "request_failed request_id=%s method=%s path=%s process_time=%.4fs",
                request_id,
                request.method,
                request.url.path,
                process_time,
                exc_info=True,
            )
            raise

        process_time = time.time() - start_time
        logger.info(
            "request_completed request_id=%s status_code=%s process_time=%.4fs",
            request_id,
            response.status_code,
            process_time,
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        return response


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors"""
    logger.warning("validation_error path=%s errors=%s", request.url.path, exc.errors())

    return JSONResponse(
        status_code=422,
        content=error_body(
            "VALIDATION_ERROR",
            "Request validation failed",
            jsonable_encoder(exc.errors()),
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning("http_error status=%s path=%s detail=%s", exc.status_code, request.url.path, exc.detail)

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(f"HTTP_{exc.status_code}", str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def model_error_handler(request: Request, exc: ModelError):
    """
    Render data-access errors.

    Public errors are shown with their formatted message; private errors are
    logged in full and replaced with the generic message.
    """
    if isinstance(exc, PublicError):
        logger.warning("public_error code=%s path=%s", exc.code, request.url.path)
        return JSONResponse(
            status_code=exc.http_status,
            content=error_body(exc.code, exc.public()),
        )

    public_message(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("INTERNAL_SERVER_ERROR", GENERIC_MESSAGE),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception("unexpected_error path=%s error=%s", request.url.path, exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("INTERNAL_SERVER_ERROR", GENERIC_MESSAGE),
    )
