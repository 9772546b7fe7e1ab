"""
Consolidated middleware and exception handlers for the NutriBreak API
"""

import time
import logging
from uuid import uuid4
from decimal import Decimal

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from api.responses import error_body
from app.exceptions import (
    ServiceValidationError,
    NotFoundError,
    ConflictError,
    IdentityChangeError,
)

logger = logging.getLogger("nutribreak.middleware")


# ============================================================================
# Helper Functions
# ============================================================================


def make_serializable(obj):
    """Convert objects to JSON-serializable format"""
    if isinstance(obj, Decimal):
        return float(obj)
    elif isinstance(obj, dict):
        return {k: make_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [make_serializable(item) for item in obj]
    elif isinstance(obj, Exception):
        return str(obj)
    return obj


# ============================================================================
# Request Logging / Tracing Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with a request id and timing, and tag the response"""

    def __init__(self, app, supported_versions: str = "1.0"):
        super().__init__(app)
        self.supported_versions = supported_versions

    async def dispatch(self, request: Request, call_next):
        # Reuse the caller's id when present so traces can be joined
        request_id = request.headers.get("X-Request-ID") or str(uuid4())
        request.state.request_id = request_id

        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "url": str(request.url),
                "client": request.client.host if request.client else None,
            },
        )

        start_time = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception as exc:
            process_time = time.perf_counter() - start_time
            logger.error(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "error": str(exc),
                    "process_time": f"{process_time:.4f}s",
                },
                exc_info=True,
            )
            response = await general_exception_handler(request, exc)
            return self._tag(response, request_id, process_time)

        process_time = time.perf_counter() - start_time
        logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "method": request.method,
                "url": str(request.url),
                "status_code": response.status_code,
                "process_time": f"{process_time:.4f}s",
            },
        )

        return self._tag(response, request_id, process_time)

    def _tag(self, response: Response, request_id: str, process_time: float) -> Response:
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        response.headers["api-supported-versions"] = self.supported_versions
        return response


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors"""
    logger.warning(f"Validation error on {request.url}: {exc.errors()}")

    return JSONResponse(
        status_code=422,
        content=error_body(
            "VALIDATION_ERROR",
            "Request validation failed",
            make_serializable(exc.errors()),
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(f"HTTP_{exc.status_code}", str(exc.detail)),
    )


async def service_validation_exception_handler(
    request: Request, exc: ServiceValidationError
):
    """Handle service validation errors"""
    logger.warning(f"Service validation error on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            exc.code or "SERVICE_VALIDATION_ERROR", str(exc), exc.details
        ),
    )


async def not_found_exception_handler(request: Request, exc: NotFoundError):
    """Handle not found errors"""
    logger.warning(f"Resource not found on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_body("NOT_FOUND", str(exc)),
    )


async def conflict_exception_handler(request: Request, exc: ConflictError):
    logger.warning(f"Conflict on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=error_body(exc.code or "CONFLICT", str(exc), exc.details),
    )


async def integrity_error_handler(request: Request, exc: IntegrityError):
    """Constraint violations raised by PersistenceContext.save()"""
    logger.warning(f"Constraint violation on {request.url}: {exc.orig}")

    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=error_body(
            "CONSTRAINT_VIOLATION", "The change violates a database constraint"
        ),
    )


async def identity_change_handler(request: Request, exc: IdentityChangeError):
    logger.warning(f"Identity change rejected on {request.url}: {exc}")

    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=error_body("CONSTRAINT_VIOLATION", str(exc)),
    )


async def stale_data_handler(request: Request, exc: StaleDataError):
    """Concurrent write detected by the ORM"""
    logger.warning(f"Concurrency conflict on {request.url}: {exc}")

    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=error_body(
            "CONCURRENCY_CONFLICT",
            "The resource was modified or deleted by another request",
        ),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("INTERNAL_SERVER_ERROR", "An unexpected error occurred"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(ServiceValidationError, service_validation_exception_handler)
    app.add_exception_handler(NotFoundError, not_found_exception_handler)
    app.add_exception_handler(ConflictError, conflict_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(IdentityChangeError, identity_change_handler)
    app.add_exception_handler(StaleDataError, stale_data_handler)
    app.add_exception_handler(Exception, general_exception_handler)
