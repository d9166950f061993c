"""
Consolidated middleware for the PlateShare API
"""

import time
import logging
from uuid import uuid4

from bson.errors import BSONError
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import ServiceValidationError, NotFoundError, DatabaseUnavailableError

logger = logging.getLogger("plateshare.middleware")


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
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

        start_time = time.time()

        try:
            response: Response = await call_next(request)
            process_time = time.time() - start_time

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

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"

            return response

        except Exception as exc:
            process_time = time.time() - start_time
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
            raise


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Path or query parameters FastAPI could not validate"""
    logger.warning(f"Validation error on {request.url}: {jsonable_encoder(exc.errors())}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Request validation failed"},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Unknown routes, unsupported methods and explicit HTTPExceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def service_validation_exception_handler(
    request: Request, exc: ServiceValidationError
):
    """Missing or malformed required field"""
    logger.warning(
        f"Service validation error on {request.url}: {str(exc)} details={exc.details}"
    )

    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


async def not_found_exception_handler(request: Request, exc: NotFoundError):
    """Document addressed by identifier does not exist"""
    logger.warning(f"Resource not found on {request.url}: {str(exc)}")

    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


async def database_exception_handler(request: Request, exc: Exception):
    """
    Driver failures and malformed identifiers.
    The underlying message is returned verbatim.
    """
    logger.error(f"Database error on {request.url}: {exc!r}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc)},
    )


async def database_unavailable_handler(request: Request, exc: DatabaseUnavailableError):
    """No database handle was configured at startup"""
    logger.error(f"Database unavailable on {request.url}")

    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc) or exc.__class__.__name__},
    )


DATABASE_EXCEPTIONS = (PyMongoError, BSONError)
