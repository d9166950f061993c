"""
PlateShare FastAPI Application
Main entry point: configuration, logging, middleware and route registration
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio
from typing import Optional, Tuple

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from api.routes import users, foods, requests, health
from adapters import mongo_adapter
from app.config import settings
from api.middleware import (
    DATABASE_EXCEPTIONS,
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    service_validation_exception_handler,
    not_found_exception_handler,
    database_exception_handler,
    database_unavailable_handler,
    general_exception_handler,
)
from app.exceptions import ServiceValidationError, NotFoundError, DatabaseUnavailableError
from services import UserService

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("plateshare.main")


def open_database() -> Tuple[MongoClient, Database]:
    """
    Connect with the configured settings and ensure indexes.
    Blocking; the lifespan runs it in a worker thread.
    """
    client, db = mongo_adapter.connect(
        settings.resolved_mongo_uri(),
        settings.mongo_db_name,
        timeout_ms=settings.mongo_timeout_ms,
    )
    try:
        UserService.ensure_indexes(db)
    except PyMongoError as e:
        _logger.error("Could not ensure MongoDB indexes: %s", e)
    return client, db


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Connects to MongoDB unless a database was injected at construction.
    A failed connection is logged and the server keeps serving.
    """
    _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")

    client = None
    if app.state.database is None:
        try:
            # Run blocking connect and ping in a thread to avoid blocking the event loop
            client, app.state.database = await anyio.to_thread.run_sync(open_database)
        except Exception as e:
            _logger.error("Failed to initialize MongoDB client; serving without it: %s", e)

    try:
        yield
    finally:
        _logger.info(f"Shutting down {settings.app_name}")
        await anyio.to_thread.run_sync(mongo_adapter.close, client)


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Build the application.

    Args:
        database: database handle shared by every request. When omitted, the
            lifespan connects using the configured settings.
    """
    app = FastAPI(
        title=settings.api_title,
        version=settings.app_version,
        description=settings.api_description,
        lifespan=lifespan,
        debug=settings.debug,
        openapi_url=(
            f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
        ),
        docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
        redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
    )
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(ServiceValidationError, service_validation_exception_handler)
    app.add_exception_handler(NotFoundError, not_found_exception_handler)
    for exc_class in DATABASE_EXCEPTIONS:
        app.add_exception_handler(exc_class, database_exception_handler)
    app.add_exception_handler(DatabaseUnavailableError, database_unavailable_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(users.router, prefix=settings.api_prefix)
    app.include_router(foods.router, prefix=settings.api_prefix)
    app.include_router(requests.router, prefix=settings.api_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
